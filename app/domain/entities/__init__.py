"""Domain entities and aggregates.

Pure domain models; no persistence or HTTP concerns.
"""

from app.domain.entities.material_line import KitchenImage, MaterialLine

__all__ = [
    "KitchenImage",
    "MaterialLine",
]
