"""DTOs for material line branding (no dependency on HTTP or persistence)."""

from dataclasses import dataclass, field

from app.domain.entities.material_line import KitchenImage


@dataclass(frozen=True)
class MaterialLineConfig:
    """Branding read-model consumed by the rendering layer.

    Built from the propagated context; every field is populated, with
    defaults substituted for anything missing. logo_url None means no logo.
    """

    id: str
    organization_id: str
    slug: str
    name: str
    logo_url: str | None
    primary_color: str
    accent_color: str
    background_color: str
    supabase_folder: str
    kitchen_images: tuple[KitchenImage, ...] = field(default_factory=tuple)

    @property
    def is_default(self) -> bool:
        """True when no material line was resolved for the request."""
        return self.id == DEFAULT_MATERIAL_LINE_ID


DEFAULT_MATERIAL_LINE_ID = "default"

# Branding used on the root/marketing host, on localhost, and whenever resolution fails.
DEFAULT_MATERIAL_LINE_CONFIG = MaterialLineConfig(
    id=DEFAULT_MATERIAL_LINE_ID,
    organization_id="default",
    slug="default",
    name="Countertop Visualizer",
    logo_url="/AccentCountertopsLogo.png",
    primary_color="#2563eb",
    accent_color="#f59e0b",
    background_color="#ffffff",
    supabase_folder="accent-countertops",
)
