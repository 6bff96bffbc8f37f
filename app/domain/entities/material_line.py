"""Material line domain entity.

A material line is one customer-facing storefront: branding, URL slug,
optional verified custom domain and the storage folder holding its
material images.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class KitchenImage:
    """Stock kitchen photo offered in step 1 of the visualizer."""

    id: str
    filename: str
    title: str | None = None
    order: int = 0


@dataclass(frozen=True)
class MaterialLine:
    """Domain entity for a material line (tenant).

    slug is globally unique; custom_domain, when set and verified, resolves
    to exactly one material line. Colors and logo may be None when the row
    never had them set.
    """

    id: str
    organization_id: str
    slug: str
    name: str
    supabase_folder: str
    display_title: str | None = None
    custom_domain: str | None = None
    custom_domain_verified: bool = False
    logo_url: str | None = None
    primary_color: str | None = None
    accent_color: str | None = None
    background_color: str | None = None
    kitchen_images: tuple[KitchenImage, ...] = field(default_factory=tuple)

    @property
    def public_name(self) -> str:
        """Name shown to customers: display_title when set, else the internal name."""
        if self.display_title and self.display_title.strip():
            return self.display_title
        return self.name

    def serves_custom_domain(self, hostname: str) -> bool:
        """Return True only if hostname is this line's custom domain and it is verified."""
        return bool(
            self.custom_domain
            and self.custom_domain_verified
            and self.custom_domain == hostname
        )
