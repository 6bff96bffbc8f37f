"""Material line API schemas."""

from pydantic import BaseModel, Field


class KitchenImageResponse(BaseModel):
    """Kitchen image offered on the storefront."""

    id: str
    filename: str
    title: str = Field(..., description="Explicit title or one derived from the filename")
    order: int = 0


class MaterialLineResponse(BaseModel):
    """Branding of the material line resolved for the request host."""

    id: str
    organization_id: str
    slug: str
    name: str
    logo_url: str | None = Field(None, description="None when the line has no logo")
    primary_color: str
    accent_color: str
    background_color: str
    supabase_folder: str
    is_default: bool = Field(..., description="True when no material line was resolved")
    kitchen_images: list[KitchenImageResponse] = Field(default_factory=list)
    theme_css: str = Field(..., description="CSS :root variables for the theme")
