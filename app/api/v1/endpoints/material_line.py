"""Material line API: branding for the host the request was made on."""

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_material_line_config
from app.application.dtos.material_line import MaterialLineConfig
from app.application.services.branding import generate_theme_styles, kitchen_image_title
from app.schemas.material_line import KitchenImageResponse, MaterialLineResponse

router = APIRouter()


@router.get("", response_model=MaterialLineResponse)
def get_current_material_line(
    config: MaterialLineConfig = Depends(get_material_line_config),
) -> MaterialLineResponse:
    """Return the resolved material line's branding (default branding when none)."""
    return MaterialLineResponse(
        id=config.id,
        organization_id=config.organization_id,
        slug=config.slug,
        name=config.name,
        logo_url=config.logo_url,
        primary_color=config.primary_color,
        accent_color=config.accent_color,
        background_color=config.background_color,
        supabase_folder=config.supabase_folder,
        is_default=config.is_default,
        kitchen_images=[
            KitchenImageResponse(
                id=image.id,
                filename=image.filename,
                title=kitchen_image_title(image),
                order=image.order,
            )
            for image in config.kitchen_images
        ],
        theme_css=generate_theme_styles(config),
    )
