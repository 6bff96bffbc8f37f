"""Storefront landing page, themed with the resolved material line's branding."""

from html import escape

from app.application.dtos.material_line import MaterialLineConfig
from app.application.services.branding import (
    generate_theme_styles,
    kitchen_image_title,
    kitchen_image_url,
)


def _kitchen_gallery(config: MaterialLineConfig, supabase_url: str) -> str:
    if not config.kitchen_images or not supabase_url:
        return ""
    items = "\n".join(
        f'            <figure><img src="{escape(kitchen_image_url(supabase_url, config.supabase_folder, image.filename))}" '
        f'alt="{escape(kitchen_image_title(image))}"><figcaption>{escape(kitchen_image_title(image))}</figcaption></figure>'
        for image in config.kitchen_images
    )
    return f"""
        <section class="kitchens">
            <h2>1. Pick a kitchen or upload your own</h2>
            <div class="grid">
{items}
            </div>
        </section>"""


def render_storefront_page(config: MaterialLineConfig, supabase_url: str = "") -> str:
    """Return HTML for the visualizer landing page of one material line."""
    name = escape(config.name)
    logo = (
        f'<img class="logo" src="{escape(config.logo_url)}" alt="{name} logo">'
        if config.logo_url
        else ""
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
{generate_theme_styles(config)}
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            background: var(--color-bg);
            color: #111827;
        }}
        header {{
            display: flex;
            align-items: center;
            gap: 1rem;
            padding: 1rem 2rem;
            background: var(--color-bg-secondary);
            border-bottom: 3px solid var(--color-primary);
        }}
        .logo {{ max-height: 48px; }}
        main {{ max-width: 960px; margin: 0 auto; padding: 2rem 1rem; }}
        .grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 1rem; }}
        figure {{ margin: 0; background: var(--color-bg-card); border-radius: 8px; overflow: hidden; }}
        figure img {{ width: 100%; display: block; }}
        figcaption {{ padding: 0.5rem; }}
        .cta {{
            display: inline-block;
            padding: 0.75rem 1.5rem;
            background: var(--color-primary);
            color: #fff;
            border-radius: 6px;
            text-decoration: none;
        }}
        .cta:hover {{ background: var(--color-primary-dark); }}
    </style>
</head>
<body data-material-line="{escape(config.id)}">
    <header>
        {logo}
        <h1>{name}</h1>
    </header>
    <main>
        <p>See a new countertop in your own kitchen before you buy.</p>{_kitchen_gallery(config, supabase_url)}
        <p><a class="cta" href="#upload">Start visualizing</a></p>
    </main>
</body>
</html>
"""
