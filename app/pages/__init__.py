"""Server-rendered HTML pages."""

from app.pages.dashboard import render_dashboard_page
from app.pages.storefront import render_storefront_page

__all__ = ["render_dashboard_page", "render_storefront_page"]
