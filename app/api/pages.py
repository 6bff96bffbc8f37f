"""HTML page routes: storefront and the dashboard/admin shells.

Access control for /dashboard and /admin lives in the tenant routing
middleware; these routes only render.
"""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import get_material_line_config, get_optional_user
from app.application.dtos.material_line import MaterialLineConfig
from app.application.dtos.user import AuthUser
from app.core.config import get_settings
from app.pages import render_dashboard_page, render_storefront_page

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def storefront(
    config: MaterialLineConfig = Depends(get_material_line_config),
) -> HTMLResponse:
    """Visualizer landing page for the material line served at this host."""
    return HTMLResponse(render_storefront_page(config, get_settings().supabase_url))


@router.get("/dashboard")
def dashboard_home(user: AuthUser | None = Depends(get_optional_user)) -> HTMLResponse:
    return HTMLResponse(render_dashboard_page("Organizations", user))


@router.get("/dashboard/login")
def dashboard_login(next: str = "/dashboard") -> HTMLResponse:
    body = f'<p data-next="{escape(next)}">Sign in with your email to continue.</p>'
    return HTMLResponse(render_dashboard_page("Sign in", None, body))


@router.get("/dashboard/signup")
def dashboard_signup() -> HTMLResponse:
    return HTMLResponse(render_dashboard_page("Create an account", None))


@router.get("/dashboard/invitations/{token}")
def accept_invitation(
    token: str, user: AuthUser | None = Depends(get_optional_user)
) -> HTMLResponse:
    body = f'<p data-invitation="{escape(token)}">You have been invited to join an organization.</p>'
    return HTMLResponse(render_dashboard_page("Accept invitation", user, body))


@router.get("/dashboard/organizations/{org_id}")
def organization(
    org_id: str, user: AuthUser | None = Depends(get_optional_user)
) -> HTMLResponse:
    body = f'<p data-organization="{escape(org_id)}">Material lines, team and analytics.</p>'
    return HTMLResponse(render_dashboard_page("Organization", user, body))


@router.get("/admin")
def admin_home(user: AuthUser | None = Depends(get_optional_user)) -> HTMLResponse:
    return HTMLResponse(render_dashboard_page("Admin", user))
