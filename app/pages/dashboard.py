"""Minimal HTML shells for the dashboard and admin area."""

from html import escape

from app.application.dtos.user import AuthUser


def render_dashboard_page(title: str, user: AuthUser | None, body: str = "") -> str:
    """Return HTML for a dashboard page; body is trusted markup from the route."""
    who = escape(user.email or user.id) if user else "Not signed in"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} · Dashboard</title>
    <style>
        body {{ font-family: system-ui, sans-serif; margin: 0; background: #f9fafb; color: #111827; }}
        nav {{ display: flex; justify-content: space-between; padding: 1rem 2rem; background: #111827; color: #f9fafb; }}
        main {{ max-width: 960px; margin: 0 auto; padding: 2rem 1rem; }}
    </style>
</head>
<body>
    <nav><strong>Dashboard</strong><span class="user">{who}</span></nav>
    <main>
        <h1>{escape(title)}</h1>
        {body}
    </main>
</body>
</html>
"""
