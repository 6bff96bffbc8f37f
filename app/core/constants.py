"""Core constants: routing prefixes, propagated header names, cache TTL.

Single source of truth for the header contract between the routing
middleware and the rendering layer (DRY).
"""

# Tenant cache: fixed TTL, age-only expiry.
TENANT_CACHE_TTL_SECONDS = 60.0

# Upper bound on kitchen (reference) images attached to a material line.
MAX_KITCHEN_IMAGES = 3

# Authenticated area
DASHBOARD_PREFIX = "/dashboard"
ADMIN_PREFIX = "/admin"
AUTHENTICATED_PREFIXES = (DASHBOARD_PREFIX, ADMIN_PREFIX)
DASHBOARD_HOME_PATH = "/dashboard"
LOGIN_PATH = "/dashboard/login"
SIGNUP_PATH = "/dashboard/signup"
INVITATIONS_PREFIX = "/dashboard/invitations/"
LOGIN_NEXT_PARAM = "next"

# Paths that bypass the routing gate entirely (framework assets).
BYPASS_PATH_PREFIXES = ("/_next", "/static", "/favicon.ico")

# Hosts treated as local development.
LOCAL_HOST_MARKERS = ("localhost", "127.0.0.1")

# Propagated material line context (lowercase; HTTP header names).
HEADER_MATERIAL_LINE_ID = "x-material-line-id"
HEADER_ORGANIZATION_ID = "x-organization-id"
HEADER_SLUG = "x-material-line-slug"
HEADER_NAME = "x-material-line-name"
HEADER_LOGO = "x-material-line-logo"
HEADER_PRIMARY_COLOR = "x-material-line-primary-color"
HEADER_ACCENT_COLOR = "x-material-line-accent-color"
HEADER_BACKGROUND_COLOR = "x-material-line-background-color"
HEADER_FOLDER = "x-material-line-folder"
HEADER_KITCHEN_IMAGES = "x-material-line-kitchen-images"

MATERIAL_LINE_HEADERS = (
    HEADER_MATERIAL_LINE_ID,
    HEADER_ORGANIZATION_ID,
    HEADER_SLUG,
    HEADER_NAME,
    HEADER_LOGO,
    HEADER_PRIMARY_COLOR,
    HEADER_ACCENT_COLOR,
    HEADER_BACKGROUND_COLOR,
    HEADER_FOLDER,
    HEADER_KITCHEN_IMAGES,
)

# Supabase tables
TABLE_MATERIAL_LINES = "material_lines"
TABLE_KITCHEN_IMAGES = "kitchen_images"
