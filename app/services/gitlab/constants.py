"""Constants for GitLab service."""

DEFAULT_API_BASE = "https://gitlab.com/api/v4"
API_PATH = "/api/v4"

# Host (or URL) must contain this to be accepted as a GitLab repository
GITLAB_URL_MARKER = "gitlab"

MIN_TOKEN_LENGTH = 10

# Per-request timeouts (seconds)
TREE_TIMEOUT = 10.0
FILE_TIMEOUT = 15.0
PROBE_TIMEOUT = 10.0

TREE_PAGE_SIZE = 100

# Shared client defaults; per-request timeouts above take precedence
CLIENT_TIMEOUT = 30.0
CONNECT_TIMEOUT = 5.0
MAX_CONNECTIONS = 20
MAX_KEEPALIVE_CONNECTIONS = 10
USER_AGENT = "docs-copilot-backend"
