# Environment variables
ENV_GITLAB_PAT = "GITLAB_PAT"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_GITHUB_API_VERSION = "GITHUB_API_VERSION"
ENV_CONFIG_FILE = "REPO_API_CONFIG"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_API_VERSION = "X-GitHub-Api-Version"

# Content types
APPLICATION_JSON = "application/json"
ACCEPT_VALUE = "application/vnd.github+json"

# Defaults
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_CONFIG_FILE = "repository-api.yaml"
UNKNOWN_ERROR_BODY = "Unknown error"
