"""Project-wide constants (service limits, API prefix, environment names)."""

API_PREFIX: str = "/v1"

MAX_FILES_PER_CONTAINER: int = 1024
MAX_PATH_BYTES: int = 1024
MAX_PASSWORD_BYTES: int = 1024
MIN_BILLED_FILE_BYTES: int = 1024  # files smaller than this are billed as 1 KiB

DEFAULT_SCHEME: str = "https"
DEFAULT_HOST: str = "http://localhost:8000"

HOST_ENV_VAR: str = "STRONGBOX_HOST"
TIMEOUT_ENV_VAR: str = "STRONGBOX_TIMEOUT"
LOG_LEVEL_ENV_VAR: str = "LOG_LEVEL"
