from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Upstream services used when no override is configured
DEFAULT_IP_ECHO_URL = "https://api.ipify.org"
DEFAULT_GEO_URL = "https://freegeoip.app"
DEFAULT_PASS_URL = "http://api.open-notify.org"

# Matches httpx's own default so an unset value behaves like a bare client
DEFAULT_HTTP_TIMEOUT_SECONDS = 5.0
