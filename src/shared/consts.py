from enum import Enum

# Secret holding the Application Insights connection string.
DEFAULT_HEALTH_SECRET_NAME = "appInsightsConnectionString"

# Token every valid connection string carries.
DEFAULT_SECRET_MARKER = "IngestionEndpoint"

DEFAULT_ROLE_NAME = "carts-api"


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
