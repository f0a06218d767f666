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


class EnumProbe(str, Enum):
    """Names under which probes are registered and exposed."""

    CONFIG_SERVER = "config_server"
    RPC = "rpc"
    DISCOVERY = "discovery"
    DATASOURCE = "datasource"
    MONGO = "mongo"
    REDIS = "redis"
    ZOOKEEPER = "zookeeper"


# Detail key carrying the duration of the timed call, in milliseconds.
TIME_DETAIL_KEY = "time_ms"

# Detail value used when a probe has no client to call.
UNKNOWN_DETAIL_VALUE = "unknown"
