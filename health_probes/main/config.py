"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Connection settings left empty mean the dependency is not configured and
its probe reports "unknown" instead of calling it.
"""

from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from health_probes.shared import EnumEnvironment, EnumLogLevel
from health_probes.shared.env import load_secret_file_variables  # noqa: F401


class AppInfoSettings(BaseSettings):
    """HTTP service metadata."""

    title: str = Field(default="Health Probes", description="Service title")
    description: str = Field(
        default="Liveness probes for the platform's shared dependencies",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class ConfigServerSettings(BaseSettings):
    """Configuration server probe settings."""

    uris: List[str] = Field(
        default_factory=list, description="Configuration server base URIs"
    )
    name: str = Field(default="base", description="Configuration name to fetch")
    profile: str = Field(default="dev", description="Profile to fetch")
    timeout: float = Field(default=5.0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="CONFIG_SERVER_", case_sensitive=False, extra="ignore"
    )


class RpcSettings(BaseSettings):
    """RPC framework probe settings."""

    echo_checks: Dict[str, str] = Field(
        default_factory=dict,
        description="Provider name to remote interface identifier to echo-test",
    )

    model_config = SettingsConfigDict(
        env_prefix="RPC_", case_sensitive=False, extra="ignore"
    )


class DiscoverySettings(BaseSettings):
    """Service-discovery probe settings."""

    required_applications: List[str] = Field(
        default_factory=list,
        description="Applications reported DOWN when absent from the registry",
    )
    info_endpoint_overrides: Dict[str, str] = Field(
        default_factory=dict,
        description="Application name to path replacing /actuator/health",
    )
    timeout: float = Field(
        default=5.0, description="Per-instance HTTP timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="DISCOVERY_", case_sensitive=False, extra="ignore"
    )


class DataSourceSettings(BaseSettings):
    """Relational database probe settings."""

    url: str = Field(default="", description="SQLAlchemy database URL")
    validation_query: Optional[str] = Field(
        default=None, description="Query overriding the per-dialect default"
    )

    model_config = SettingsConfigDict(
        env_prefix="DATASOURCE_", case_sensitive=False, extra="ignore"
    )


class MongoSettings(BaseSettings):
    """Document store probe settings."""

    uri: str = Field(default="", description="MongoDB connection URI")
    database_name: str = Field(default="admin", description="Database to probe")
    collection: str = Field(
        default="request_log", description="Collection counted by the probe"
    )
    timeout_ms: int = Field(
        default=5000, description="Server selection timeout in milliseconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="MONGO_", case_sensitive=False, extra="ignore"
    )


class RedisSettings(BaseSettings):
    """Cache probe settings."""

    url: str = Field(default="", description="Redis connection URL")
    cluster: bool = Field(default=False, description="Connect as a cluster client")
    socket_timeout: float = Field(default=5.0, description="Socket timeout")

    model_config = SettingsConfigDict(
        env_prefix="REDIS_", case_sensitive=False, extra="ignore"
    )


class ZookeeperSettings(BaseSettings):
    """Coordination service probe settings."""

    hosts: str = Field(default="", description="Comma separated host:port list")
    timeout: float = Field(default=10.0, description="Connection timeout")

    model_config = SettingsConfigDict(
        env_prefix="ZOOKEEPER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    config_server: ConfigServerSettings = Field(default_factory=ConfigServerSettings)
    rpc: RpcSettings = Field(default_factory=RpcSettings)
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    datasource: DataSourceSettings = Field(default_factory=DataSourceSettings)
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    zookeeper: ZookeeperSettings = Field(default_factory=ZookeeperSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
