"""
Dependency container injection module - Main Layer

This module wires configured client handles into the probes and exposes
the probe registry and use cases to the presentation layer.
"""

import asyncio
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from health_probes.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
    GetProbeReportUseCase,
)
from health_probes.infrastructure.clients import (
    build_http_client,
    build_mongo_database,
    build_redis_client,
    build_sql_engine,
    build_zookeeper_client,
    close_quietly,
)
from health_probes.infrastructure.probes import (
    ConfigServerProbe,
    DataSourceProbe,
    DiscoveryProbe,
    MongoProbe,
    ProbeRegistry,
    RedisProbe,
    RpcProbe,
    ZookeeperProbe,
)
from health_probes.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from health_probes.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _database_handle(mongo_database):
    return mongo_database.db if mongo_database is not None else None


def _collect_probes(*probes) -> ProbeRegistry:
    return ProbeRegistry(probes)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Clients
    config_server_http_client = providers.Singleton(
        build_http_client,
        timeout=config.config_server.timeout,
    )

    discovery_http_client = providers.Singleton(
        build_http_client,
        timeout=config.discovery.timeout,
    )

    mongo_database = providers.Singleton(
        build_mongo_database,
        mongo_uri=config.mongo.uri,
        database_name=config.mongo.database_name,
        timeout_ms=config.mongo.timeout_ms,
    )

    redis_client = providers.Singleton(
        build_redis_client,
        url=config.redis.url,
        cluster=config.redis.cluster,
        socket_timeout=config.redis.socket_timeout,
    )

    sql_engine = providers.Singleton(
        build_sql_engine,
        url=config.datasource.url,
    )

    zookeeper_client = providers.Singleton(
        build_zookeeper_client,
        hosts=config.zookeeper.hosts,
        timeout=config.zookeeper.timeout,
    )

    # Framework clients owned by the host application; override with live handles.
    rpc_framework = providers.Object(None)
    discovery_client = providers.Object(None)

    # Probes
    config_server_probe = providers.Singleton(
        ConfigServerProbe,
        http_client=config_server_http_client,
        uris=config.config_server.uris,
        config_name=config.config_server.name,
        profile=config.config_server.profile,
    )

    rpc_probe = providers.Singleton(
        RpcProbe,
        framework=rpc_framework,
        echo_checks=config.rpc.echo_checks,
    )

    discovery_probe = providers.Singleton(
        DiscoveryProbe,
        discovery_client=discovery_client,
        http_client=discovery_http_client,
        required_applications=config.discovery.required_applications,
        info_endpoint_overrides=config.discovery.info_endpoint_overrides,
    )

    datasource_probe = providers.Singleton(
        DataSourceProbe,
        engine=sql_engine,
        query=config.datasource.validation_query,
    )

    mongo_probe = providers.Singleton(
        MongoProbe,
        database=providers.Callable(_database_handle, mongo_database),
        collection=config.mongo.collection,
    )

    redis_probe = providers.Singleton(
        RedisProbe,
        client=redis_client,
    )

    zookeeper_probe = providers.Singleton(
        ZookeeperProbe,
        client=zookeeper_client,
    )

    probe_registry = providers.Singleton(
        _collect_probes,
        config_server_probe,
        rpc_probe,
        discovery_probe,
        datasource_probe,
        mongo_probe,
        redis_probe,
        zookeeper_probe,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        probe_registry=probe_registry,
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_probe_report_use_case = providers.Factory(
        GetProbeReportUseCase,
        health_check_service=health_check_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for probed clients.

    Starts the coordination client (other drivers connect lazily) and
    releases every client on shutdown. A dependency that cannot be reached
    at startup is logged; its probe reports it as DOWN.
    """
    container = get_container()

    zookeeper_client = container.zookeeper_client()
    if zookeeper_client is not None:
        try:
            await asyncio.to_thread(zookeeper_client.start)
            logger.info("container.zookeeper.started")
        except Exception as exc:
            logger.warning("container.zookeeper.start_failed", error=str(exc))

    try:
        logger.info(
            "container.resources.initialized",
            probes=container.probe_registry().names,
        )
        yield container

    finally:
        logger.info("container.resources.close")
        close_quietly(zookeeper_client, "zookeeper")
        close_quietly(container.mongo_database(), "mongo")
        close_quietly(container.redis_client(), "redis")
        close_quietly(container.sql_engine(), "datasource")
        close_quietly(container.config_server_http_client(), "config_server")
        close_quietly(container.discovery_http_client(), "discovery")
        logger.info("container.resources.shutdown")
