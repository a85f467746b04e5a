"""
Dependency container injection module - Main Layer

Composition root wiring settings, gateways and use cases together
with dependency-injector.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from isspass.application.models import SystemInfo
from isspass.application.use_cases.pass_use_cases import (
    NextPassesForCurrentLocationUseCase,
)
from isspass.application.use_cases.system_use_cases import GetApplicationInfoUseCase
from isspass.infrastructure.gateways.geolocation_gateway import GeolocationGateway
from isspass.infrastructure.gateways.ip_resolver_gateway import IpResolverGateway
from isspass.infrastructure.gateways.pass_prediction_gateway import (
    PassPredictionGateway,
)
from isspass.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Gateways
    ip_resolver_gateway = providers.Singleton(
        IpResolverGateway,
        base_url=config.upstream.ip_echo_url,
        timeout=config.upstream.timeout_seconds,
    )

    geolocation_gateway = providers.Singleton(
        GeolocationGateway,
        base_url=config.upstream.geo_url,
        timeout=config.upstream.timeout_seconds,
    )

    pass_prediction_gateway = providers.Singleton(
        PassPredictionGateway,
        base_url=config.upstream.pass_url,
        timeout=config.upstream.timeout_seconds,
    )

    # Application (use cases)
    next_passes_use_case = providers.Factory(
        NextPassesForCurrentLocationUseCase,
        ip_resolver_gateway=ip_resolver_gateway,
        geolocation_gateway=geolocation_gateway,
        pass_prediction_gateway=pass_prediction_gateway,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.app.title,
        description=config.app.description,
        version=config.app.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        ip_echo_url=config.upstream.ip_echo_url,
        geo_url=config.upstream.geo_url,
        pass_url=config.upstream.pass_url,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        system_info=system_info,
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
    Lifecycle hook for the FastAPI lifespan.

    Gateways open one client per request, so there is nothing to connect
    or close; the hook only exposes the container and logs the upstreams
    in use.
    """
    container = get_container()

    logger.info(
        "container.resources.initialized",
        ip_echo_url=container.config.upstream.ip_echo_url(),
        geo_url=container.config.upstream.geo_url(),
        pass_url=container.config.upstream.pass_url(),
    )
    try:
        yield container
    finally:
        logger.info("container.resources.released")
