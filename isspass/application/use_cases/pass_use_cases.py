"""
Pass Use Cases - Application Layer

Chains the three lookups that turn "where am I?" into a list of upcoming
ISS passes: public IP, then coordinates, then pass predictions.
"""

from dependency_injector.wiring import Provide, inject

from isspass.domain.entities.passes import PassList
from isspass.domain.gateways.geolocation_gateway import IGeolocationGateway
from isspass.domain.gateways.ip_resolver_gateway import IIpResolverGateway
from isspass.domain.gateways.pass_prediction_gateway import IPassPredictionGateway
from isspass.shared import get_logger

logger = get_logger(__name__)


class NextPassesForCurrentLocationUseCase:
    """Use case for predicting ISS passes over the caller's location."""

    @inject
    def __init__(
        self,
        ip_resolver_gateway: IIpResolverGateway = Provide["ip_resolver_gateway"],
        geolocation_gateway: IGeolocationGateway = Provide["geolocation_gateway"],
        pass_prediction_gateway: IPassPredictionGateway = Provide[
            "pass_prediction_gateway"
        ],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            ip_resolver_gateway: Gateway resolving the public IP address
            geolocation_gateway: Gateway locating an IP address
            pass_prediction_gateway: Gateway predicting passes over coordinates
        """
        self.ip_resolver_gateway = ip_resolver_gateway
        self.geolocation_gateway = geolocation_gateway
        self.pass_prediction_gateway = pass_prediction_gateway

    async def execute(self) -> PassList:
        """
        Run the lookup chain once.

        Each stage runs exactly once and in order. The first failure stops
        the chain and is re-raised as is; no later stage is called and no
        partial result is returned.

        Returns:
            PassList: the pass windows exactly as the prediction service sent them

        Raises:
            PassLookupError: TransportError, UpstreamError or ParseError from
                whichever stage failed first
        """
        logger.info("passes.lookup_started")

        try:
            ip = await self.ip_resolver_gateway.resolve_my_ip()
            logger.debug("passes.have_ip", ip=ip)

            coords = await self.geolocation_gateway.resolve_coordinates(ip)
            logger.debug(
                "passes.have_coordinates",
                latitude=coords.latitude,
                longitude=coords.longitude,
            )

            passes = await self.pass_prediction_gateway.predict_passes(coords)

        except Exception as e:
            logger.error(
                "passes.lookup_failed",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=e,
            )
            raise

        logger.info("passes.lookup_completed", count=len(passes))
        return passes
