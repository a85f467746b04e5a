"""ISS pass prediction gateway implementation - Infrastructure layer."""

from __future__ import annotations

from isspass.domain.entities.errors import ParseError
from isspass.domain.entities.passes import Coordinates, PassList
from isspass.domain.gateways.pass_prediction_gateway import IPassPredictionGateway
from isspass.infrastructure.gateways.base import JsonHttpGateway
from isspass.shared import get_logger

logger = get_logger(__name__)


class PassPredictionGateway(JsonHttpGateway, IPassPredictionGateway):
    """HTTP client for the open-notify ``iss-pass.json`` endpoint."""

    log_prefix = "pass_prediction"
    operation = "fetching ISS pass times"

    async def predict_passes(self, coords: Coordinates) -> PassList:
        url = f"{self.base_url}/iss-pass.json"
        payload = await self._get_json(
            url, params={"lat": coords.latitude, "lon": coords.longitude}
        )

        passes = self._require_field(payload, "response", url)
        if not isinstance(passes, list):
            raise ParseError(
                url, "Field 'response' is not a list of passes", "response"
            )

        logger.info("pass_prediction.received", count=len(passes))
        return passes
