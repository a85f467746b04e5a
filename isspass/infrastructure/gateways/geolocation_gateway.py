"""IP geolocation gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict

from isspass.domain.entities.passes import Coordinates, IPAddress
from isspass.domain.gateways.geolocation_gateway import IGeolocationGateway
from isspass.infrastructure.gateways.base import JsonHttpGateway
from isspass.shared import get_logger

logger = get_logger(__name__)


class GeolocationGateway(JsonHttpGateway, IGeolocationGateway):
    """HTTP client for a freegeoip-compatible geolocation service."""

    log_prefix = "geolocation"
    operation = "fetching coordinates"

    async def resolve_coordinates(self, ip: IPAddress) -> Coordinates:
        url = f"{self.base_url}/json/{ip}"
        payload = await self._get_json(url)

        coords = self._to_domain(payload, url)
        logger.info(
            "geolocation.resolved",
            ip=ip,
            latitude=coords.latitude,
            longitude=coords.longitude,
        )
        return coords

    def _to_domain(self, payload: Dict[str, Any], url: str) -> Coordinates:
        latitude = self._require_field(payload, "latitude", url)
        longitude = self._require_field(payload, "longitude", url)
        # Numbers are kept in their textual form, never re-encoded
        return Coordinates(latitude=str(latitude), longitude=str(longitude))
