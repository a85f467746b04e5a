"""IP echo gateway implementation - Infrastructure layer."""

from __future__ import annotations

from isspass.domain.entities.errors import ParseError
from isspass.domain.entities.passes import IPAddress
from isspass.domain.gateways.ip_resolver_gateway import IIpResolverGateway
from isspass.infrastructure.gateways.base import JsonHttpGateway


class IpResolverGateway(JsonHttpGateway, IIpResolverGateway):
    """HTTP client for an ipify-compatible IP echo service."""

    log_prefix = "ip_resolver"
    operation = "fetching IP"

    async def resolve_my_ip(self) -> IPAddress:
        url = f"{self.base_url}/"
        payload = await self._get_json(url, params={"format": "json"})

        ip = self._require_field(payload, "ip", url)
        if not isinstance(ip, str) or not ip:
            raise ParseError(url, f"Field 'ip' is not a usable address: {ip!r}", "ip")
        return ip
