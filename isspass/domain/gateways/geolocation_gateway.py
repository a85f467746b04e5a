"""
Geolocation Gateway Interface - Domain Layer

Contract for locating an IP address.
"""

from abc import ABC, abstractmethod

from isspass.domain.entities.passes import Coordinates, IPAddress


class IGeolocationGateway(ABC):
    """Interface for the IP geolocation service."""

    @abstractmethod
    async def resolve_coordinates(self, ip: IPAddress) -> Coordinates:
        """
        Retrieve the approximate latitude/longitude of ``ip``.

        The address is forwarded as given; malformed input is left for the
        upstream service to reject.

        Raises:
            TransportError, UpstreamError, ParseError
        """
        pass
