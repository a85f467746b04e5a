"""
IP Resolver Gateway Interface - Domain Layer

Contract for discovering the caller's public IP address.
"""

from abc import ABC, abstractmethod

from isspass.domain.entities.passes import IPAddress


class IIpResolverGateway(ABC):
    """Interface for the IP echo service."""

    @abstractmethod
    async def resolve_my_ip(self) -> IPAddress:
        """
        Retrieve the public IP address the request originates from.

        Returns:
            IPAddress: IPv4 or IPv6 address as text

        Raises:
            TransportError: If the service could not be reached
            UpstreamError: If the service answered with a non-200 status
            ParseError: If the body is not JSON or has no ``ip`` field
        """
        pass
