"""
Gateways Package - Infrastructure Layer

httpx implementations of the domain gateway interfaces.
"""

from .base import JsonHttpGateway
from .geolocation_gateway import GeolocationGateway
from .ip_resolver_gateway import IpResolverGateway
from .pass_prediction_gateway import PassPredictionGateway

__all__ = [
    "JsonHttpGateway",
    "IpResolverGateway",
    "GeolocationGateway",
    "PassPredictionGateway",
]
