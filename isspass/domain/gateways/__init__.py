"""
Gateways Package - Domain Layer

Interfaces for the external services the pass lookup depends on.
Implementations live in the infrastructure layer.
"""

from .geolocation_gateway import IGeolocationGateway
from .ip_resolver_gateway import IIpResolverGateway
from .pass_prediction_gateway import IPassPredictionGateway

__all__ = ["IIpResolverGateway", "IGeolocationGateway", "IPassPredictionGateway"]
