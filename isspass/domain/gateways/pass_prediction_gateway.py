"""
Pass Prediction Gateway Interface - Domain Layer

Contract for predicting ISS passes over a location.
"""

from abc import ABC, abstractmethod

from isspass.domain.entities.passes import Coordinates, PassList


class IPassPredictionGateway(ABC):
    """Interface for the ISS pass prediction service."""

    @abstractmethod
    async def predict_passes(self, coords: Coordinates) -> PassList:
        """
        Retrieve the upcoming passes over ``coords``.

        Returns:
            PassList: pass windows in the order the service returned them

        Raises:
            TransportError, UpstreamError, ParseError
        """
        pass
