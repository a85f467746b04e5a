"""
Domain Entities Package

Transient values exchanged between the lookup stages and the errors they raise.
"""

from .errors import (
    DomainError,
    ParseError,
    PassLookupError,
    TransportError,
    UpstreamError,
)
from .passes import Coordinates, IPAddress, PassList, PassWindow

__all__ = [
    "Coordinates",
    "IPAddress",
    "PassList",
    "PassWindow",
    "DomainError",
    "PassLookupError",
    "TransportError",
    "UpstreamError",
    "ParseError",
]
