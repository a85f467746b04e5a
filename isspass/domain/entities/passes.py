"""Domain values produced by the pass lookup stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

IPAddress = str

# One element of the upstream "response" array, forwarded without reshaping
PassWindow = Dict[str, Any]

PassList = List[PassWindow]


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Approximate location of an IP address.

    Latitude and longitude stay textual: they are copied from the geolocation
    answer and placed verbatim in the pass prediction query.
    """

    latitude: str
    longitude: str
