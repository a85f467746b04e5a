"""
Use Cases Package - Application Layer

Use cases orchestrate the domain gateways to serve the presentation layer.
"""

from .pass_use_cases import NextPassesForCurrentLocationUseCase
from .system_use_cases import GetApplicationInfoUseCase

__all__ = ["NextPassesForCurrentLocationUseCase", "GetApplicationInfoUseCase"]
