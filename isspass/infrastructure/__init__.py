"""
Infrastructure Layer Package

Implementations of the domain interfaces that talk to external services.
"""

from isspass.infrastructure import gateways

__all__ = ["gateways"]
