"""
Application Layer Package

Use cases and DTOs sitting between the domain gateways and the
presentation layer.
"""

from isspass.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
