"""
Domain Layer Package

Values, errors and gateway contracts of the pass lookup, free of any
framework or transport concern.
"""

from isspass.domain import entities, gateways

__all__ = ["entities", "gateways"]
