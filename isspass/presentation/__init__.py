"""
Presentation Layer Package

HTTP routers exposing the application use cases.
"""

from isspass.presentation import controllers

__all__ = ["controllers"]
