"""
Main module - Main/Composition Root Layer

Entry points (FastAPI app, command line) and the composition root that
wires settings, gateways and use cases together.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
