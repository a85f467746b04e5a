"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
HTTP presentation layer.
"""

from .pass_dto import PassesResponseDTO
from .system_dto import ApplicationInfoDTO

__all__ = ["PassesResponseDTO", "ApplicationInfoDTO"]
