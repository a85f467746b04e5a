"""DTO for the application info response."""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field


class ApplicationInfoDTO(BaseModel):
    """DTO representing the /info response payload."""

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment")
    started_at: datetime = Field(description="Process start time (UTC)")
    uptime_seconds: float = Field(description="Seconds since start")
    upstreams: Dict[str, str] = Field(
        default_factory=dict, description="Configured upstream service URLs"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "ISS Pass Finder",
                "description": "Upcoming ISS passes for the caller's location",
                "version": "1.0.0",
                "environment": "development",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 42.0,
                "upstreams": {
                    "ip_echo_url": "https://api.ipify.org",
                    "geo_url": "https://freegeoip.app",
                    "pass_url": "http://api.open-notify.org",
                },
            }
        }
    }
