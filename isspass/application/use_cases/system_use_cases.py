"""Use case for the application info endpoint."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from isspass.application.dtos.system_dto import ApplicationInfoDTO
from isspass.application.models import SystemInfo


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(self, system_info: SystemInfo) -> None:
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        return ApplicationInfoDTO(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            started_at=started,
            uptime_seconds=uptime_seconds,
            upstreams={
                "ip_echo_url": self._redact_url(self._info.ip_echo_url),
                "geo_url": self._redact_url(self._info.geo_url),
                "pass_url": self._redact_url(self._info.pass_url),
            },
        )

    def _redact_url(self, url: str) -> str:
        if not url:
            return url

        parsed = urlsplit(url)
        if parsed.username or parsed.password:
            hostname = parsed.hostname or ""
            port_part = f":{parsed.port}" if parsed.port else ""
            netloc = f"{hostname}{port_part}"
            return urlunsplit(
                (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
            )

        return url
