"""Shared plumbing for the JSON-over-HTTP gateways - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from isspass.domain.entities.errors import ParseError, TransportError, UpstreamError
from isspass.shared import get_logger
from isspass.shared.consts import DEFAULT_HTTP_TIMEOUT_SECONDS

logger = get_logger(__name__)


class JsonHttpGateway:
    """Base class for gateways that issue one GET and read a JSON object back.

    Subclasses set ``log_prefix`` (structlog event namespace) and
    ``operation`` (wording used in error messages).
    """

    log_prefix = "gateway"
    operation = "calling upstream service"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get_json(
        self, url: str, params: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Send a GET request and decode the JSON object it returns.

        Redirects are followed and only a final HTTP 200 counts as success.
        The client lives for this single request and is closed whatever the
        outcome.

        Raises:
            TransportError: If the request could not be sent or answered
            UpstreamError: If the status code is not 200
            ParseError: If the body is not a JSON object
        """
        logger.info(f"{self.log_prefix}.request", url=url, params=dict(params or {}))

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, params=params)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(
                f"{self.log_prefix}.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise TransportError(url, e) from e

        if response.status_code != httpx.codes.OK:
            logger.error(
                f"{self.log_prefix}.http_error",
                status_code=response.status_code,
                response_text=response.text,
                url=url,
            )
            raise UpstreamError(
                url, response.status_code, response.text, self.operation
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                f"{self.log_prefix}.parse_error",
                error=str(e),
                response_text=response.text,
                url=url,
            )
            raise ParseError(url, f"Invalid JSON when {self.operation}: {e}") from e

        if not isinstance(payload, dict):
            logger.error(
                f"{self.log_prefix}.parse_error",
                error="payload is not an object",
                response_text=response.text,
                url=url,
            )
            raise ParseError(url, f"Unexpected JSON payload when {self.operation}")

        logger.debug(
            f"{self.log_prefix}.response",
            status_code=response.status_code,
            url=url,
        )
        return payload

    def _require_field(self, payload: Dict[str, Any], field: str, url: str) -> Any:
        value = payload.get(field)
        if value is None:
            logger.error(
                f"{self.log_prefix}.parse_error",
                error="missing field",
                field=field,
                url=url,
            )
            raise ParseError(
                url,
                f"Field '{field}' missing from response when {self.operation}",
                field=field,
            )
        return value
