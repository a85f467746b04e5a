from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import pytest

from isspass.application.use_cases.pass_use_cases import (
    NextPassesForCurrentLocationUseCase,
)
from isspass.domain.entities.errors import ParseError, TransportError, UpstreamError
from isspass.domain.entities.passes import Coordinates
from isspass.domain.gateways.geolocation_gateway import IGeolocationGateway
from isspass.domain.gateways.ip_resolver_gateway import IIpResolverGateway
from isspass.domain.gateways.pass_prediction_gateway import IPassPredictionGateway


class _StubIpResolver(IIpResolverGateway):
    def __init__(self, ip: str = "1.2.3.4", error: Optional[Exception] = None):
        self._ip = ip
        self._error = error
        self.calls = 0

    async def resolve_my_ip(self) -> str:
        self.calls += 1
        if self._error:
            raise self._error
        return self._ip


class _StubGeolocation(IGeolocationGateway):
    def __init__(
        self,
        coords: Optional[Coordinates] = None,
        error: Optional[Exception] = None,
    ):
        self._coords = coords or Coordinates(latitude="49.2", longitude="-123.1")
        self._error = error
        self.calls: List[str] = []

    async def resolve_coordinates(self, ip: str) -> Coordinates:
        self.calls.append(ip)
        if self._error:
            raise self._error
        return self._coords


class _StubPassPrediction(IPassPredictionGateway):
    def __init__(
        self,
        passes: Optional[List[Dict[str, Any]]] = None,
        error: Optional[Exception] = None,
    ):
        self._passes = passes if passes is not None else []
        self._error = error
        self.calls: List[Coordinates] = []

    async def predict_passes(self, coords: Coordinates) -> List[Dict[str, Any]]:
        self.calls.append(coords)
        if self._error:
            raise self._error
        return self._passes


def _use_case(ip_resolver, geolocation, pass_prediction):
    return NextPassesForCurrentLocationUseCase(
        ip_resolver_gateway=ip_resolver,
        geolocation_gateway=geolocation,
        pass_prediction_gateway=pass_prediction,
    )


@pytest.mark.asyncio
async def test_execute_chains_stages_in_order(sample_passes) -> None:
    ip_resolver = _StubIpResolver(ip="1.2.3.4")
    geolocation = _StubGeolocation()
    pass_prediction = _StubPassPrediction(passes=sample_passes)

    result = await _use_case(ip_resolver, geolocation, pass_prediction).execute()

    assert result is sample_passes
    assert ip_resolver.calls == 1
    assert geolocation.calls == ["1.2.3.4"]
    assert pass_prediction.calls == [Coordinates(latitude="49.2", longitude="-123.1")]


@pytest.mark.asyncio
async def test_execute_stops_when_ip_resolver_fails() -> None:
    error = TransportError(
        "https://ip.test/", httpx.ConnectError("connection refused")
    )
    ip_resolver = _StubIpResolver(error=error)
    geolocation = _StubGeolocation()
    pass_prediction = _StubPassPrediction()

    with pytest.raises(TransportError) as exc:
        await _use_case(ip_resolver, geolocation, pass_prediction).execute()

    assert exc.value is error
    assert geolocation.calls == []
    assert pass_prediction.calls == []


@pytest.mark.asyncio
async def test_execute_stops_when_geolocation_fails() -> None:
    error = UpstreamError(
        "https://geo.test/json/1.2.3.4",
        503,
        "Service Unavailable",
        "fetching coordinates",
    )
    ip_resolver = _StubIpResolver()
    geolocation = _StubGeolocation(error=error)
    pass_prediction = _StubPassPrediction()

    with pytest.raises(UpstreamError) as exc:
        await _use_case(ip_resolver, geolocation, pass_prediction).execute()

    assert exc.value is error
    assert exc.value.status_code == 503
    assert ip_resolver.calls == 1
    assert pass_prediction.calls == []


@pytest.mark.asyncio
async def test_execute_propagates_pass_prediction_failure() -> None:
    error = ParseError("http://pass.test/iss-pass.json", "no passes", "response")
    ip_resolver = _StubIpResolver()
    geolocation = _StubGeolocation()
    pass_prediction = _StubPassPrediction(error=error)

    with pytest.raises(ParseError) as exc:
        await _use_case(ip_resolver, geolocation, pass_prediction).execute()

    assert exc.value is error
    assert ip_resolver.calls == 1
    assert len(geolocation.calls) == 1
    assert len(pass_prediction.calls) == 1


@pytest.mark.asyncio
async def test_execute_returns_empty_list_unchanged() -> None:
    use_case = _use_case(
        _StubIpResolver(), _StubGeolocation(), _StubPassPrediction(passes=[])
    )

    assert await use_case.execute() == []
