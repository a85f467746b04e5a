from __future__ import annotations

from isspass.application.dtos.pass_dto import PassesResponseDTO


def test_from_domain_keeps_order_and_extra_fields() -> None:
    passes = [
        {"duration": 600, "risetime": 1700000000, "maxElevation": 71},
        {"duration": 541, "risetime": 1700005800},
    ]

    dto = PassesResponseDTO.from_domain(passes)

    assert dto.count == 2
    assert dto.model_dump()["passes"] == passes


def test_from_domain_does_not_coerce_or_fill_fields() -> None:
    passes = [
        {"risetime": 1700000000},
        {"duration": 600.5, "risetime": 1700005800},
        {"duration": "600", "risetime": "1700011600"},
    ]

    dumped = PassesResponseDTO.from_domain(passes).model_dump(mode="json")["passes"]

    assert dumped == passes
    assert "duration" not in dumped[0]
    assert isinstance(dumped[1]["duration"], float)
    assert dumped[2]["duration"] == "600"


def test_from_domain_empty() -> None:
    dto = PassesResponseDTO.from_domain([])

    assert dto.count == 0
    assert dto.passes == []
