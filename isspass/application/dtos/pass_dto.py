"""
Pass DTOs - Application Layer

Data Transfer Objects for the pass lookup endpoint. Pass windows are
forwarded exactly as the prediction service sent them: no field is typed,
coerced, added or dropped.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from isspass.domain.entities.passes import PassList


class PassesResponseDTO(BaseModel):
    """DTO for the upcoming passes over the caller's location."""

    count: int = Field(description="Number of predicted passes")
    passes: List[Dict[str, Any]] = Field(
        description="Pass windows in the order the prediction service returned, "
        "each with at least duration (seconds) and risetime (epoch seconds)"
    )

    @classmethod
    def from_domain(cls, passes: PassList) -> "PassesResponseDTO":
        return cls(count=len(passes), passes=passes)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "count": 2,
                "passes": [
                    {"duration": 600, "risetime": 1700000000},
                    {"duration": 541, "risetime": 1700005800},
                ],
            }
        }
    )
