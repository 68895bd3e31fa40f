"""
Global scoring weight configuration.

Eight point allocations, one per metric/policy. A single configuration is
active at any time; saving overwrites it in place and the previous values
are not recoverable.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Weights(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
        frozen=True,
    )

    carbon_footprint: float = Field(ge=0, strict=True)
    water_usage: float = Field(ge=0, strict=True)
    waste_reduction: float = Field(ge=0, strict=True)
    energy_efficiency: float = Field(ge=0, strict=True)
    iso14001: float = Field(ge=0, strict=True)
    recycling_policy: float = Field(ge=0, strict=True)
    water_policy: float = Field(ge=0, strict=True)
    sustainability_report: float = Field(ge=0, strict=True)

    @property
    def total(self) -> float:
        return sum(self.model_dump().values())


# Used until an admin saves a configuration. Sums to 100.
DEFAULT_WEIGHTS = Weights(
    carbon_footprint=25,
    water_usage=17,
    waste_reduction=10,
    energy_efficiency=10,
    iso14001=15,
    recycling_policy=8,
    water_policy=6,
    sustainability_report=9,
)

WEIGHT_FIELDS: tuple[str, ...] = tuple(Weights.model_fields)
