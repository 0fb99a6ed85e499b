from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from enum import Enum
from decimal import Decimal, ROUND_HALF_UP


CENTS = Decimal("0.01")


class ResolutionStatus(str, Enum):
    resolved = "resolved"
    zip_not_found = "zip_not_found"
    multiple_rate_areas = "multiple_rate_areas"
    insufficient_rates = "insufficient_rates"


class PlanRecord(BaseModel):
    """
    One row of the plan catalog.

    Only `metal_level`, `rate` and `rate_area` are kept; the remaining
    catalog columns (plan_id, state) play no part in SLCSP ranking.
    """

    model_config = ConfigDict(frozen=True)

    metal_level: str = Field(
        ...,
        description="Metal tier of the plan (Bronze, Silver, Gold, ...), case-sensitive"
    )

    rate: Decimal = Field(
        ...,
        allow_inf_nan=False,
        description="Monthly premium; compared by value so 10.50 == 10.500"
    )

    rate_area: int = Field(
        ...,
        description="Rate area identifier within the state"
    )


class ZipRecord(BaseModel):
    """One ZIP code to rate area association. A ZIP may appear many times."""

    model_config = ConfigDict(frozen=True)

    zipcode: str = Field(
        ...,
        description="5-digit ZIP code kept as text so leading zeros survive"
    )

    rate_area: int = Field(
        ...,
        description="Rate area identifier the ZIP code belongs to"
    )

    @field_validator("zipcode")
    @classmethod
    def zero_pad_zipcode(cls, value: str) -> str:
        return normalize_zipcode(value)


class ResolvedRate(BaseModel):
    """
    Answer for a single requested ZIP code.

    `rate` is None exactly when `status` is not `resolved`. An unresolved
    result is a valid outcome, written as an empty rate field.
    """

    model_config = ConfigDict(frozen=True)

    zipcode: str = Field(
        ...,
        description="ZIP code as it appeared in the request file (normalized)"
    )

    status: ResolutionStatus = Field(
        ...,
        description="Why the ZIP resolved or did not"
    )

    rate: Optional[Decimal] = Field(
        None,
        description="Second lowest distinct Silver rate, quantized to cents"
    )

    rate_area: Optional[int] = Field(
        None,
        description="The single rate area used for the lookup, if there was one"
    )

    @field_validator("rate")
    @classmethod
    def quantize_rate(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        if value is None:
            return None
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)

    @property
    def is_resolved(self) -> bool:
        return self.status == ResolutionStatus.resolved

    @property
    def formatted_rate(self) -> str:
        # Decimal keeps the trailing zero after quantize: 200.00, not 200.0
        return "" if self.rate is None else f"{self.rate:.2f}"


def normalize_zipcode(value: str) -> str:
    """Strip and zero-pad a ZIP code to 5 digits. Raises ValueError if it is not numeric."""
    zipcode = str(value).strip()
    if not zipcode:
        raise ValueError(f"blank ZIP code: {value!r}")
    zipcode = zipcode.zfill(5)
    if len(zipcode) != 5 or not zipcode.isdigit():
        raise ValueError(f"not a 5-digit ZIP code: {value!r}")
    return zipcode
