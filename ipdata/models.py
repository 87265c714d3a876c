"""Pydantic models for ipdata.co lookup responses.

Fields are declared under their Python names; ``Field(alias=...)`` maps the
ones whose wire key differs. Missing or null keys fall back to the field
default, so absent scalars decode to zero values and absent nested objects
to ``None``.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
    model_validator,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class AutonomousSystemInfo(_WireModel):
    """Autonomous System Number data for an IP."""

    asn: StrictStr = ""  # e.g. "AS15169"
    name: StrictStr = ""
    domain: StrictStr = ""
    route: StrictStr = ""
    type: StrictStr = ""  # "isp", "hosting", "business", ...


class SpokenLanguage(_WireModel):
    """A language spoken where the IP resides."""

    name: StrictStr = ""
    native: StrictStr = ""


class CurrencyInfo(_WireModel):
    """Currency used where the IP resides."""

    name: StrictStr = ""
    code: StrictStr = ""
    symbol: StrictStr = ""
    native: StrictStr = ""
    plural: StrictStr = ""


class TimeZoneInfo(_WireModel):
    """Time zone where the IP resides."""

    name: StrictStr = ""
    abbreviation: StrictStr = Field(default="", alias="abbr")
    offset: StrictStr = ""  # e.g. "-0700"
    is_dst: StrictBool = False
    current_time: StrictStr | None = None


class ThreatInfo(_WireModel):
    """Threat intelligence flags for an IP.

    ``is_anonymous`` (Tor or proxy) and ``is_threat`` (known attacker or
    abuser) are derived upstream and taken as-is.
    """

    is_tor: StrictBool = False
    is_proxy: StrictBool = False
    is_anonymous: StrictBool = False
    is_known_attacker: StrictBool = False
    is_known_abuser: StrictBool = False
    is_threat: StrictBool = False
    is_bogon: StrictBool = False


class _LookupFields(_WireModel):
    """Fields shared by single and bulk lookup results."""

    ip: StrictStr = ""
    asn: AutonomousSystemInfo = Field(default_factory=AutonomousSystemInfo)
    organization: StrictStr = Field(default="", alias="organisation")

    city: StrictStr = ""
    region: StrictStr = ""
    postal: StrictStr = ""

    country_name: StrictStr = ""
    country_code: StrictStr = ""

    flag: StrictStr = ""  # URL of a flag image
    emoji_flag: StrictStr = ""
    emoji_unicode: StrictStr = ""  # e.g. "U+1F1FA U+1F1F8"

    continent_name: StrictStr = ""
    continent_code: StrictStr = ""

    latitude: float = 0.0
    longitude: float = 0.0

    calling_code: StrictStr = ""

    is_eu: StrictBool = False

    languages: tuple[SpokenLanguage, ...] | None = Field(default=None, alias="language")

    currency: CurrencyInfo | None = None
    time_zone: TimeZoneInfo | None = None
    threat: ThreatInfo | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _check_coordinate(cls, value: Any) -> float:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {type(value).__name__}")
        try:
            return float(value)
        except OverflowError:
            raise ValueError("number out of range") from None

    def __str__(self) -> str:
        return self.ip


class LookupResult(_LookupFields):
    """Result of looking up one IP address."""

    region_code: StrictStr = ""


class BulkLookupResult(_LookupFields):
    """One record of a bulk lookup response.

    Bulk records have no ``region_code`` but carry a ``message`` describing
    why the lookup for this IP failed, if it did.
    """

    message: StrictStr = ""


class BulkOutcome(BaseModel):
    """Normalized bulk response, keyed by requested IP."""

    model_config = ConfigDict(frozen=True)

    results: dict[str, LookupResult] = Field(default_factory=dict)
    failures: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures
