from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..products import Product, is_supported_product

FIELD_ALIASES = {
    "lat": "latitude",
    "lon": "longitude",
    "ac": "altitude_correction",
}

INIT_TIME_FORMAT = "%Y%m%d%H"


def _is_missing(data: dict[str, Any], *keys: str) -> bool:
    return all(data.get(key) is None for key in keys)


class RequestParams(BaseModel):
    """Query parameters for a single 7Timer forecast request.

    Fields accept either their attribute name or the wire name used in the
    query string (``lat``, ``lon``, ``ac``). Only fields the caller set
    explicitly are sent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    product: Product
    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")
    altitude_correction: Literal[0, 2, 7] = Field(default=0, alias="ac")
    unit: Literal["metric", "british"] = "metric"
    output: Literal["json", "xml", "internal"] = "json"
    tzshift: int = Field(default=0, ge=-23, le=23)
    lang: str = "en"

    @model_validator(mode="before")
    @classmethod
    def validate_required_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if not data.get("product"):
            raise ValueError("product was not defined")
        if _is_missing(data, "lat", "latitude"):
            raise ValueError("lat between -90 and 90 expected")
        if _is_missing(data, "lon", "longitude"):
            raise ValueError("lon between -180 and 180 expected")
        return data

    @field_validator("product", mode="before")
    @classmethod
    def validate_product(cls, value: Any) -> Any:
        if not is_supported_product(value):
            raise ValueError("product not supported")
        return value

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, value: float) -> float:
        if not abs(value) <= 90:
            raise ValueError("lat between -90 and 90 expected")
        return value

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, value: float) -> float:
        if not abs(value) <= 180:
            raise ValueError("lon between -180 and 180 expected")
        return value

    @field_validator("lang")
    @classmethod
    def validate_lang(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("lang must not be empty")
        return text

    @model_validator(mode="after")
    def validate_altitude_correction(self) -> RequestParams:
        if self.altitude_correction and self.product != "astro":
            raise ValueError("ac is only supported for the astro product")
        return self

    def query_items(self) -> dict[str, Any]:
        """Explicitly set fields other than ``product``, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude={"product"})


ParamsInput = Union[RequestParams, Mapping[str, Any], None]


def build_request_params(params: ParamsInput = None, /, **fields: Any) -> RequestParams:
    if params is None:
        data: dict[str, Any] = {}
    elif isinstance(params, RequestParams):
        data = params.model_dump(exclude_unset=True)
    elif isinstance(params, Mapping):
        data = {FIELD_ALIASES.get(key, key): value for key, value in params.items()}
    else:
        message = f"request parameters must be a mapping, got {type(params).__name__}"
        raise ValidationError(message, [("params", message)])
    data.update({FIELD_ALIASES.get(key, key): value for key, value in fields.items()})
    try:
        return RequestParams.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


class ForecastReport(BaseModel):
    """A decoded JSON forecast.

    ``dataseries`` is kept as loosely-typed records because every product
    returns a differently shaped timepoint.
    """

    model_config = ConfigDict(extra="allow")

    product: str
    init: str
    dataseries: list[Any] = Field(default_factory=list)

    @field_validator("init", mode="before")
    @classmethod
    def validate_init(cls, value: Any) -> str:
        text = str(value).strip()
        try:
            datetime.strptime(text, INIT_TIME_FORMAT)
        except ValueError as exc:
            raise ValueError(f"init must be a YYYYMMDDHH timestamp, got {value!r}") from exc
        return text

    @property
    def init_time(self) -> datetime:
        return datetime.strptime(self.init, INIT_TIME_FORMAT).replace(tzinfo=timezone.utc)

    def valid_time(self, record: Any) -> datetime | None:
        """Time a dataseries record applies to, if it carries a ``timepoint``."""
        if not isinstance(record, dict):
            return None
        timepoint = record.get("timepoint")
        if timepoint is None:
            return None
        try:
            hours = int(timepoint)
        except (TypeError, ValueError):
            return None
        return self.init_time + timedelta(hours=hours)
