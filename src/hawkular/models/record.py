"""
Hawkular data models.

This module contains the structures exchanged with the Hawkular REST API:
metric definitions, datapoints and batch headers sent by the caller, and the
bucket/tenant structures returned by read operations.

Wire names are fixed by the server (``id``, ``type``, ``tags``, ``timestamp``,
``value``, ``dataRetention``, ``errorMsg``). Each model that is sent converts
itself with ``to_wire``; values are coerced at that boundary.
"""

from __future__ import annotations

import datetime
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hawkular.exceptions import ConversionError, EncodingError
from hawkular.models.metric_type import MetricType, require_concrete
from hawkular.utils.conversion import convert_to_float
from hawkular.utils.timestamp import now_ms, parse_to_datetime, parse_to_ms


def _optional_datetime(value: Any) -> datetime.datetime | None:
    return None if value is None else parse_to_datetime(value)


def encode_value(metric_type: MetricType, value: Any) -> float | int | str:
    """Coerce a datapoint value into its wire form for the given metric type.

    Gauges are sent as floats, counters as integers when the value is integral,
    availability values as opaque strings. NaN and infinities are rejected.

    Raises:
        ConversionError: If a numeric value is required but cannot be converted
            or is not finite
        EncodingError: If an availability value is not a string
    """
    if metric_type is MetricType.AVAILABILITY:
        if not isinstance(value, str):
            raise EncodingError(f"Availability value must be a string, got {value!r}")
        return value
    number = convert_to_float(value)
    if not math.isfinite(number):
        raise ConversionError(value)
    if metric_type is MetricType.COUNTER and number.is_integer():
        return int(number)
    return number


def decode_value(metric_type: MetricType, value: Any) -> float | str:
    if metric_type is MetricType.AVAILABILITY:
        return str(value)
    return convert_to_float(value)


class Datapoint(BaseModel):
    """A single sample of a metric.

    The timestamp defaults to the time of the write call when left unset.
    """

    timestamp: datetime.datetime | None = Field(default=None, description="Sample time, millisecond resolution")
    value: Any = Field(..., description="Numeric value, or status string for availability")
    tags: dict[str, str] | None = Field(default=None, description="Optional per-datapoint tags")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> datetime.datetime | None:
        return _optional_datetime(value)

    def to_wire(self, metric_type: MetricType) -> dict[str, Any]:
        """Serialize for a write request, coercing the value for metric_type."""
        payload: dict[str, Any] = {
            "timestamp": now_ms() if self.timestamp is None else parse_to_ms(self.timestamp),
            "value": encode_value(metric_type, self.value),
        }
        if self.tags:
            payload["tags"] = dict(self.tags)
        return payload

    @classmethod
    def from_wire(cls, metric_type: MetricType, item: dict[str, Any]) -> Datapoint:
        return cls(
            timestamp=item["timestamp"],
            value=decode_value(metric_type, item.get("value")),
            tags=item.get("tags") or None,
        )

    def __str__(self) -> str:
        return f"Datapoint(timestamp={self.timestamp}, value={self.value!r})"


class MetricDefinition(BaseModel):
    """Definition of a named metric series within a tenant and type namespace."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Metric id, unique per tenant and type")
    type: MetricType = Field(default=MetricType.GAUGE, description="Metric type")
    tags: dict[str, str] = Field(default_factory=dict, description="Definition tags")
    retention_time: int = Field(default=0, alias="dataRetention", description="Retention in days, 0 uses the server default")

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> MetricType:
        return MetricType.parse(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id, "type": self.type.short_form}
        if self.tags:
            payload["tags"] = dict(self.tags)
        if self.retention_time:
            payload["dataRetention"] = self.retention_time
        return payload


class MetricHeader(BaseModel):
    """Batch write unit: the datapoints of one metric id."""

    id: str = Field(..., description="Metric id")
    type: MetricType = Field(default=MetricType.GAUGE, description="Metric type")
    data: list[Datapoint] = Field(default_factory=list, description="Datapoints in write order")

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> MetricType:
        return MetricType.parse(value)

    def to_wire(self, metric_type: MetricType | None = None) -> dict[str, Any]:
        """Serialize for a write request.

        Args:
            metric_type: Type forced for the whole batch, defaults to the header's own type
        """
        resolved = require_concrete(self.type if metric_type is None else metric_type)
        return {
            "id": self.id,
            "type": resolved.short_form,
            "data": [point.to_wire(resolved) for point in self.data],
        }


class Percentile(BaseModel):
    """A percentile value within a bucket. Quantile is a fraction in [0, 1]."""

    quantile: float
    value: float


class BucketPoint(BaseModel):
    """Aggregated statistics for one time bucket."""

    start: datetime.datetime | None = None
    end: datetime.datetime | None = None
    min: float | None = None
    max: float | None = None
    avg: float | None = None
    median: float | None = None
    sum: float | None = None
    empty: bool = False
    samples: int = 0
    percentiles: list[Percentile] = Field(default_factory=list)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_bounds(cls, value: Any) -> datetime.datetime | None:
        return _optional_datetime(value)

    @field_validator("percentiles", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class TenantDefinition(BaseModel):
    """A tenant and its optional per-type retention times in days."""

    id: str = Field(..., description="Tenant id")
    retentions: dict[MetricType, int] = Field(default_factory=dict, description="Retention days per metric type")

    @field_validator("retentions", mode="before")
    @classmethod
    def _parse_retentions(cls, value: Any) -> Any:
        if not value:
            return {}
        return {MetricType.parse(key): days for key, days in value.items()}

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id}
        if self.retentions:
            payload["retentions"] = {metric_type.short_form: days for metric_type, days in self.retentions.items()}
        return payload


class ErrorEnvelope(BaseModel):
    """Error body returned by Hawkular for failed requests."""

    error_msg: str = Field(default="", alias="errorMsg")
