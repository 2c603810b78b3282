"""Composable request modifiers.

A request is described by an immutable ``RequestSpec``. A modifier is a
function taking a spec and returning a new one; the client applies the
caller's modifiers left to right, followed by the operation's own. Later
modifiers overwrite query parameters set by earlier ones.

Examples:
    >>> client.definitions(filters(type_filter(MetricType.GAUGE), tags_filter({"env": "prod"})))
    >>> client.read_buckets(MetricType.GAUGE, buckets_filter(1), percentiles_filter([90.0, 99.0]), tenant("other"))
"""

from __future__ import annotations

import datetime
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from hawkular.client._endpoints import Endpoint, encode_tags
from hawkular.models.metric_type import MetricType, short_form, validate_type
from hawkular.utils.timestamp import parse_to_ms

__all__ = [
    "Modifier",
    "Order",
    "RequestSpec",
    "apply_modifiers",
    "bucket_duration_filter",
    "buckets_filter",
    "data",
    "end_time_filter",
    "filters",
    "id_filter",
    "limit_filter",
    "order_filter",
    "param",
    "percentiles_filter",
    "stacked_filter",
    "start_time_filter",
    "tags_filter",
    "tenant",
    "type_filter",
    "url",
]


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to issue one request, before the URL is rendered."""

    method: str = "GET"
    tenant: str | None = None
    endpoints: tuple[Endpoint, ...] = ()
    params: Mapping[str, str] = field(default_factory=dict)
    body: Any = None


Modifier = Callable[[RequestSpec], RequestSpec]


class Order(Enum):
    """Sort order of returned datapoints."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


def apply_modifiers(spec: RequestSpec, modifiers: Iterable[Modifier]) -> RequestSpec:
    """Apply modifiers to spec in the order given."""
    for modifier in modifiers:
        spec = modifier(spec)
    return spec


# ---- Request shape --------------------------------------------------------


def tenant(name: str) -> Modifier:
    """Use another tenant than the client's default for this call only."""
    return lambda spec: replace(spec, tenant=name)


def data(body: Any) -> Modifier:
    """Set the JSON body of the request."""
    return lambda spec: replace(spec, body=body)


def url(method: str, *endpoints: Endpoint) -> Modifier:
    """Set the HTTP method and the resource path."""
    method = method.upper()
    return lambda spec: replace(spec, method=method, endpoints=tuple(endpoints))


def param(key: str, value: str) -> Modifier:
    """Set a single query parameter, replacing any previous value."""
    return lambda spec: replace(spec, params={**spec.params, key: value})


def _drop_param(key: str) -> Modifier:
    return lambda spec: replace(spec, params={k: v for k, v in spec.params.items() if k != key})


def filters(*modifiers: Modifier) -> Modifier:
    """Group several filters into one modifier, preserving their order."""
    return lambda spec: apply_modifiers(spec, modifiers)


# ---- Filters --------------------------------------------------------------


def type_filter(metric_type: MetricType) -> Modifier:
    """Restrict results to one metric type. GENERIC removes the restriction."""
    validate_type(metric_type)
    if metric_type == MetricType.GENERIC:
        return _drop_param("type")
    return param("type", short_form(metric_type))


def tags_filter(tags: Mapping[str, str]) -> Modifier:
    """Match definitions by tags. Values may be regular expressions, e.g. ``host[123]``."""
    return param("tags", encode_tags(tags))


def id_filter(pattern: str) -> Modifier:
    """Match metric ids against a regular expression."""
    return param("id", pattern)


def start_time_filter(start: datetime.datetime | int | str) -> Modifier:
    """Only include data at or after start (datetime, epoch milliseconds or ISO 8601)."""
    return param("start", str(parse_to_ms(start)))


def end_time_filter(end: datetime.datetime | int | str) -> Modifier:
    """Only include data before end (datetime, epoch milliseconds or ISO 8601)."""
    return param("end", str(parse_to_ms(end)))


def buckets_filter(count: int) -> Modifier:
    """Aggregate into count buckets of equal duration."""
    if count < 1:
        raise ValueError(f"Bucket count must be positive, got {count}")
    return param("buckets", str(count))


def bucket_duration_filter(duration: datetime.timedelta | int) -> Modifier:
    """Aggregate into buckets of a fixed duration (timedelta or milliseconds)."""
    if isinstance(duration, datetime.timedelta):
        millis = duration // datetime.timedelta(milliseconds=1)
    else:
        millis = int(duration)
    if millis < 1:
        raise ValueError(f"Bucket duration must be at least 1ms, got {duration!r}")
    return param("bucketDuration", f"{millis}ms")


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def percentiles_filter(percentiles: Iterable[float]) -> Modifier:
    """Request percentiles for each bucket, e.g. ``[90.0, 99.0]``."""
    values = [_format_number(p) for p in percentiles]
    if not values:
        raise ValueError("At least one percentile is required")
    return param("percentiles", ",".join(values))


def limit_filter(limit: int) -> Modifier:
    """Return at most limit datapoints."""
    return param("limit", str(limit))


def order_filter(order: Order) -> Modifier:
    return param("order", order.value)


def stacked_filter() -> Modifier:
    """Stack the buckets of all matching series instead of merging them."""
    return param("stacked", "true")
