"""URL construction for Hawkular resources.

Every resource URL has the shape ``{base}/{tenant}/{segments...}?{query}``.
An endpoint is a function receiving the path segments built so far (starting
with the quoted tenant) and returning the extended segments; endpoints are
applied in the order given. Segments are escaped when they are created, so
joining them never re-escapes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from urllib.parse import quote, urlencode

from hawkular.models.metric_type import MetricType, long_form, validate_type

__all__ = [
    "Endpoint",
    "build_url",
    "data_endpoint",
    "encode_query",
    "encode_tags",
    "single_metric_endpoint",
    "tag_query_endpoint",
    "tags_endpoint",
    "tenants_endpoint",
    "type_endpoint",
]

Endpoint = Callable[[tuple[str, ...]], tuple[str, ...]]


def _escape(segment: str) -> str:
    return quote(segment, safe="")


def encode_tags(tags: Mapping[str, str]) -> str:
    """Serialize a tag map into Hawkular's tag query syntax ``k1:v1,k2:v2``.

    Keys are sorted so the same map always yields the same string.
    """
    return ",".join(f"{key}:{tags[key]}" for key in sorted(tags))


def type_endpoint(metric_type: MetricType) -> Endpoint:
    """Metric type collection, e.g. ``/gauges``. GENERIC addresses ``/metrics``."""
    validate_type(metric_type)
    segment = long_form(metric_type)
    return lambda segments: (*segments, segment)


def single_metric_endpoint(metric_id: str) -> Endpoint:
    """A single metric below a type collection. The id is escaped, ``/`` included."""
    segment = _escape(metric_id)
    return lambda segments: (*segments, segment)


def tags_endpoint() -> Endpoint:
    return lambda segments: (*segments, "tags")


def tag_query_endpoint(tags: Mapping[str, str]) -> Endpoint:
    """Comma-joined ``key:value`` segment, used for tag deletion and tag value queries.

    Each key and value is escaped on its own; the ``:`` and ``,`` separators stay literal.
    """
    segment = ",".join(f"{_escape(key)}:{_escape(tags[key])}" for key in sorted(tags))
    return lambda segments: (*segments, segment)


def data_endpoint() -> Endpoint:
    return lambda segments: (*segments, "data")


def tenants_endpoint() -> Endpoint:
    """Tenant collection. Tenants are not scoped below a tenant, the prefix is dropped."""
    return lambda segments: ("tenants",)


def encode_query(params: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> str:
    """URL-encode query parameters.

    Duplicate keys keep the last value and keys are emitted sorted, so the
    result does not depend on insertion order.
    """
    if not params:
        return ""
    unique = dict(params)
    return urlencode(sorted(unique.items()))


def build_url(
    base_url: str,
    tenant: str,
    endpoints: Iterable[Endpoint] = (),
    params: Mapping[str, str] | None = None,
) -> str:
    """Build the full URL of a resource.

    Args:
        base_url: Base URL of the metrics API (see ``Parameters.base_url``)
        tenant: Tenant the resource belongs to
        endpoints: Endpoints appended in order
        params: Query parameters

    Returns:
        Absolute URL including the encoded query string
    """
    segments: tuple[str, ...] = (_escape(tenant),)
    for endpoint in endpoints:
        segments = endpoint(segments)

    url = "/".join((base_url.rstrip("/"), *segments))
    query = encode_query(params)
    return f"{url}?{query}" if query else url
