"""
Hawkular - Python client for the Hawkular Metrics time-series store.

This module exposes the client, its configuration, the data models and the
request modifiers used to filter queries.

Examples:
    >>> import hawkular
    >>> client = hawkular.Client(hawkular.Parameters(tenant="my-tenant", url="http://localhost:8080"))
    >>> client.create(hawkular.MetricDefinition(id="cpu.load", type=hawkular.MetricType.GAUGE))
    >>> client.push_single(hawkular.MetricType.GAUGE, "cpu.load", hawkular.Datapoint(value=0.42))
    >>> client.read_buckets(hawkular.MetricType.GAUGE, hawkular.buckets_filter(1), hawkular.percentiles_filter([90.0]))
"""

from hawkular.client import (
    Client,
    Order,
    Reply,
    bucket_duration_filter,
    buckets_filter,
    end_time_filter,
    filters,
    id_filter,
    limit_filter,
    order_filter,
    percentiles_filter,
    stacked_filter,
    start_time_filter,
    tags_filter,
    tenant,
    type_filter,
)
from hawkular.config import Parameters
from hawkular.exceptions import (
    ConversionError,
    DecodingError,
    EncodingError,
    HawkularClientError,
    HawkularError,
    InvalidMetricTypeError,
)
from hawkular.models import (
    BucketPoint,
    Datapoint,
    MetricDefinition,
    MetricHeader,
    MetricType,
    Percentile,
    TenantDefinition,
)
from hawkular.utils import convert_to_float

__version__ = "0.1.0"
__all__ = [
    "BucketPoint",
    "Client",
    "ConversionError",
    "Datapoint",
    "DecodingError",
    "EncodingError",
    "HawkularClientError",
    "HawkularError",
    "InvalidMetricTypeError",
    "MetricDefinition",
    "MetricHeader",
    "MetricType",
    "Order",
    "Parameters",
    "Percentile",
    "Reply",
    "TenantDefinition",
    "bucket_duration_filter",
    "buckets_filter",
    "convert_to_float",
    "end_time_filter",
    "filters",
    "id_filter",
    "limit_filter",
    "order_filter",
    "percentiles_filter",
    "stacked_filter",
    "start_time_filter",
    "tags_filter",
    "tenant",
    "type_filter",
]
