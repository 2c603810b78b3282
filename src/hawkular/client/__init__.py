"""
Hawkular client package.

Maps typed operations onto Hawkular Metrics REST requests and translates the
responses back into models or errors.
"""

from hawkular.client._client import Client
from hawkular.client._endpoints import (
    build_url,
    data_endpoint,
    encode_query,
    encode_tags,
    single_metric_endpoint,
    tag_query_endpoint,
    tags_endpoint,
    tenants_endpoint,
    type_endpoint,
)
from hawkular.client._modifiers import (
    Modifier,
    Order,
    RequestSpec,
    apply_modifiers,
    bucket_duration_filter,
    buckets_filter,
    data,
    end_time_filter,
    filters,
    id_filter,
    limit_filter,
    order_filter,
    param,
    percentiles_filter,
    stacked_filter,
    start_time_filter,
    tags_filter,
    tenant,
    type_filter,
    url,
)
from hawkular.client._transport import Reply, Transport, parse_error_response

__all__ = [
    "Client",
    "Modifier",
    "Order",
    "Reply",
    "RequestSpec",
    "Transport",
    "apply_modifiers",
    "bucket_duration_filter",
    "buckets_filter",
    "build_url",
    "data",
    "data_endpoint",
    "encode_query",
    "encode_tags",
    "end_time_filter",
    "filters",
    "id_filter",
    "limit_filter",
    "order_filter",
    "param",
    "parse_error_response",
    "percentiles_filter",
    "single_metric_endpoint",
    "stacked_filter",
    "start_time_filter",
    "tag_query_endpoint",
    "tags_endpoint",
    "tags_filter",
    "tenant",
    "tenants_endpoint",
    "type_endpoint",
    "type_filter",
    "url",
]
