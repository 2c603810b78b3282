"""
Hawkular data models package.

This package contains the metric type enumeration and the request/response
structures exchanged with the Hawkular REST API.
"""

from hawkular.models.metric_type import MetricType, long_form, require_concrete, short_form, validate_type
from hawkular.models.record import (
    BucketPoint,
    Datapoint,
    ErrorEnvelope,
    MetricDefinition,
    MetricHeader,
    Percentile,
    TenantDefinition,
)

__all__ = [
    "BucketPoint",
    "Datapoint",
    "ErrorEnvelope",
    "MetricDefinition",
    "MetricHeader",
    "MetricType",
    "Percentile",
    "TenantDefinition",
    "long_form",
    "require_concrete",
    "short_form",
    "validate_type",
]
