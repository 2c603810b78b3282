"""Utility modules for the Hawkular client."""

from hawkular.utils.conversion import convert_to_float
from hawkular.utils.timestamp import now_ms, parse_to_datetime, parse_to_ms
from hawkular.utils.validators import validate_metric_id, validate_tags

__all__ = [
    "convert_to_float",
    "now_ms",
    "parse_to_datetime",
    "parse_to_ms",
    "validate_metric_id",
    "validate_tags",
]
