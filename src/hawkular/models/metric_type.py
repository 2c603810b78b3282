"""
Metric type enumeration and utilities.

This module provides the metric type enumeration together with the string
forms Hawkular uses for it: the long (plural) form appears in URL paths, the
short (singular) form in query parameters and JSON bodies.
"""

from enum import IntEnum

from hawkular.exceptions import InvalidMetricTypeError

__all__ = ["MetricType", "long_form", "require_concrete", "short_form", "validate_type"]

# Index-aligned with MetricType values
_LONG_FORM = (
    "gauges",
    "availability",
    "counters",
    "metrics",
)

_SHORT_FORM = (
    "gauge",
    "availability",
    "counter",
    "metrics",
)


class MetricType(IntEnum):
    """Metric type enumeration.

    - GAUGE: floating point samples
    - AVAILABILITY: status strings such as "up" or "down"
    - COUNTER: monotonically increasing integer samples
    - GENERIC: wildcard, only valid as a query filter meaning "any type"
    """

    GAUGE = 0
    AVAILABILITY = 1
    COUNTER = 2
    GENERIC = 3

    @property
    def long_form(self) -> str:
        return long_form(self)

    @property
    def short_form(self) -> str:
        return short_form(self)

    def __str__(self) -> str:
        return long_form(self)

    @classmethod
    def parse(cls, value: "MetricType | int | str") -> "MetricType":
        """Create a MetricType from a member, its integer value or one of its string forms.

        Raises:
            InvalidMetricTypeError: If the value does not name a metric type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for forms in (_SHORT_FORM, _LONG_FORM):
                if lowered in forms:
                    return cls(forms.index(lowered))
            raise InvalidMetricTypeError(value, f"Unknown MetricType name {value!r}")
        validate_type(value)
        return cls(value)


def validate_type(value: object) -> None:
    """Check that value is one of the enumerated metric types.

    Raises:
        InvalidMetricTypeError: Naming the offending value otherwise
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= int(value) < len(_LONG_FORM):
        raise InvalidMetricTypeError(value)


def require_concrete(value: object) -> MetricType:
    """Return value as a MetricType that addresses a real resource (anything but GENERIC).

    Raises:
        InvalidMetricTypeError: For GENERIC or values outside the enumeration
    """
    validate_type(value)
    metric_type = MetricType(value)
    if metric_type is MetricType.GENERIC:
        raise InvalidMetricTypeError(value, "MetricType GENERIC can only be used as a query filter")
    return metric_type


def long_form(value: object) -> str:
    """Plural form used in URL paths, "unknown" for invalid values."""
    try:
        validate_type(value)
    except InvalidMetricTypeError:
        return "unknown"
    return _LONG_FORM[int(value)]  # type: ignore[call-overload]


def short_form(value: object) -> str:
    """Singular form used in query parameters, "unknown" for invalid values."""
    try:
        validate_type(value)
    except InvalidMetricTypeError:
        return "unknown"
    return _SHORT_FORM[int(value)]  # type: ignore[call-overload]
