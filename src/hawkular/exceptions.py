"""
Hawkular client exceptions module.

Contains exception classes used across multiple modules to avoid circular dependencies.
Transport failures (DNS, refused connections, timeouts) are not wrapped here:
they surface as ``requests.RequestException`` exactly as the session raised them.
"""


class HawkularError(Exception):
    """Base class for errors raised by the Hawkular client."""

    pass


class EncodingError(HawkularError, ValueError):
    """Raised when a caller-supplied value cannot be serialized into a request.

    Always raised before any network I/O takes place.
    """

    pass


class ConversionError(EncodingError):
    """Raised when a datapoint value cannot be converted to a float."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cannot convert {value!r} to float64")


class InvalidMetricTypeError(EncodingError):
    """Raised for metric type values outside the enumeration (or not allowed in context)."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        super().__init__(reason or f"Given MetricType value {value} is not valid")


class DecodingError(HawkularError):
    """Raised when a successful response body cannot be decoded into the expected structure."""

    pass


class HawkularClientError(HawkularError):
    """Raised when Hawkular answers with a status code outside the success policy.

    Attributes:
        code: HTTP status code returned by the server
        message: Message from the server's ``errorMsg`` envelope, or a description
            of why the envelope could not be parsed
    """

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"Hawkular returned status code {code}, error message: {message}")
