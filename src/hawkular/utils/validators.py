"""Argument validators for client operations.

Every check here runs before a request is built, so invalid input never
reaches the network.
"""

from hawkular.exceptions import EncodingError

__all__ = ["validate_metric_id", "validate_tags"]


def validate_metric_id(metric_id: str) -> None:
    """Validate a metric id.

    Args:
        metric_id: Metric id from user input

    Raises:
        EncodingError: If the id is empty or not a string

    Examples:
        >>> validate_metric_id("cpu.load")  # OK
        >>> validate_metric_id("")  # Raises EncodingError
    """
    if not isinstance(metric_id, str) or not metric_id:
        raise EncodingError(f"Invalid metric id {metric_id!r}: must be a non-empty string")


def validate_tags(tags: dict[str, str], operation: str = "operation") -> None:
    """Validate a tag map that must carry at least one entry.

    Args:
        tags: Tag map from user input
        operation: Operation name (for error messages), e.g. "update_tags"

    Raises:
        EncodingError: If tags is empty, or has non-string or empty keys
    """
    if not tags:
        raise EncodingError(f"{operation} requires at least one tag")
    for key, value in tags.items():
        if not isinstance(key, str) or not key:
            raise EncodingError(f"Invalid tag name {key!r}: must be a non-empty string")
        if not isinstance(value, str):
            raise EncodingError(f"Invalid value for tag {key!r}: {value!r} is not a string")
