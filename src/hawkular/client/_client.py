"""Client facade for the Hawkular Metrics REST API."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from http import HTTPStatus
from typing import Any, TypeVar

import requests

from hawkular.client._endpoints import (
    data_endpoint,
    single_metric_endpoint,
    tag_query_endpoint,
    tags_endpoint,
    tenants_endpoint,
    type_endpoint,
)
from hawkular.client._modifiers import Modifier, RequestSpec, apply_modifiers, data, url
from hawkular.client._transport import Reply, Transport
from hawkular.config import Parameters
from hawkular.exceptions import DecodingError, EncodingError, HawkularClientError
from hawkular.logger import logger
from hawkular.models.metric_type import MetricType, require_concrete
from hawkular.models.record import BucketPoint, Datapoint, MetricDefinition, MetricHeader, TenantDefinition
from hawkular.utils.validators import validate_metric_id, validate_tags

T = TypeVar("T")

_BUCKET_PARAMS = ("buckets", "bucketDuration")


def _decode(reply: Reply, decoder: Callable[[Any], T], empty: T) -> T:
    payload = reply.json()
    if payload is None:
        return empty
    try:
        return decoder(payload)
    except (ValueError, KeyError, TypeError) as e:
        raise DecodingError(f"Unexpected response structure: {e}") from e


class Client:
    """Client for one Hawkular Metrics server.

    The client holds immutable parameters and a shared HTTP session and can be
    used from several threads at once. Every operation is one synchronous
    request/response round trip (``write`` sends one request per metric type).

    Every operation accepts trailing modifiers, applied in order before the
    operation's own request shape, e.g. ``tenant("other")`` or filters.

    Examples:
        >>> client = Client(Parameters(tenant="my-tenant", url="http://localhost:8080"))
        >>> client.create(MetricDefinition(id="cpu.load", type=MetricType.GAUGE))
        True
        >>> client.write([MetricHeader(id="cpu.load", type=MetricType.GAUGE, data=[Datapoint(value=0.5)])])
        >>> client.read_raw(MetricType.GAUGE, "cpu.load")
    """

    def __init__(self, parameters: Parameters, session: requests.Session | None = None) -> None:
        """Initialize client.

        Args:
            parameters: Connection parameters
            session: HTTP session to use. If None, the client creates one and
                closes it in ``close()``; an injected session is left open.
        """
        self.parameters = parameters
        self._owns_session = session is None
        self._transport = Transport(session if session is not None else requests.Session(), parameters)

    @property
    def tenant(self) -> str:
        return self.parameters.tenant

    @property
    def base_url(self) -> str:
        return self.parameters.base_url

    # ---- Low level ---------------------------------------------------------

    def build(self, *modifiers: Modifier) -> RequestSpec:
        """Apply modifiers to a fresh spec scoped to the default tenant."""
        return apply_modifiers(RequestSpec(tenant=self.parameters.tenant), modifiers)

    def url_for(self, *modifiers: Modifier) -> str:
        """Render the URL the given modifiers would address."""
        return self._transport.url_for(self.build(*modifiers))

    def send(self, *modifiers: Modifier) -> Reply:
        """Issue a request without applying any status policy.

        Raises:
            requests.RequestException: On transport failures
        """
        return self._transport.send(self.build(*modifiers))

    def _execute(self, *modifiers: Modifier) -> Reply:
        return self._transport.execute(self.build(*modifiers))

    # ---- Definitions -------------------------------------------------------

    def create(self, definition: MetricDefinition, *modifiers: Modifier) -> bool:
        """Create a new metric definition.

        Returns:
            True if the metric was created, False if it already existed

        Raises:
            EncodingError: If the id is empty or the type is not concrete
            HawkularClientError: For failures other than a conflict
        """
        validate_metric_id(definition.id)
        metric_type = require_concrete(definition.type)
        try:
            self._execute(*modifiers, data(definition.to_wire()), url("POST", type_endpoint(metric_type)))
        except HawkularClientError as e:
            if e.code != HTTPStatus.CONFLICT:
                raise
            logger.debug(f"Metric {definition.id} already exists")
            return False
        return True

    def definition(self, metric_type: MetricType, metric_id: str, *modifiers: Modifier) -> MetricDefinition | None:
        """Fetch a single metric definition, None if the server has no content for it."""
        validate_metric_id(metric_id)
        metric_type = require_concrete(metric_type)
        reply = self._execute(*modifiers, url("GET", type_endpoint(metric_type), single_metric_endpoint(metric_id)))
        return _decode(reply, lambda payload: MetricDefinition.model_validate({"type": metric_type, **payload}), None)

    def definitions(self, *modifiers: Modifier) -> list[MetricDefinition]:
        """List metric definitions, typically narrowed with type_filter/tags_filter/id_filter.

        Returns:
            Definitions in server order, empty when nothing matches
        """
        reply = self._execute(*modifiers, url("GET", type_endpoint(MetricType.GENERIC)))
        return _decode(reply, lambda payload: [MetricDefinition.model_validate(item) for item in payload], [])

    # ---- Tags --------------------------------------------------------------

    def tags(self, metric_type: MetricType, metric_id: str, *modifiers: Modifier) -> dict[str, str]:
        """Fetch the tags of a metric definition."""
        validate_metric_id(metric_id)
        metric_type = require_concrete(metric_type)
        reply = self._execute(
            *modifiers,
            url("GET", type_endpoint(metric_type), single_metric_endpoint(metric_id), tags_endpoint()),
        )
        return _decode(reply, lambda payload: {str(k): str(v) for k, v in payload.items()}, {})

    def update_tags(self, metric_type: MetricType, metric_id: str, tags: Mapping[str, str], *modifiers: Modifier) -> None:
        """Add or replace tags on a metric definition."""
        validate_metric_id(metric_id)
        validate_tags(dict(tags), "update_tags")
        metric_type = require_concrete(metric_type)
        self._execute(
            *modifiers,
            data(dict(tags)),
            url("PUT", type_endpoint(metric_type), single_metric_endpoint(metric_id), tags_endpoint()),
        )

    def delete_tags(self, metric_type: MetricType, metric_id: str, tags: Mapping[str, str], *modifiers: Modifier) -> None:
        """Remove tags from a metric definition."""
        validate_metric_id(metric_id)
        validate_tags(dict(tags), "delete_tags")
        metric_type = require_concrete(metric_type)
        self._execute(
            *modifiers,
            url(
                "DELETE",
                type_endpoint(metric_type),
                single_metric_endpoint(metric_id),
                tags_endpoint(),
                tag_query_endpoint(tags),
            ),
        )

    def tag_values(self, tags: Mapping[str, str], *modifiers: Modifier) -> dict[str, list[str]]:
        """Find the tag values matching tag patterns, e.g. ``{"hostname": "host[123]"}``.

        Returns:
            Matching values per tag name
        """
        validate_tags(dict(tags), "tag_values")
        reply = self._execute(*modifiers, url("GET", type_endpoint(MetricType.GENERIC), tags_endpoint(), tag_query_endpoint(tags)))
        return _decode(reply, lambda payload: {str(k): [str(v) for v in values] for k, values in payload.items()}, {})

    # ---- Datapoints --------------------------------------------------------

    def write(self, metrics: Iterable[MetricHeader], *modifiers: Modifier) -> None:
        """Write datapoints of possibly mixed metric types.

        Headers are grouped by their type and each group is posted to its type's
        data endpoint. All values are coerced before the first request, so an
        invalid value aborts the call without any network traffic.

        Raises:
            EncodingError: If no header is given, a type is not concrete or a value
                cannot be coerced (ConversionError)
            HawkularClientError: If the server rejects a batch
        """
        batches: dict[MetricType, list[dict[str, Any]]] = {}
        for header in metrics:
            validate_metric_id(header.id)
            metric_type = require_concrete(header.type)
            batches.setdefault(metric_type, []).append(header.to_wire(metric_type))
        if not batches:
            raise EncodingError("write requires at least one metric header")

        for metric_type, payload in batches.items():
            self._execute(*modifiers, data(payload), url("POST", type_endpoint(metric_type), data_endpoint()))

    def write_multiple(self, metric_type: MetricType, metrics: Iterable[MetricHeader], *modifiers: Modifier) -> None:
        """Write datapoints of several metrics sharing one type in a single request.

        The given metric_type is used for every header regardless of its own type.
        """
        metric_type = require_concrete(metric_type)
        payload = []
        for header in metrics:
            validate_metric_id(header.id)
            payload.append(header.to_wire(metric_type))
        if not payload:
            raise EncodingError("write_multiple requires at least one metric header")
        self._execute(*modifiers, data(payload), url("POST", type_endpoint(metric_type), data_endpoint()))

    def push_single(self, metric_type: MetricType, metric_id: str, datapoint: Datapoint, *modifiers: Modifier) -> None:
        """Write one datapoint. An unset timestamp becomes the current time."""
        metric_type = require_concrete(metric_type)
        header = MetricHeader(id=metric_id, type=metric_type, data=[datapoint])
        self.write_multiple(metric_type, [header], *modifiers)

    def read_raw(self, metric_type: MetricType, metric_id: str, *modifiers: Modifier) -> list[Datapoint]:
        """Read raw datapoints of one metric.

        Returns:
            Datapoints in server order, empty if the metric has no data
        """
        validate_metric_id(metric_id)
        metric_type = require_concrete(metric_type)
        reply = self._execute(
            *modifiers,
            url("GET", type_endpoint(metric_type), single_metric_endpoint(metric_id), data_endpoint()),
        )
        return _decode(reply, lambda payload: [Datapoint.from_wire(metric_type, item) for item in payload], [])

    def read_buckets(self, metric_type: MetricType, *modifiers: Modifier) -> list[BucketPoint]:
        """Read aggregated buckets over the metrics matched by the filters.

        A bucket shape is mandatory: pass buckets_filter or bucket_duration_filter.

        Raises:
            EncodingError: If no bucket shape was given
        """
        metric_type = require_concrete(metric_type)
        spec = self.build(*modifiers, url("GET", type_endpoint(metric_type), data_endpoint()))
        if not any(key in spec.params for key in _BUCKET_PARAMS):
            raise EncodingError("read_buckets requires buckets_filter or bucket_duration_filter")
        reply = self._transport.execute(spec)
        return _decode(reply, lambda payload: [BucketPoint.model_validate(item) for item in payload], [])

    # ---- Tenants -----------------------------------------------------------

    def tenants(self, *modifiers: Modifier) -> list[TenantDefinition]:
        """List all tenants."""
        reply = self._execute(*modifiers, url("GET", tenants_endpoint()))
        return _decode(reply, lambda payload: [TenantDefinition.model_validate(item) for item in payload], [])

    def create_tenant(self, tenant_definition: TenantDefinition, *modifiers: Modifier) -> bool:
        """Create a tenant.

        Returns:
            True if the tenant was created, False if it already existed
        """
        if not tenant_definition.id:
            raise EncodingError("Tenant id must not be empty")
        try:
            self._execute(*modifiers, data(tenant_definition.to_wire()), url("POST", tenants_endpoint()))
        except HawkularClientError as e:
            if e.code != HTTPStatus.CONFLICT:
                raise
            logger.debug(f"Tenant {tenant_definition.id} already exists")
            return False
        return True

    # ---- Lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self._transport.session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        self.close()
