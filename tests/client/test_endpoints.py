"""Tests for URL construction."""

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
from hawkular.models import MetricType

BASE = "http://localhost:8080/hawkular/metrics"


class TestBuildUrl:
    """Tests for build_url and the endpoint helpers."""

    def test_tenant_root(self):
        assert build_url(BASE, "tenant1") == f"{BASE}/tenant1"

    def test_type_collection(self):
        assert build_url(BASE, "t", [type_endpoint(MetricType.GAUGE)]) == f"{BASE}/t/gauges"

    def test_generic_collection(self):
        assert build_url(BASE, "t", [type_endpoint(MetricType.GENERIC)]) == f"{BASE}/t/metrics"

    def test_single_metric(self):
        url = build_url(BASE, "t", [type_endpoint(MetricType.COUNTER), single_metric_endpoint("cpu.load")])
        assert url == f"{BASE}/t/counters/cpu.load"

    def test_metric_id_is_escaped(self):
        """Slashes and spaces in ids do not create extra path segments."""
        url = build_url(BASE, "t", [type_endpoint(MetricType.AVAILABILITY), single_metric_endpoint("test/metric 1")])
        assert url == f"{BASE}/t/availability/test%2Fmetric%201"

    def test_tags_sub_resource(self):
        endpoints = [type_endpoint(MetricType.GAUGE), single_metric_endpoint("m"), tags_endpoint()]
        assert build_url(BASE, "t", endpoints) == f"{BASE}/t/gauges/m/tags"

    def test_tag_deletion_path(self):
        """Tag pairs are comma-joined, each key and value escaped separately."""
        endpoints = [
            type_endpoint(MetricType.GAUGE),
            single_metric_endpoint("m"),
            tags_endpoint(),
            tag_query_endpoint({"host": "a/b", "env": "test"}),
        ]
        assert build_url(BASE, "t", endpoints) == f"{BASE}/t/gauges/m/tags/env:test,host:a%2Fb"

    def test_batch_data_endpoint(self):
        assert build_url(BASE, "t", [type_endpoint(MetricType.GAUGE), data_endpoint()]) == f"{BASE}/t/gauges/data"

    def test_single_series_data_endpoint(self):
        endpoints = [type_endpoint(MetricType.GAUGE), single_metric_endpoint("m"), data_endpoint()]
        assert build_url(BASE, "t", endpoints) == f"{BASE}/t/gauges/m/data"

    def test_tenants_endpoint_is_not_tenant_scoped(self):
        assert build_url(BASE, "t", [tenants_endpoint()]) == f"{BASE}/tenants"

    def test_query_string_is_appended(self):
        url = build_url(BASE, "t", [type_endpoint(MetricType.GENERIC)], {"type": "gauge", "tags": "env:test"})
        assert url == f"{BASE}/t/metrics?tags=env%3Atest&type=gauge"

    def test_tenant_is_escaped(self):
        assert build_url(BASE, "a b") == f"{BASE}/a%20b"

    def test_trailing_slash_on_base(self):
        assert build_url(BASE + "/", "t") == f"{BASE}/t"


class TestEncodeQuery:
    """Tests for encode_query."""

    def test_empty(self):
        assert encode_query({}) == ""
        assert encode_query(None) == ""

    def test_order_does_not_matter(self):
        assert encode_query({"b": "2", "a": "1"}) == encode_query({"a": "1", "b": "2"}) == "a=1&b=2"

    def test_duplicate_keys_keep_last_value(self):
        assert encode_query([("buckets", "1"), ("buckets", "5")]) == "buckets=5"

    def test_values_are_escaped(self):
        assert encode_query({"percentiles": "90,99"}) == "percentiles=90%2C99"


def test_encode_tags_is_sorted():
    assert encode_tags({"units": "bytes", "env": "unittest"}) == "env:unittest,units:bytes"
