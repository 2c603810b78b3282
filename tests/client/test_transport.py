"""Tests for the HTTP transport and its status policy."""

import pytest
import requests

from hawkular.client._modifiers import RequestSpec, tags_filter, type_filter
from hawkular.client._transport import Reply, Transport, parse_error_response
from hawkular.config import Parameters
from hawkular.exceptions import DecodingError, HawkularClientError
from hawkular.models import MetricType

BASE = "http://localhost:8080/hawkular/metrics"


@pytest.fixture
def transport(mock_session):
    return Transport(mock_session, Parameters(tenant="tenant1"))


class TestSend:
    """Tests for request construction."""

    def test_request_shape(self, transport, mock_session):
        transport.send(RequestSpec(method="POST", endpoints=(), body={"id": "m"}))

        method, target = mock_session.request.call_args.args
        kwargs = mock_session.request.call_args.kwargs
        assert method == "POST"
        assert target == f"{BASE}/tenant1"
        assert kwargs["json"] == {"id": "m"}
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["verify"] is True
        assert kwargs["timeout"] is None
        assert "Authorization" not in kwargs["headers"]

    def test_no_body_sends_no_json(self, transport, mock_session):
        transport.send(RequestSpec())
        assert "json" not in mock_session.request.call_args.kwargs

    def test_spec_tenant_overrides_default(self, transport, mock_session):
        transport.send(RequestSpec(tenant="other"))
        assert mock_session.request.call_args.args[1] == f"{BASE}/other"

    def test_query_parameters(self, transport):
        spec = RequestSpec(params={"type": "gauge", "tags": "env:test"})
        spec = tags_filter({"env": "prod"})(type_filter(MetricType.COUNTER)(spec))
        assert transport.url_for(spec) == f"{BASE}/tenant1?tags=env%3Aprod&type=counter"

    def test_token_tls_and_timeout_are_forwarded(self, mock_session):
        parameters = Parameters(tenant="t", url="https://hawkular.example.com", token="secret", verify_tls="/etc/ca.pem", timeout=2.5)
        Transport(mock_session, parameters).send(RequestSpec())

        kwargs = mock_session.request.call_args.kwargs
        assert mock_session.request.call_args.args[1] == "https://hawkular.example.com/hawkular/metrics/t"
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["verify"] == "/etc/ca.pem"
        assert kwargs["timeout"] == 2.5

    def test_response_is_closed(self, transport, mock_session):
        transport.send(RequestSpec())
        mock_session.request.return_value.close.assert_called_once()

    def test_response_is_closed_when_reading_fails(self, transport, mock_session, make_response):
        response = make_response(200)
        response.headers = 5
        mock_session.request.return_value = response
        with pytest.raises(TypeError):
            transport.send(RequestSpec())
        response.close.assert_called_once()

    def test_transport_errors_propagate(self, transport, mock_session):
        mock_session.request.side_effect = requests.Timeout("timed out")
        with pytest.raises(requests.Timeout):
            transport.execute(RequestSpec())


class TestStatusPolicy:
    """Tests for per-method success codes."""

    @pytest.mark.parametrize(
        "method,status_code",
        [("GET", 200), ("GET", 204), ("POST", 200), ("POST", 201), ("PUT", 200), ("DELETE", 200)],
    )
    def test_success(self, transport, mock_session, make_response, method, status_code):
        mock_session.request.return_value = make_response(status_code)
        assert transport.execute(RequestSpec(method=method)).status_code == status_code

    @pytest.mark.parametrize(
        "method,status_code",
        [("GET", 201), ("PUT", 201), ("PUT", 204), ("DELETE", 204), ("POST", 204), ("GET", 404), ("POST", 500)],
    )
    def test_failure(self, transport, mock_session, make_response, method, status_code):
        mock_session.request.return_value = make_response(status_code, b'{"errorMsg": "nope"}')
        with pytest.raises(HawkularClientError) as exc_info:
            transport.execute(RequestSpec(method=method))
        assert exc_info.value.code == status_code
        assert exc_info.value.message == "nope"

    def test_send_applies_no_policy(self, transport, mock_session, make_response):
        mock_session.request.return_value = make_response(500, b"boom")
        reply = transport.send(RequestSpec())
        assert reply.status_code == 500
        assert reply.body == b"boom"


class TestErrorParsing:
    """Tests for parse_error_response."""

    def test_error_message(self):
        error = parse_error_response(Reply(400, b'{"errorMsg": "Invalid type"}'))
        assert error.code == 400
        assert str(error) == "Hawkular returned status code 400, error message: Invalid type"

    def test_unparseable_body_keeps_code(self):
        error = parse_error_response(Reply(502, b"<html>Bad Gateway</html>"))
        assert error.code == 502
        assert error.message.startswith("Reply could not be parsed: ")

    def test_empty_body(self):
        error = parse_error_response(Reply(503))
        assert error.code == 503
        assert error.message.startswith("Reply could not be parsed: ")


class TestReply:
    """Tests for Reply decoding."""

    def test_json(self):
        assert Reply(200, b'[{"id": "m"}]').json() == [{"id": "m"}]

    def test_no_content_is_none(self):
        assert Reply(204).json() is None
        assert Reply(200, b"  ").json() is None

    def test_invalid_json(self):
        with pytest.raises(DecodingError):
            Reply(200, b"{not json").json()

    def test_headers_are_case_insensitive(self, transport, mock_session, make_response):
        mock_session.request.return_value = make_response(200, b"[]", {"Content-Type": "application/json"})
        assert transport.send(RequestSpec()).headers["content-type"] == "application/json"
