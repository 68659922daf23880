import dataclasses
import json

import pytest

from microfetch.errors import MalformedTargetError, SerializationError
from microfetch.request import RequestSpec, build_transport_options, serialize_body


def test_serialize_body_none_means_no_body() -> None:
    assert serialize_body(None) is None


@pytest.mark.parametrize("value", [0, "", [], {}, False])
def test_serialize_body_keeps_falsy_values(value: object) -> None:
    payload = serialize_body(value)
    assert payload is not None
    assert json.loads(payload) == value


def test_serialize_body_is_compact_utf8() -> None:
    assert serialize_body({"a": 1, "name": "héllo"}) == '{"a":1,"name":"héllo"}'.encode("utf-8")


def test_serialize_body_rejects_circular_structures() -> None:
    loop: dict[str, object] = {}
    loop["self"] = loop
    with pytest.raises(SerializationError) as info:
        serialize_body(loop)
    assert info.value.kind == "serialization"


@pytest.mark.parametrize("value", [object(), {"when": {1, 2}}, float("nan")])
def test_serialize_body_rejects_non_json_values(value: object) -> None:
    with pytest.raises(SerializationError):
        serialize_body(value)


def test_request_spec_copies_and_freezes_headers() -> None:
    headers = {"X-Trace": "1"}
    spec = RequestSpec.create("post", "http://svc.local/items", headers=headers, body={"a": 1})
    headers["X-Trace"] = "2"

    assert spec.method == "POST"
    assert spec.headers["X-Trace"] == "1"
    assert spec.body == b'{"a":1}'
    with pytest.raises(TypeError):
        spec.headers["X-Trace"] = "3"  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.method = "GET"  # type: ignore[misc]


def test_request_spec_rejects_unknown_method() -> None:
    with pytest.raises(ValueError):
        RequestSpec.create("PATCH", "http://svc.local/items")


def test_request_spec_surfaces_target_errors_before_body_errors() -> None:
    with pytest.raises(MalformedTargetError):
        RequestSpec.create("GET", "http://svc.local:bad/", body=object())


def test_transport_options_for_https_target() -> None:
    spec = RequestSpec.create("GET", "https://svc.local/items?limit=5", headers={"Accept": "application/json"})
    options = build_transport_options(spec)

    assert options.variant == "encrypted"
    assert options.host == "svc.local"
    assert options.port == 443
    assert options.path == "/items?limit=5"
    assert options.method == "GET"
    assert dict(options.headers) == {"Accept": "application/json"}
    assert options.url == "https://svc.local:443/items?limit=5"


def test_transport_options_defaults_empty_path_to_root() -> None:
    options = build_transport_options(RequestSpec.create("DELETE", "http://svc.local:9000"))
    assert options.path == "/"
    assert options.port == 9000
    assert options.url == "http://svc.local:9000/"


def test_transport_options_bracket_ipv6_hosts() -> None:
    options = build_transport_options(RequestSpec.create("GET", "http://[::1]:8080/health"))
    assert options.host == "::1"
    assert options.url == "http://[::1]:8080/health"


@pytest.mark.parametrize("headers", [{"X-Name": "żółw"}, {"X-Count": 1}])
def test_request_spec_rejects_headers_that_cannot_be_encoded(headers: dict) -> None:
    with pytest.raises(SerializationError) as info:
        RequestSpec.create("GET", "http://svc.local/", headers=headers)
    assert info.value.kind == "serialization"


def test_request_spec_accepts_ascii_headers() -> None:
    spec = RequestSpec.create("GET", "http://svc.local/", headers={"Authorization": "Bearer abc"})
    assert dict(spec.headers) == {"Authorization": "Bearer abc"}
