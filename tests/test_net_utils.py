from starlette.requests import Request

from imageshop.core.net_utils import get_client_ip, is_trusted_proxy


def make_request(headers=None, client=("10.0.0.5", 52311)):
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": raw_headers,
        "client": client,
        "query_string": b"",
    }
    return Request(scope)


def test_no_forwarding_headers_uses_socket_address():
    request = make_request()
    assert get_client_ip(request, trusted_proxies=["*"]) == "10.0.0.5"


def test_headers_ignored_from_untrusted_peer():
    request = make_request({"X-Forwarded-For": "203.0.113.7"})
    assert get_client_ip(request, trusted_proxies=[]) == "10.0.0.5"
    assert get_client_ip(request, trusted_proxies=["10.0.0.9"]) == "10.0.0.5"


def test_forwarded_for_from_trusted_proxy_returns_first_hop():
    request = make_request({"X-Forwarded-For": "203.0.113.7, 10.0.0.5"})
    assert get_client_ip(request, trusted_proxies=["10.0.0.5"]) == "203.0.113.7"


def test_header_priority_order():
    request = make_request(
        {"Proxy-Client-IP": "198.51.100.2", "WL-Proxy-Client-IP": "198.51.100.3"}
    )
    assert get_client_ip(request, trusted_proxies=["*"]) == "198.51.100.2"

    request = make_request({"WL-Proxy-Client-IP": "198.51.100.3"})
    assert get_client_ip(request, trusted_proxies=["*"]) == "198.51.100.3"


def test_empty_header_falls_through_to_next():
    request = make_request({"X-Forwarded-For": "", "HTTP-CLIENT-IP": "192.0.2.44"})
    assert get_client_ip(request, trusted_proxies=["*"]) == "192.0.2.44"


def test_missing_client_returns_placeholder():
    request = make_request(client=None)
    assert get_client_ip(request, trusted_proxies=[]) == "-"


def test_is_trusted_proxy():
    assert is_trusted_proxy("10.0.0.1", ["*"])
    assert is_trusted_proxy("10.0.0.1", ["10.0.0.1", "10.0.0.2"])
    assert not is_trusted_proxy("10.0.0.3", ["10.0.0.1"])
    assert not is_trusted_proxy("10.0.0.3", [])
