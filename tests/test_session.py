"""Tests for the request and session models."""

import pytest

from reqline.errors import InvalidRequestError
from reqline.session import Request, Session


class TestRequest:
    """Test Request parsing and transforms."""

    def test_default_request(self):
        request = Request()
        assert request.address == "http://0.0.0.0/"
        assert not request.cookies_present()

    def test_parse_full_address(self):
        request = Request.parse("example.com:8080/a?b=1&flag#top")
        assert request.scheme == "http"
        assert request.host == "example.com"
        assert request.port == 8080
        assert request.path == "/a"
        assert request.query == (("b", "1"), ("flag", None))
        assert request.fragment == "top"
        assert request.address == "http://example.com:8080/a?b=1&flag#top"
        assert str(request) == request.address

    def test_parse_https_uses_default_port(self):
        request = Request.parse("https://example.com")
        assert request.port == 443
        assert request.address == "https://example.com/"

    @pytest.mark.parametrize("address", ["http://", "http://example.com:99999/"])
    def test_parse_invalid_address(self, address):
        with pytest.raises(InvalidRequestError):
            Request.parse(address)

    def test_unchanged_transform_returns_same_object(self):
        request = Request.parse("example.com").with_fragment("x")
        assert request.with_fragment("x") is request
        assert request.with_host("example.com") is request
        assert request.with_port(80) is request
        assert request.with_path("/") is request
        assert request.without_query() is request
        assert request.without_cookies() is request

    def test_changed_transform_returns_new_object(self):
        request = Request.parse("example.com")
        changed = request.with_fragment("x")
        assert changed is not request
        assert request.fragment is None
        assert changed.fragment == "x"

    def test_relative_paths(self):
        request = Request.parse("example.com/a/b")
        assert request.with_path("c").path == "/a/b/c"
        assert request.with_path("..").path == "/a"
        assert request.with_path("../../..").path == "/"
        assert request.with_path("./c/").path == "/a/b/c/"
        assert request.with_path("//x").path == "/x"

    def test_host_change_clears_cookies(self):
        request = Request.parse("example.com").with_cookie("id", "1")
        assert request.cookies == (("id", "1"),)
        assert not request.with_host("other.com").cookies_present()
        assert not request.with_address("other.com").cookies_present()
        assert request.with_address("example.com/x").cookies_present()

    def test_invalid_host_and_port(self):
        request = Request()
        with pytest.raises(InvalidRequestError):
            request.with_host("")
        with pytest.raises(InvalidRequestError):
            request.with_port(0)

    def test_query_parameters(self):
        request = Request.parse("example.com").with_query_parameter("a", "1")
        request = request.with_query_parameter("b").with_query_parameter("a", "2")
        assert request.address == "http://example.com/?a=2&b"
        assert request.without_query().address == "http://example.com/"


class TestSession:
    """Test Session request history."""

    def test_initial_request(self):
        assert Session().last_request == Request()
        assert Session("example.com").last_request.host == "example.com"

    def test_undo_keeps_first_request(self):
        session = Session()
        assert session.undo() is None
        second = session.last_request.with_path("/x")
        session.requests.append(second)
        assert session.undo() is second
        assert len(session.requests) == 1
