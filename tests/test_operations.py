"""Tests for verb resolution, endpoint building, and request dispatch."""

from __future__ import annotations

import json

import httpx
import pytest

from ucli.exceptions import ConfigError
from ucli.models import Action, Configuration, FlagKind, FlagValue, HTTPMethod
from ucli.operations import VERB_TO_ACTION, build_endpoint, handle_operation, resolve_action
from ucli.output import OutputManager, set_output
from ucli.parser import parse_dynamic_flags


@pytest.fixture(autouse=True)
def _plain_output() -> None:
    set_output(OutputManager(no_color=True))


class TestResolveAction:
    @pytest.mark.parametrize(
        "verb, action, method",
        [
            ("get", Action.RETRIEVE, HTTPMethod.GET),
            ("list", Action.RETRIEVE, HTTPMethod.GET),
            ("show", Action.RETRIEVE, HTTPMethod.GET),
            ("create", Action.SUBMIT, HTTPMethod.POST),
            ("search", Action.SUBMIT, HTTPMethod.POST),
            ("find", Action.SUBMIT, HTTPMethod.POST),
            ("update", Action.REPLACE, HTTPMethod.PUT),
            ("set", Action.REPLACE, HTTPMethod.PUT),
            ("delete", Action.REMOVE, HTTPMethod.DELETE),
            ("drop", Action.REMOVE, HTTPMethod.DELETE),
        ],
    )
    def test_known_verbs(self, verb: str, action: Action, method: HTTPMethod) -> None:
        assert resolve_action(verb) is action
        assert action.method is method

    def test_verb_table_is_complete(self) -> None:
        assert len(VERB_TO_ACTION) == 10

    @pytest.mark.parametrize("verb", ["GET", "fetch", "", "patch"])
    def test_unknown_verbs(self, verb: str) -> None:
        assert resolve_action(verb) is None


class TestBuildEndpoint:
    def test_no_resources(self) -> None:
        assert build_endpoint([]) == "/"

    def test_single_resource(self) -> None:
        assert build_endpoint(["users"]) == "/users"

    def test_nested_resources(self) -> None:
        assert build_endpoint(["users", "42", "posts"]) == "/users/42/posts"


class TestHandleOperation:
    def test_retrieve_sends_flags_as_query(self, config, recording_transport) -> None:
        transport = recording_transport(content=b"[]")
        flags = parse_dynamic_flags(["--page", "2", "--active", "true", "--q=a b"])
        handle_operation("list", ["users"], flags, config, transport=transport)

        request = transport.last
        assert request.method == "GET"
        assert request.url.path == "/users"
        assert dict(request.url.params) == {"page": "2", "active": "true", "q": "a b"}
        assert request.content == b""

    def test_retrieve_renders_floats_and_json(self, config, recording_transport) -> None:
        transport = recording_transport()
        flags = {
            "ratio": FlagValue(kind=FlagKind.FLOAT, value=0.5),
            "ids": FlagValue(kind=FlagKind.JSON, value=[1.0, 2.0]),
        }
        handle_operation("get", ["items"], flags, config, transport=transport)
        assert transport.last.url.params["ratio"] == "0.5"
        assert transport.last.url.params["ids"] == "[1.0, 2.0]"

    def test_submit_sends_typed_json_body(self, config, recording_transport) -> None:
        transport = recording_transport(status_code=201)
        flags = parse_dynamic_flags(
            ["--name", "Alice", "--age", "30", "--admin", "false", "--tags", '["a","b"]']
        )
        handle_operation("create", ["users"], flags, config, transport=transport)

        request = transport.last
        assert request.method == "POST"
        assert request.url.query == b""
        assert json.loads(request.content) == {
            "name": "Alice", "age": 30, "admin": False, "tags": ["a", "b"],
        }

    def test_replace_uses_put(self, config, recording_transport) -> None:
        transport = recording_transport()
        handle_operation(
            "set", ["users", "7"], parse_dynamic_flags(["--name=Bob"]), config,
            transport=transport,
        )
        assert transport.last.method == "PUT"
        assert transport.last.url.path == "/users/7"
        assert json.loads(transport.last.content) == {"name": "Bob"}

    def test_submit_without_flags_sends_empty_object(self, config, recording_transport) -> None:
        transport = recording_transport()
        handle_operation("search", ["users"], {}, config, transport=transport)
        assert transport.last.content == b"{}"

    def test_remove_ignores_flags(self, config, recording_transport) -> None:
        transport = recording_transport(status_code=204)
        handle_operation(
            "delete", ["users", "7"], parse_dynamic_flags(["--force", "true"]), config,
            transport=transport,
        )
        request = transport.last
        assert request.method == "DELETE"
        assert request.url.query == b""
        assert request.content == b""

    def test_prints_body(self, config, recording_transport, capsys) -> None:
        transport = recording_transport(content=b'{"id":42}')
        handle_operation("show", ["users", "42"], {}, config, transport=transport)
        assert capsys.readouterr().out == '{"id":42}\n'

    def test_prints_status_message_for_empty_body(
        self, config, recording_transport, capsys
    ) -> None:
        transport = recording_transport(status_code=204)
        handle_operation("drop", ["users", "42"], {}, config, transport=transport)
        assert capsys.readouterr().out == (
            "[204] Operation completed successfully, no content to display.\n"
        )

    def test_unknown_operation_sends_nothing(self, config, recording_transport, capsys) -> None:
        transport = recording_transport()
        handle_operation("fetch", ["users"], {}, config, transport=transport)
        assert transport.requests == []
        assert capsys.readouterr().out == "Unknown operation: fetch\n"

    def test_unknown_operation_without_url_is_not_an_error(self, capsys) -> None:
        handle_operation("fetch", [], {}, Configuration())
        assert capsys.readouterr().out == "Unknown operation: fetch\n"

    def test_missing_url_is_config_error(self, recording_transport) -> None:
        transport = recording_transport()
        with pytest.raises(ConfigError, match="url"):
            handle_operation("get", ["users"], {}, Configuration(), transport=transport)
        assert transport.requests == []

    def test_base_url_path_is_kept(self, recording_transport) -> None:
        transport = recording_transport()
        config = Configuration(url="https://api.example.com/v2")
        handle_operation("get", ["users"], {}, config, transport=transport)
        assert str(transport.last.url) == "https://api.example.com/v2/users"

    def test_redirect_prints_final_body(self, config, capsys) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "/new"})
            return httpx.Response(200, content=b"final body")

        handle_operation("get", ["old"], {}, config, transport=httpx.MockTransport(handler))
        assert capsys.readouterr().out == "final body\n"

    def test_overflowing_json_is_sent_as_string(self, config, recording_transport) -> None:
        transport = recording_transport()
        handle_operation(
            "create", ["x"], parse_dynamic_flags(["--x", "[1e400]"]), config,
            transport=transport,
        )
        assert json.loads(transport.last.content) == {"x": "[1e400]"}
