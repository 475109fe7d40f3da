"""Tests for TelegramClient."""

import io
import json
import os
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch
from urllib.parse import parse_qsl

import httpx
import pytest
import respx

from tgbot_sdk import Batched, Flat, InputFile, OutputMode, TelegramClient, get_client
from tgbot_sdk.exceptions import InvalidOptionError, InvalidShapeError, TelegramConfigError
from tgbot_sdk.methods import BotMethodsMixin
from tgbot_sdk.updates import UpdateContext, parse_update

TOKEN = "123456:ABC-DEF"
API = f"https://api.telegram.org/bot{TOKEN}"
POPEN = "tgbot_sdk._internal.dispatch.background.subprocess.Popen"


def _fields(request: httpx.Request) -> dict[str, str]:
    return dict(parse_qsl(request.content.decode()))


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"ok": True, "result": _fields(request)})


class TestTelegramClientFromEnv:
    """Tests for TelegramClient.from_env()."""

    def test_from_env_with_all_vars(self):
        """Should read every setting from the environment."""
        env = {
            "TELEGRAM_BOT_TOKEN": TOKEN,
            "TELEGRAM_ERROR_CHAT_ID": "-100123",
            "TELEGRAM_TIMEOUT": "15",
            "TELEGRAM_MAX_CONCURRENCY": "4",
            "TELEGRAM_API_URL": "http://localhost:8081/",
            "TELEGRAM_DEBUG": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            client = TelegramClient.from_env()
            assert client.bot_id == "123456"
            assert client.timeout == 15
            assert client._error_chat_id == "-100123"
            assert client._api_url == "http://localhost:8081"
            assert client._debug is True

    def test_from_env_defaults(self):
        """Should fall back to defaults when optional vars are missing."""
        with patch.dict(os.environ, {"TELEGRAM_BOT_TOKEN": TOKEN}, clear=True):
            client = TelegramClient.from_env()
            assert client.timeout == 60
            assert client._error_chat_id is None
            assert client._api_url == "https://api.telegram.org"
            assert client._debug is False

    def test_from_env_malformed_timeout_raises(self):
        """Should raise ValueError when TELEGRAM_TIMEOUT is not an integer."""
        env = {"TELEGRAM_BOT_TOKEN": TOKEN, "TELEGRAM_TIMEOUT": "soon"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            TelegramClient.from_env()

    def test_from_env_malformed_concurrency_raises(self):
        """Should raise ValueError when TELEGRAM_MAX_CONCURRENCY is not an integer."""
        env = {"TELEGRAM_BOT_TOKEN": TOKEN, "TELEGRAM_MAX_CONCURRENCY": "many"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(ValueError):
            TelegramClient.from_env()

    def test_get_client(self):
        """get_client() builds a client from the environment."""
        with patch.dict(os.environ, {"TELEGRAM_BOT_TOKEN": TOKEN}, clear=True):
            client = get_client()
            assert isinstance(client, TelegramClient)
            assert client.bot_id == "123456"


class TestTelegramClientConfig:
    """Tests for construction-time configuration."""

    def test_bot_id(self):
        """bot_id is the token prefix, or None without a token."""
        assert TelegramClient(TOKEN).bot_id == "123456"
        assert TelegramClient().bot_id is None

    def test_default_options_are_merged(self):
        """Given defaults override the built-in ones."""
        client = TelegramClient(TOKEN, default_options={"return": "raw_response"})
        assert client.default_options.return_mode is OutputMode.RAW_RESPONSE
        assert client.default_options.send_error is True

    def test_invalid_default_options(self):
        """Invalid defaults are rejected by the constructor."""
        with pytest.raises(InvalidOptionError):
            TelegramClient(TOKEN, default_options={"send_error": "yes"})

    def test_set_timeout_is_chainable(self):
        """set_timeout() updates the engine and returns the client."""
        client = TelegramClient(TOKEN)
        assert client.set_timeout(5) is client
        assert client.timeout == 5
        assert client._engine.timeout == 5

    def test_context_manager_closes(self):
        """Leaving the with block closes the HTTP client."""
        with TelegramClient(TOKEN) as client:
            pass
        assert client._engine._client.is_closed


class TestSendMethodValidation:
    """Construction-time failures raise before any request."""

    def test_missing_token(self):
        """A client without a token cannot send."""
        with pytest.raises(TelegramConfigError):
            TelegramClient().send_method("getMe")

    def test_unknown_option(self):
        """Unknown option keys reject the call without network activity."""
        with patch(POPEN) as popen, pytest.raises(InvalidOptionError):
            TelegramClient(TOKEN).send_message(
                {"chat_id": 1}, {"run_in_background": True, "retry": True}
            )
        popen.assert_not_called()

    def test_invalid_shape(self):
        """Parameters nested too deeply are rejected."""
        with pytest.raises(InvalidShapeError):
            TelegramClient(TOKEN).send_message([[{"chat_id": 1}]])

    def test_non_string_field_names(self):
        """Field names that are not strings raise InvalidShapeError, not a pydantic error."""
        client = TelegramClient(TOKEN)
        with pytest.raises(InvalidShapeError):
            client.send_message({0: "a", 1: "b"})
        with pytest.raises(InvalidShapeError):
            client.send_message([{"chat_id": 1}, {2: "b"}])


class TestSendMethodFlat:
    """Tests for single invocations."""

    @respx.mock
    def test_send_message_result_map(self):
        """A flat call returns the `result` field as a dict."""
        route = respx.post(f"{API}/sendMessage").mock(side_effect=_echo)

        result = TelegramClient(TOKEN).send_message({"chat_id": 123, "text": "hi"})

        assert route.call_count == 1
        assert result == {"chat_id": "123", "text": "hi"}

    @respx.mock
    def test_empty_body_is_false(self):
        """An empty body resolves to False."""
        respx.post(f"{API}/sendMessage").mock(return_value=httpx.Response(200, text=""))

        result = TelegramClient(TOKEN).send_message({"chat_id": 123, "text": "hi"})

        assert result is False

    @respx.mock
    def test_get_me_without_parameters(self):
        """Methods can be called without parameters."""
        route = respx.post(f"{API}/getMe").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"id": 123456, "is_bot": True}})
        )

        result = TelegramClient(TOKEN).get_me()

        assert result == {"id": 123456, "is_bot": True}
        assert route.calls.last.request.content == b""

    @respx.mock
    @pytest.mark.parametrize(
        "mode, check",
        [
            ("raw_response", lambda r: json.loads(r)["ok"] is True),
            ("raw_response_map", lambda r: r["result"]["message_id"] == 7),
            ("raw_response_object", lambda r: r.result.message_id == 7),
            ("result_map", lambda r: r == {"message_id": 7}),
            ("result_object", lambda r: isinstance(r, SimpleNamespace) and r.message_id == 7),
        ],
    )
    def test_output_modes(self, mode, check):
        """Each output mode shapes the same response differently."""
        respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 7}})
        )

        result = TelegramClient(TOKEN).send_message({"chat_id": 1, "text": "x"}, {"return": mode})

        assert check(result)

    @respx.mock
    def test_api_error_result_is_false(self):
        """An API failure resolves to False in result modes."""
        respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(
                400, json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
            )
        )

        result = TelegramClient(TOKEN).send_message({"chat_id": 1, "text": "x"})

        assert result is False

    @respx.mock
    def test_api_error_raw_response_keeps_body(self):
        """An API failure still returns the body in raw_response mode."""
        respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(400, json={"ok": False, "error_code": 400})
        )

        result = TelegramClient(TOKEN).send_message(
            {"chat_id": 1, "text": "x"}, {"return": "raw_response"}
        )

        assert json.loads(result)["error_code"] == 400

    @respx.mock
    def test_explicit_flat_with_nested_first_field(self):
        """Flat() sends fields whose first value is a list as one call."""
        route = respx.post(f"{API}/setMyCommands").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": True})
        )
        commands = [{"command": "start", "description": "Start"}]

        result = TelegramClient(TOKEN).set_my_commands(Flat(params={"commands": commands}))

        assert result is True
        assert json.loads(_fields(route.calls.last.request)["commands"]) == commands

    @respx.mock
    def test_upload(self, tmp_path: Path):
        """InputFile fields are uploaded as multipart parts."""
        path = tmp_path / "invoice.pdf"
        path.write_bytes(b"%PDF-1.4")
        route = respx.post(f"{API}/sendDocument").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 9}})
        )

        result = TelegramClient(TOKEN).send_document({"chat_id": 1, "document": InputFile(path=path)})

        assert result == {"message_id": 9}
        content = route.calls.last.request.read()
        assert b'filename="invoice.pdf"' in content

    @respx.mock
    def test_bytes_upload(self):
        """Raw bytes are uploaded as a multipart part, not a form field."""
        route = respx.post(f"{API}/sendPhoto").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 3}})
        )

        result = TelegramClient(TOKEN).send_photo({"chat_id": 1, "photo": b"\x89PNG"})

        assert result == {"message_id": 3}
        request = route.calls.last.request
        content = request.read()
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="photo"' in content
        assert b"\x89PNG" in content
        assert b"x89PNG" not in content


class TestSendMethodBatched:
    """Tests for batched invocations."""

    @respx.mock
    def test_batch_returns_keyed_results(self):
        """A list of parameter sets returns one result per position."""
        route = respx.post(f"{API}/sendMessage").mock(side_effect=_echo)

        result = TelegramClient(TOKEN).send_message(
            [{"chat_id": 1, "text": "a"}, {"chat_id": 2, "text": "b"}]
        )

        assert route.call_count == 2
        assert result == {
            0: {"chat_id": "1", "text": "a"},
            1: {"chat_id": "2", "text": "b"},
        }

    @respx.mock
    def test_one_failure_does_not_affect_siblings(self):
        """Each element resolves on its own."""

        def flaky(request):
            if _fields(request)["chat_id"] == "2":
                return httpx.Response(200, text="")
            return _echo(request)

        respx.post(f"{API}/sendMessage").mock(side_effect=flaky)

        result = TelegramClient(TOKEN).send_message(
            [{"chat_id": 1, "text": "a"}, {"chat_id": 2, "text": "b"}]
        )

        assert result == {0: {"chat_id": "1", "text": "a"}, 1: False}

    @respx.mock
    def test_unencodable_element_does_not_affect_siblings(self):
        """An element httpx cannot encode fails alone; its sibling still resolves."""
        route = respx.post(f"{API}/sendDocument").mock(side_effect=_echo)

        result = TelegramClient(TOKEN).send_document(
            [{"chat_id": 1, "text": "a"}, {"chat_id": 2, "document": io.StringIO("x")}]
        )

        assert route.call_count == 1
        assert result == {0: {"chat_id": "1", "text": "a"}, 1: False}

    @respx.mock
    def test_named_batch_keeps_keys(self):
        """Named entries come back under their names."""
        respx.post(f"{API}/sendMessage").mock(side_effect=_echo)

        result = TelegramClient(TOKEN).send_message(
            {"alice": {"chat_id": 1, "text": "a"}, "bob": {"chat_id": 2, "text": "b"}}
        )

        assert list(result) == ["alice", "bob"]
        assert result["bob"]["chat_id"] == "2"

    @respx.mock
    def test_batch_size_matches_input(self):
        """A batch of N returns exactly N entries."""
        respx.post(f"{API}/sendMessage").mock(side_effect=_echo)

        params = [{"chat_id": i, "text": str(i)} for i in range(7)]
        result = TelegramClient(TOKEN, max_concurrency=3).send_message(Batched.of(params))

        assert sorted(result) == list(range(7))

    def test_empty_batch(self):
        """An empty batch sends nothing and returns an empty dict."""
        assert TelegramClient(TOKEN).send_message([]) == {}


class TestSendMethodBackground:
    """Tests for run_in_background."""

    @respx.mock
    def test_flat_returns_true_immediately(self):
        """A background call launches a process and returns True without HTTP."""
        with patch(POPEN) as popen:
            result = TelegramClient(TOKEN).send_message(
                {"chat_id": 123, "text": "hi"}, {"run_in_background": True}
            )

        assert result is True
        popen.assert_called_once()
        cmd = popen.call_args.args[0]
        assert cmd[-1] == f"{API}/sendMessage"
        assert "--max-time" in cmd

    def test_background_uses_client_timeout(self):
        """The detached request is bounded by the client timeout."""
        with patch(POPEN) as popen:
            TelegramClient(TOKEN).set_timeout(12).send_message(
                {"chat_id": 1, "text": "hi"}, {"run_in_background": True}
            )

        cmd = popen.call_args.args[0]
        assert cmd[cmd.index("--max-time") + 1] == "12"

    def test_batch_with_unsupported_field(self):
        """An element with an unsupported value is False; the others launch."""
        with patch(POPEN) as popen:
            result = TelegramClient(TOKEN).send_message(
                [{"chat_id": 1, "text": "a"}, {"chat_id": 2, "text": object()}, {"chat_id": 3, "text": "c"}],
                {"run_in_background": True},
            )

        assert result == {0: True, 1: False, 2: True}
        assert popen.call_count == 2

    def test_background_default(self):
        """Background mode can be the client default."""
        with patch(POPEN) as popen:
            client = TelegramClient(TOKEN, default_options={"run_in_background": True})
            assert client.send_message({"chat_id": 1, "text": "hi"}) is True
        popen.assert_called_once()


class TestErrorEscalation:
    """Tests for failure reports (send_error)."""

    @respx.mock
    def test_empty_body_reports_once(self):
        """A failure sends exactly one report, even when the report fails too."""
        route = respx.post(f"{API}/sendMessage").mock(return_value=httpx.Response(200, text=""))

        client = TelegramClient(TOKEN, error_chat_id=-100999)
        result = client.send_message({"chat_id": 123, "text": "hi"})

        assert result is False
        assert route.call_count == 2
        report = _fields(route.calls[1].request)
        assert report["chat_id"] == "-100999"
        assert report["text"].startswith("Response is empty!")

    @respx.mock
    def test_report_exception_is_swallowed(self):
        """A network error while reporting does not reach the caller."""
        calls = {"n": 0}

        def first_empty_then_down(request):
            calls["n"] += 1
            if calls["n"] == 1:
                return httpx.Response(200, text="")
            raise httpx.ConnectError("down")

        route = respx.post(f"{API}/sendMessage").mock(side_effect=first_empty_then_down)

        result = TelegramClient(TOKEN, error_chat_id=-100999).send_message({"chat_id": 1, "text": "x"})

        assert result is False
        assert route.call_count == 2

    @respx.mock
    def test_send_error_disabled(self):
        """No report is sent when send_error is False."""
        route = respx.post(f"{API}/sendMessage").mock(return_value=httpx.Response(200, text=""))

        result = TelegramClient(TOKEN, error_chat_id=-100999).send_message(
            {"chat_id": 1, "text": "x"}, {"send_error": False}
        )

        assert result is False
        assert route.call_count == 1

    @respx.mock
    def test_no_target_no_report(self):
        """Without an error chat or context there is nobody to report to."""
        route = respx.post(f"{API}/sendMessage").mock(return_value=httpx.Response(200, text=""))

        TelegramClient(TOKEN).send_message({"chat_id": 1, "text": "x"})

        assert route.call_count == 1

    @respx.mock
    def test_api_error_reported_to_update_chat_and_error_chat(self):
        """API failures go to the update's chat and to the error chat."""
        failing = respx.post(f"{API}/banChatMember").mock(
            return_value=httpx.Response(
                400, json={"ok": False, "error_code": 400, "description": "Bad Request: not enough rights"}
            )
        )
        reports = respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})
        )
        parsed = parse_update(
            {"update_id": 1, "message": {"chat": {"id": 42}, "from": {"id": 5}, "text": "/ban"}}
        )

        client = TelegramClient(TOKEN, error_chat_id=-100999)
        result = client.ban_chat_member({"chat_id": 42, "user_id": 7}, context=parsed.context)

        assert result is False
        assert failing.call_count == 1
        assert reports.call_count == 2
        targets = [_fields(call.request)["chat_id"] for call in reports.calls]
        assert targets == ["42", "-100999"]
        assert "not enough rights" in _fields(reports.calls[0].request)["text"]

    @respx.mock
    def test_successful_non_ok_response_not_reported(self):
        """A 200 response is not reported even when `ok` is false."""
        route = respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(200, json={"ok": False})
        )

        result = TelegramClient(TOKEN, error_chat_id=-100999).send_message({"chat_id": 1, "text": "x"})

        assert result is False
        assert route.call_count == 1

    @respx.mock
    def test_each_failed_element_reported(self):
        """Every failed element of a batch is reported on its own."""
        route = respx.post(f"{API}/sendMessage").mock(return_value=httpx.Response(200, text=""))

        result = TelegramClient(TOKEN, error_chat_id=-100999).send_message(
            [{"chat_id": 1, "text": "a"}, {"chat_id": 2, "text": "b"}]
        )

        assert result == {0: False, 1: False}
        assert route.call_count == 4

    @respx.mock
    def test_report_error(self):
        """report_error() sends a report with an optional code."""
        route = respx.post(f"{API}/sendMessage").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})
        )

        client = TelegramClient(TOKEN)
        delivered = client.report_error("Job failed", 3, context=UpdateContext(from_id=5))

        assert delivered is True
        report = _fields(route.calls.last.request)
        assert report == {"chat_id": "5", "text": "Job failed\nCode: 3"}


class TestMethodWrappers:
    """Tests for the method wrappers."""

    @respx.mock
    @pytest.mark.parametrize(
        "wrapper, method_name",
        [
            ("get_updates", "getUpdates"),
            ("send_photo", "sendPhoto"),
            ("close_bot", "close"),
            ("set_chat_administrator_custom_title", "setChatAdministratorCustomTitle"),
            ("answer_callback_query", "answerCallbackQuery"),
            ("replace_sticker_in_set", "replaceStickerInSet"),
        ],
    )
    def test_wrapper_calls_method(self, wrapper, method_name):
        """Each wrapper posts to its Bot API method."""
        route = respx.post(f"{API}/{method_name}").mock(
            return_value=httpx.Response(200, json={"ok": True, "result": True})
        )

        result = getattr(TelegramClient(TOKEN), wrapper)({"chat_id": 1})

        assert result is True
        assert route.called

    def test_mixin_requires_send_method(self):
        """The wrappers cannot be used without a send_method implementation."""
        with pytest.raises(TypeError):
            BotMethodsMixin()
