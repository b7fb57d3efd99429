"""Tests for the grok CLI."""
from __future__ import annotations

import json

import httpx
from click.testing import CliRunner

from grok_client._http import HttpClient
from grok_client.cli.main import cli
from grok_client.client import GrokClient
from grok_client.errors import ConfigurationError


CHAT_BODY = {
    "choices": [{"message": {"content": "Forty-two."}}],
    "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
}


def _factory(body: dict, requests: list[httpx.Request] | None = None, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, text=json.dumps(body))

    def make() -> GrokClient:
        return GrokClient("k", http_client=HttpClient(transport=httpx.MockTransport(handler)))

    return make


def _invoke(args: list[str], factory) -> object:
    return CliRunner().invoke(cli, args, obj={"client_factory": factory})


# ---------------------------------------------------------------------------
# chat
# ---------------------------------------------------------------------------


class TestChatCommand:
    def test_prints_answer(self) -> None:
        result = _invoke(["chat", "meaning of life?"], _factory(CHAT_BODY))
        assert result.exit_code == 0
        assert "Forty-two." in result.output

    def test_options_reach_payload(self) -> None:
        requests: list[httpx.Request] = []
        result = _invoke(
            ["chat", "q", "-m", "grok-3-mini", "-t", "0.1", "--max-tokens", "64", "-s", "sys"],
            _factory(CHAT_BODY, requests),
        )
        assert result.exit_code == 0
        body = json.loads(requests[0].content)
        assert body["model"] == "grok-3-mini"
        assert body["temperature"] == 0.1
        assert body["max_tokens"] == 64
        assert body["messages"][-1] == {"role": "system", "content": "sys"}

    def test_prepend_system(self) -> None:
        requests: list[httpx.Request] = []
        _invoke(["chat", "q", "-s", "sys", "--prepend-system"], _factory(CHAT_BODY, requests))
        assert json.loads(requests[0].content)["messages"][0]["role"] == "system"

    def test_raw(self) -> None:
        result = _invoke(["chat", "q", "--raw"], _factory(CHAT_BODY))
        assert json.loads(result.output) == CHAT_BODY

    def test_invalid_model(self) -> None:
        result = _invoke(["chat", "q", "-m", "nope"], _factory(CHAT_BODY))
        assert result.exit_code == 1
        assert "Invalid model name: nope" in result.output

    def test_http_error(self) -> None:
        result = _invoke(["chat", "q"], _factory({"error": "bad key"}, status_code=401))
        assert result.exit_code == 1
        assert "HTTP 401" in result.output

    def test_missing_key(self) -> None:
        def factory() -> GrokClient:
            raise ConfigurationError("No API key found")

        result = _invoke(["chat", "q"], factory)
        assert result.exit_code == 1
        assert "No API key found" in result.output


# ---------------------------------------------------------------------------
# analyze / image
# ---------------------------------------------------------------------------


class TestAnalyzeCommand:
    def test_sends_image(self, tmp_path) -> None:
        picture = tmp_path / "pic.png"
        picture.write_bytes(b"ABC")
        requests: list[httpx.Request] = []
        result = _invoke(["analyze", str(picture), "what?"], _factory(CHAT_BODY, requests))
        assert result.exit_code == 0
        part = json.loads(requests[0].content)["messages"][0]["content"][0]
        assert part["image_url"]["url"] == "data:image/png;base64,QUJD"


class TestImageCommand:
    def test_prints_urls(self) -> None:
        body = {"data": [{"url": "https://img/1"}, {"url": "https://img/2"}]}
        requests: list[httpx.Request] = []
        result = _invoke(["image", "a cat", "-n", "2", "--format", "url"], _factory(body, requests))
        assert result.exit_code == 0
        assert "https://img/1" in result.output
        assert "https://img/2" in result.output
        assert json.loads(requests[0].content) == {
            "prompt": "a cat",
            "model": "grok-2-image",
            "response_format": "url",
            "n": 2,
        }


# ---------------------------------------------------------------------------
# models / cost
# ---------------------------------------------------------------------------


class TestCatalogCommands:
    def test_models(self) -> None:
        result = CliRunner().invoke(cli, ["models"])
        assert result.exit_code == 0
        for name in ("grok-4", "grok-3", "grok-3-mini", "grok-2-image"):
            assert name in result.output
        assert "$0.07/image" in result.output

    def test_models_image_filter(self) -> None:
        result = CliRunner().invoke(cli, ["models", "--capability", "image"])
        assert "grok-3-mini" not in result.output
        assert "grok-2-image" in result.output

    def test_cost(self) -> None:
        result = CliRunner().invoke(cli, ["cost", "grok-4", "-i", "12000", "-o", "2000"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.066000"

    def test_cost_images(self) -> None:
        result = CliRunner().invoke(cli, ["cost", "grok-2-image", "--images", "3"])
        assert result.output.strip() == "0.210000"

    def test_cost_unknown_model(self) -> None:
        result = CliRunner().invoke(cli, ["cost", "nope"])
        assert result.exit_code == 1
