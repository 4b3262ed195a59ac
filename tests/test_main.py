"""Tests for the box-inspect command line interface."""

import json
import logging

import pytest
import requests

from box_engine import main as cli
from box_engine.utils.config import Config

PAGE = """
<html><body>
  <div id="box"><p>Paragraph</p></div>
  <span>inline</span>
  <video></video>
</body></html>
"""


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("box_engine")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return str(path)


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


class TestMain:
    def test_text_report(self, page, config_path, capsys):
        code = cli.main([page, "--config", config_path,
                         "--tag", "div", "--tag", "video",
                         "--predicate", "blockContainer", "--predicate", "replaced"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "div#box: blockContainer",
            "video: replaced",
        ]

    def test_json_report(self, page, config_path, capsys):
        code = cli.main([page, "--config", config_path, "--json",
                         "--tag", "span", "--predicate", "non_replaced_inline_box"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == [
            {"element": "span", "predicates": ["non_replaced_inline_box"]},
        ]

    def test_no_matches_prints_dash(self, page, config_path, capsys):
        code = cli.main([page, "--config", config_path, "--tag", "p", "--predicate", "floated"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "p: -"

    def test_body_is_reported_first(self, page, config_path, capsys):
        assert cli.main([page, "--config", config_path, "--predicate", "inline"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "body: -"
        assert "span: inline" in lines

    def test_unknown_predicate(self, page, config_path, capsys):
        assert cli.main([page, "--config", config_path, "--predicate", "isShiny"]) == 2
        assert "isShiny" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, config_path):
        assert cli.main([str(tmp_path / "nope.html"), "--config", config_path]) == 1


class TestLoadSource:
    def test_url_is_fetched_with_configured_timeout(self, monkeypatch, config_path):
        calls = {}

        class FakeResponse:
            text = "<p>remote</p>"

            def raise_for_status(self):
                pass

        def fake_get(url, timeout, headers):
            calls.update(url=url, timeout=timeout, headers=headers)
            return FakeResponse()

        monkeypatch.setattr(cli.requests, "get", fake_get)
        config = Config(config_path)
        config.set("network.timeout", 3)

        assert cli.load_source("https://example.com/", config) == "<p>remote</p>"
        assert calls["timeout"] == 3
        assert calls["headers"]["User-Agent"] == config.get("network.user_agent")

    def test_http_errors_propagate(self, monkeypatch, config_path):
        def fake_get(url, timeout, headers):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(cli.requests, "get", fake_get)
        with pytest.raises(requests.RequestException):
            cli.load_source("http://example.com/", Config(config_path))

    def test_fetch_failure_exits_with_one(self, monkeypatch, config_path):
        def fake_get(url, timeout, headers):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(cli.requests, "get", fake_get)
        assert cli.main(["http://example.com/", "--config", config_path]) == 1


class TestArgs:
    def test_defaults(self):
        args = cli.parse_args(["page.html"])
        assert args.tag == []
        assert args.predicate == []
        assert not args.json
        assert not args.debug

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.parse_args(["--version"])
        assert excinfo.value.code == 0
        assert "box-inspect" in capsys.readouterr().out
