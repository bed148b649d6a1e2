"""Tests for the dropselect command line."""

import json
from argparse import Namespace

import pytest

from dropselect.cli import build_parser
from dropselect.cli._common import load_options
from dropselect.cli.demo import demo
from dropselect.cli.web import web


def test_no_noun_runs_demo():
    args = build_parser().parse_args([])
    assert args.func is demo
    assert args.options_file is None
    assert args.label_key == "label"


def test_demo_flags():
    args = build_parser().parse_args(["demo", "--options", "items.json", "--label-key", "name"])
    assert args.func is demo
    assert args.options_file == "items.json"
    assert args.label_key == "name"


def test_web_defaults():
    args = build_parser().parse_args(["web"])
    assert args.func is web
    assert args.host == "localhost"
    assert args.port == 8618


def test_load_options(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps(["a", {"label": "b"}]))
    assert load_options(str(path)) == ["a", {"label": "b"}]


def test_load_options_missing_file(tmp_path):
    with pytest.raises(ValueError, match="cannot read"):
        load_options(str(tmp_path / "nope.json"))


def test_load_options_bad_json(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_options(str(path))


def test_load_options_not_a_list(tmp_path):
    path = tmp_path / "items.json"
    path.write_text('{"label": "a"}')
    with pytest.raises(ValueError, match="JSON list"):
        load_options(str(path))


def test_demo_bad_options_file(tmp_path, capsys):
    args = Namespace(verbose=False, options_file=str(tmp_path / "nope.json"), label_key="label")
    assert demo(args) == 1
    assert "error: cannot read" in capsys.readouterr().err


def test_web_without_executable(monkeypatch, capsys):
    monkeypatch.setattr("dropselect.cli.web.shutil.which", lambda name: None)
    args = Namespace(host="localhost", port=8618, options_file=None, label_key="label")
    assert web(args) == 1
    assert "not found on PATH" in capsys.readouterr().err


def test_web_serves_demo_command(monkeypatch, tmp_path):
    served = {}

    class FakeServer:
        def __init__(self, command, **kwargs):
            served["command"] = command
            served["kwargs"] = kwargs

        def serve(self):
            served["served"] = True

    path = tmp_path / "items.json"
    path.write_text('["a"]')
    monkeypatch.setattr("dropselect.cli.web.shutil.which", lambda name: "/usr/bin/dropselect")
    monkeypatch.setattr("dropselect.cli.web.Server", FakeServer)
    args = Namespace(host="0.0.0.0", port=9000, options_file=str(path), label_key="name")
    assert web(args) == 0
    assert served["served"]
    assert served["command"].startswith("/usr/bin/dropselect demo --label-key name --options ")
    assert served["kwargs"]["port"] == 9000
