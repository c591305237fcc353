"""Tests for the emmet-parser command line."""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from emmet_parser import __version__
from emmet_parser.cli.utils import log_level, setup_logging

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def run_cli(*args, cwd, input=None, env=None):
    env = dict(os.environ if env is None else env)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(SRC_DIR), env.get("PYTHONPATH", "")] if p
    )
    return subprocess.run(
        [sys.executable, "-m", "emmet_parser.cli.main", *args],
        cwd=cwd,
        input=input,
        capture_output=True,
        text=True,
        env=env,
    )


class TestExpand:
    def test_expands_argument(self, tmp_path):
        result = run_cli("ul>li.item*2", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.strip() == (
            '<ul><li class="item"></li><li class="item"></li></ul>'
        )

    def test_one_line_per_abbreviation(self, tmp_path):
        result = run_cli("br", "p{Hi}", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["<br />", "<p>Hi</p>"]

    def test_reads_stdin(self, tmp_path):
        result = run_cli(cwd=tmp_path, input="a{x}\n\n  hr  \n")
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["<a>x</a>", "<hr />"]

    def test_error_exits_nonzero(self, tmp_path):
        result = run_cli("div{Hello", "p", cwd=tmp_path)
        assert result.returncode == 1
        assert "Error: Unclosed bracket" in result.stderr
        # remaining abbreviations are still expanded
        assert result.stdout.strip() == "<p></p>"


class TestOutputModes:
    def test_tree(self, tmp_path):
        result = run_cli("--tree", "a[href=home]{Home}", cwd=tmp_path)
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data[0]["tag"] == "a"
        assert data[0]["attributes"] == [{"name": "href", "value": "home"}]
        assert data[0]["text"] == "Home"

    def test_tree_with_quoted_value(self, tmp_path):
        result = run_cli("--tree", 'a[href="/"]{Home}', cwd=tmp_path)
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data[0]["attributes"] == [{"name": "href", "value": "/"}]
        assert data[0]["text"] == "Home"

    def test_document(self, tmp_path):
        result = run_cli("-d", "--title", "A & B", "main>h1{Hi}", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.startswith("<!DOCTYPE html>")
        assert "<title>A &amp; B</title>" in result.stdout
        assert "<main><h1>Hi</h1></main>" in result.stdout
        assert result.stdout.rstrip().endswith("</html>")

    def test_examples(self, tmp_path):
        env = {**os.environ, "COLUMNS": "250"}
        result = run_cli("--examples", cwd=tmp_path, env=env)
        assert result.returncode == 0
        assert "Basic element" in result.stdout
        assert "<div></div>" in result.stdout
        assert "Error: Unclosed bracket" in result.stdout

    def test_version(self, tmp_path):
        result = run_cli("--version", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.strip() == f"emmet-parser {__version__}"


class TestConfig:
    def test_explicit_config(self, tmp_path):
        cfg = tmp_path / "custom.yaml"
        cfg.write_text("self_closing_tags: []\n")
        result = run_cli("-c", str(cfg), "img", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.strip() == "<img></img>"

    def test_discovers_config_in_parent(self, tmp_path):
        (tmp_path / "emmet.yaml").write_text("default_tag: li\n")
        nested = tmp_path / "nested"
        nested.mkdir()
        result = run_cli(".a", cwd=nested)
        assert result.returncode == 0
        assert result.stdout.strip() == '<li class="a"></li>'

    def test_multiplier_limit_from_config(self, tmp_path):
        (tmp_path / "emmet.yaml").write_text("max_multiplier: 3\n")
        result = run_cli("li*4", cwd=tmp_path)
        assert result.returncode == 1
        assert "exceeds the limit of 3" in result.stderr

    def test_invalid_config(self, tmp_path):
        (tmp_path / "emmet.yaml").write_text("max_multiplier: lots\n")
        result = run_cli("div", cwd=tmp_path)
        assert result.returncode == 1
        assert "Error: Invalid config" in result.stderr


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    @pytest.mark.parametrize(
        "debug, verbose, expected",
        [
            (None, False, logging.WARNING),
            (None, True, logging.INFO),
            ("1", False, logging.DEBUG),
            ("1", True, logging.DEBUG),
        ],
    )
    def test_log_level(self, monkeypatch, debug, verbose, expected):
        if debug is None:
            monkeypatch.delenv("EMMET_DEBUG", raising=False)
        else:
            monkeypatch.setenv("EMMET_DEBUG", debug)
        assert log_level(verbose) == expected

    def test_setup_logging_configures_package_logger(self, monkeypatch):
        monkeypatch.delenv("EMMET_DEBUG", raising=False)
        logger = setup_logging(verbose=True)
        try:
            assert logger is logging.getLogger("emmet_parser")
            assert logger.level == logging.INFO
            assert len(logger.handlers) == 1
            assert not logger.propagate
        finally:
            logger.handlers = []
            logger.propagate = True
            logger.setLevel(logging.NOTSET)

    def test_debug_env_reaches_stderr(self, tmp_path):
        env = {**os.environ, "EMMET_DEBUG": "1", "COLUMNS": "250"}
        result = run_cli("div", cwd=tmp_path, env=env)
        assert result.returncode == 0
        assert result.stdout.strip() == "<div></div>"
        assert "Rendered" in result.stderr
