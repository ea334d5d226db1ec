"""Tests for the command line entry point."""

import io
import json
import logging

import pytest

import gametreemap
from logger import (
    BRIEF_FORMAT, TRACE, LevelColorFormatter, logger, set_verbosity, wants_color,
)


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "missing-config.json")


class TestMain:
    def test_renders_from_file(self, sales_dict, tmp_path, no_config):
        data = tmp_path / "sales.json"
        data.write_text(json.dumps(sales_dict))
        out = tmp_path / "index.html"

        status = gametreemap.main(["--file", str(data), "--output", str(out),
                                   "--config", no_config])

        html = out.read_text(encoding="utf-8")
        assert status == 0
        assert "<svg" in html
        assert "Loading data..." not in html
        assert html.count("<clipPath") == 7

    def test_failed_load_leaves_placeholder(self, tmp_path, no_config):
        out = tmp_path / "index.html"

        status = gametreemap.main(["--file", str(tmp_path / "absent.json"),
                                   "--output", str(out), "--config", no_config])

        html = out.read_text(encoding="utf-8")
        assert status == 1
        assert "Loading data..." in html
        assert "<svg" not in html

    def test_save_and_png(self, sales_dict, tmp_path, no_config):
        data = tmp_path / "sales.json"
        data.write_text(json.dumps(sales_dict))
        saved = tmp_path / "copy.json"
        png = tmp_path / "chart.png"

        gametreemap.main(["--file", str(data), "--output", str(tmp_path / "i.html"),
                          "--save", str(saved), "--png", str(png),
                          "--width", "300", "--height", "200", "--config", no_config])

        assert json.loads(saved.read_text())["name"] == sales_dict["name"]
        assert png.exists()


    def test_invalid_utf8_leaves_placeholder(self, tmp_path, no_config):
        data = tmp_path / "bad.json"
        data.write_bytes(b'{"name": "\xff\xfe bad"}')
        out = tmp_path / "index.html"

        status = gametreemap.main(["--file", str(data), "--output", str(out),
                                   "--config", no_config])

        assert status == 1
        assert "Loading data..." in out.read_text(encoding="utf-8")

    def test_unwritable_save_still_renders(self, sales_dict, tmp_path, no_config):
        data = tmp_path / "sales.json"
        data.write_text(json.dumps(sales_dict))
        out = tmp_path / "index.html"

        status = gametreemap.main(["--file", str(data), "--output", str(out),
                                   "--save", str(tmp_path / "no" / "such" / "dir.json"),
                                   "--config", no_config])

        assert status == 0
        assert "<svg" in out.read_text(encoding="utf-8")

    def test_standalone_svg(self, sales_dict, tmp_path, no_config):
        data = tmp_path / "sales.json"
        data.write_text(json.dumps(sales_dict))
        svg = tmp_path / "chart.svg"

        gametreemap.main(["--file", str(data), "--output", str(tmp_path / "i.html"),
                          "--svg", str(svg), "--config", no_config])

        text = svg.read_text(encoding="utf-8")
        assert text.startswith("<svg")
        assert text.count("<clipPath") == 7

    def test_log_file(self, sales_dict, tmp_path, no_config):
        data = tmp_path / "sales.json"
        data.write_text(json.dumps(sales_dict))
        log = tmp_path / "run.log"

        gametreemap.main(["--file", str(data), "--output", str(tmp_path / "i.html"),
                          "--log-file", str(log), "--config", no_config])
        set_verbosity(0)

        text = log.read_text(encoding="utf-8")
        assert "<TreeNode Video Game Sales Data Top 100: 3 children>" in text
        assert "\033[" not in text


class TestConfig:
    def test_defaults(self, no_config):
        config = gametreemap.parse_config(no_config)
        assert config["svg-renderer"]["width"] == 1154
        assert config["svg-renderer"]["height"] == 654
        assert config["svg-renderer"]["padding"] == 1

    def test_file_overrides_per_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"svg-renderer": {"width": 800}}))
        config = gametreemap.parse_config(str(path))
        assert config["svg-renderer"]["width"] == 800
        assert config["svg-renderer"]["height"] == 654

    def test_defaults_not_shared(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"svg-renderer": {"width": 1}}))
        gametreemap.parse_config(str(path))
        assert gametreemap.DEFAULT_CONFIG["svg-renderer"]["width"] == 1154

    def test_flags_override_config(self, no_config):
        config = gametreemap.parse_config(no_config)
        flags = gametreemap.parse_args(["--width", "640", "--png", "x.png", "-vv"])
        gametreemap.apply_flags(config, flags)
        assert config["svg-renderer"]["width"] == 640
        assert config["mpl-renderer"]["filename"] == "x.png"
        assert flags.verbose == 2


class TestVerbosity:
    def teardown_method(self):
        set_verbosity(0)

    def test_levels(self):
        set_verbosity(0)
        assert logger.level == logging.INFO
        set_verbosity(1)
        assert logger.level == logging.DEBUG
        set_verbosity(3)
        assert logger.level == TRACE

    def test_log_file_detached(self, tmp_path):
        log = tmp_path / "run.log"
        set_verbosity(0, str(log))
        logger.info("first")
        set_verbosity(0)
        logger.info("second")
        text = log.read_text(encoding="utf-8")
        assert "first" in text
        assert "second" not in text


class TestFormatter:
    def _record(self, level=logging.INFO):
        return logging.LogRecord("gametreemap", level, __file__, 1, "hello %s", ("there",), None)

    def test_plain(self):
        formatter = LevelColorFormatter(BRIEF_FORMAT, color=False)
        assert formatter.format(self._record()) == "INFO     | hello there"

    def test_colored_level_only(self):
        formatter = LevelColorFormatter(BRIEF_FORMAT, color=True)
        text = formatter.format(self._record(logging.ERROR))
        assert text.startswith("\033[31mERROR   \033[0m")
        assert text.endswith("| hello there")

    def test_no_color_off_a_terminal(self):
        assert not wants_color(io.StringIO())

    def test_no_color_env(self, monkeypatch):
        class Tty(io.StringIO):
            def isatty(self):
                return True

        monkeypatch.delenv("NO_COLOR", raising=False)
        assert wants_color(Tty())
        monkeypatch.setenv("NO_COLOR", "1")
        assert not wants_color(Tty())
