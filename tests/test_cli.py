"""Tests for the duration-codec command line."""

import logging

import pytest

from duration_codec import cli
from duration_codec.cli import build_parser, main


@pytest.fixture
def root_level():
    """Restore the root logger level after a command changes it."""
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


class TestCommands:
    def test_format(self, capsys):
        assert main(["format", "123000000000"]) == 0
        assert capsys.readouterr().out == "123s\n"

    def test_format_negative(self, capsys):
        assert main(["format", "-1500000"]) == 0
        assert capsys.readouterr().out == "-1500us\n"

    def test_parse(self, capsys):
        assert main(["parse", "1500us"]) == 0
        assert capsys.readouterr().out == "1500000\n"

    def test_normalize(self, capsys):
        assert main(["normalize", "120s"]) == 0
        assert capsys.readouterr().out == "2m\n"

    def test_convert(self, capsys):
        assert main(["convert", "2h", "--to", "minutes"]) == 0
        assert capsys.readouterr().out == "120\n"

    def test_convert_inexact(self, capsys):
        assert main(["convert", "90s", "--to", "m"]) == 1
        assert "not a whole number" in capsys.readouterr().err

    def test_convert_unknown_unit(self, capsys):
        assert main(["convert", "90s", "--to", "fortnights"]) == 1
        assert "fortnights" in capsys.readouterr().err


class TestErrors:
    @pytest.mark.parametrize(
        "argv,message",
        [
            (["parse", "abc"], "Expected a leading integer"),
            (["parse", "123x"], "Unit 'x' not supported"),
            (["parse", "99999999999999999999s"], "outside the representable range"),
            (["format", "9223372036854775808"], "outside the representable range"),
        ],
    )
    def test_duration_errors_exit_one(self, capsys, argv, message):
        assert main(argv) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert message in captured.err

    def test_non_integer_ticks_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["format", "1.5"])


class TestCheck:
    def test_lists_named_durations(self, tmp_path, codec_home, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("durations:\n  poll: 60s\n  ttl: 3d\n")
        assert main(["check", "--config", str(path)]) == 0
        assert capsys.readouterr().out == "poll: 60s (= 1m)\nttl: 3d\n"

    def test_uses_home_directory(self, codec_home, capsys):
        (codec_home / "config.yaml").write_text("durations:\n  timeout: 500ms\n")
        assert main(["check"]) == 0
        assert capsys.readouterr().out == "timeout: 500ms\n"

    def test_invalid_config_exits_one(self, tmp_path, codec_home, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("durations:\n  poll: soon\n")
        assert main(["check", "-c", str(path)]) == 1
        assert "poll" in capsys.readouterr().err


class TestLogging:
    def test_module_logger_name(self):
        assert cli.logger.name == "duration_codec.cli"

    def test_check_applies_config_level(self, tmp_path, codec_home, root_level, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: INFO\ndurations:\n  poll: 5m\n")
        assert main(["check", "-c", str(path)]) == 0
        assert root_level.level == logging.INFO
        assert "Checked 1 named durations" in caplog.text

    def test_log_level_flag_overrides_config(self, tmp_path, codec_home, root_level):
        root_level.setLevel(logging.ERROR)
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\ndurations:\n  poll: 5m\n")
        assert main(["--log-level", "ERROR", "check", "-c", str(path)]) == 0
        assert root_level.level == logging.ERROR
