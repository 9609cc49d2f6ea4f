from __future__ import annotations

import io
import logging

import pytest

from rotlist import main as demo
from rotlist.config.loader import get_settings
from rotlist.config.models import EqualityAlgorithm


@pytest.fixture(autouse=True)
def _reset_demo_logger():
    yield
    logger = logging.getLogger("rotlist")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_run_demo_should_write_requested_laps() -> None:
    out = io.StringIO()
    written = demo.run_demo("abc", laps=3, out=out)
    assert written == 9
    assert out.getvalue() == "abcabcabc\n"


def test_run_demo_zero_laps_should_write_newline_only() -> None:
    out = io.StringIO()
    assert demo.run_demo("abc", laps=0, out=out) == 0
    assert out.getvalue() == "\n"


def test_main_should_print_phrase(capsys) -> None:
    assert demo.main(["hi! ", "--laps", "2", "--delay", "0"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "hi! hi! \n"


def test_main_should_reject_empty_phrase(capsys) -> None:
    assert demo.main(["", "--laps", "1", "--delay", "0"]) == 2
    assert "at least one element" in capsys.readouterr().err


def test_main_should_load_config(write_yaml, capsys) -> None:
    path = write_yaml("demo.yml", "equality_algorithm: kmp\nlogging:\n  level: error\n")
    assert demo.main(["ab", "--laps", "1", "--delay", "0", "--config", str(path)]) == 0
    assert get_settings().equality_algorithm is EqualityAlgorithm.KMP
    assert capsys.readouterr().out == "ab\n"


def test_main_should_report_missing_config(tmp_path, capsys) -> None:
    missing = tmp_path / "nope.yml"
    assert demo.main(["ab", "--laps", "1", "--config", str(missing)]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_main_should_reject_negative_laps() -> None:
    with pytest.raises(SystemExit) as excinfo:
        demo.main(["ab", "--laps", "-1"])
    assert excinfo.value.code == 2


def test_main_should_validate_log_level_override(capsys) -> None:
    assert demo.main(["ab", "--laps", "1", "--delay", "0", "--log-level", "loud"]) == 2
    assert "unknown log level" in capsys.readouterr().err


def test_main_should_accept_lowercase_log_level(capsys) -> None:
    assert demo.main(["ab", "--laps", "1", "--delay", "0", "--log-level", "error"]) == 0
    assert logging.getLogger("rotlist").level == logging.ERROR
    assert capsys.readouterr().out == "ab\n"
