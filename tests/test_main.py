import curses
import logging

import pytest

from fitness_tracker import main as app_main
from fitness_tracker.errors import StorageFailure
from fitness_tracker.settings import Settings


@pytest.fixture
def quiet(monkeypatch, tmp_path):
    settings = Settings(DB_PATH=str(tmp_path / "f.db"), LOG_FILE=str(tmp_path / "f.log"))
    monkeypatch.setattr(app_main, "get_settings", lambda: settings)
    monkeypatch.setattr(app_main, "configure_logging", lambda s: logging.getLogger("fitness_tracker"))
    return settings


def test_startup_store_failure_exits_before_terminal(monkeypatch, quiet, capsys):
    def boom(settings):
        raise StorageFailure("cannot open workout store")
    touched = []
    monkeypatch.setattr(app_main, "open_store", boom)
    monkeypatch.setattr(app_main.curses, "wrapper", lambda *a: touched.append(a))

    assert app_main.main() == 1
    assert touched == []
    assert "cannot open workout store" in capsys.readouterr().err


def test_clean_quit_exits_zero(monkeypatch, quiet):
    seen = {}
    monkeypatch.setattr(app_main, "run", lambda stdscr, app: seen.setdefault("app", app))
    monkeypatch.setattr(app_main.curses, "wrapper", lambda fn: fn(object()))

    assert app_main.main() == 0
    assert seen["app"].state.screen.value == "main"


def test_write_failure_in_loop_exits_one(monkeypatch, quiet, capsys):
    def failing_run(stdscr, app):
        raise StorageFailure("disk full")
    monkeypatch.setattr(app_main, "run", failing_run)
    monkeypatch.setattr(app_main.curses, "wrapper", lambda fn: fn(object()))

    assert app_main.main() == 1
    assert "disk full" in capsys.readouterr().err


def test_teardown_error_after_quit_still_exits_zero(monkeypatch, quiet, capsys):
    def wrapper(fn):
        fn(object())
        raise curses.error("endwin() returned ERR")
    monkeypatch.setattr(app_main, "run", lambda stdscr, app: None)
    monkeypatch.setattr(app_main.curses, "wrapper", wrapper)

    assert app_main.main() == 0
    assert capsys.readouterr().err == ""


def test_terminal_error_before_quit_exits_one(monkeypatch, quiet, capsys):
    def wrapper(fn):
        raise curses.error("setupterm: could not find terminal")
    monkeypatch.setattr(app_main.curses, "wrapper", wrapper)

    assert app_main.main() == 1
    assert "could not find terminal" in capsys.readouterr().err
