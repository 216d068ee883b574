from autosave.utils import helpers
from autosave.utils.helpers import big_info_markup, now_seconds


def test_now_seconds_follows_monotonic_clock(monkeypatch):
    monkeypatch.setattr(helpers.time, "monotonic", lambda: 1234.9)

    assert now_seconds() == 1234


def test_big_info_markup_defaults_to_red():
    assert big_info_markup("oops", "Error") == "<color=#FF0000FF>Error</color>\noops"
