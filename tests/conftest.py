"""Shared fixtures: a fake host, isolated settings and a loguru capture sink."""

import pytest
from loguru import logger

from autosave.config.schema import AutoSaveSettings
from autosave.host.snapshot import HostSnapshot
from autosave.runtime import AutoSaveRuntime


class FakeClock:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def host():
    return HostSnapshot()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def log_messages():
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def settings(tmp_path):
    return AutoSaveSettings(mods_dir=str(tmp_path))


@pytest.fixture
def runtime(settings, clock):
    return AutoSaveRuntime.create(settings, clock=clock, setup_logging=False)
