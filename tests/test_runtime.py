import asyncio

from autosave.config.schema import AutoSaveSettings
from autosave.host.snapshot import HostSnapshot
from autosave.runtime import AutoSaveRuntime
from autosave.shortcut.keys import KeyCode
from autosave.types import GateReasonCode, TriggerOutcome


def test_end_to_end_first_save(runtime, host, clock):
    assert runtime.get_enabled() is True
    assert runtime.get_interval_text() == "600"

    clock.now = 0
    assert runtime.tick_once(host) is None
    clock.now = 601
    outcome = runtime.tick_once(host)

    assert outcome == TriggerOutcome.saved()
    assert host.saves == 1
    assert [m.text for m in runtime.bus.drain()] == ["Game has been saved"]


def test_gated_outcome_is_published(runtime, clock):
    host = HostSnapshot(challenge_active=True, save_state="Save")
    runtime.tick_once(host, now=0)

    outcome = runtime.tick_once(host, now=601)

    assert outcome == TriggerOutcome.gated(GateReasonCode.BUSY)
    assert runtime.bus.drain()[-1].text == "Unable to save game (busy state)"


def test_disabled_runtime_does_not_tick(runtime, host):
    runtime.set_enabled(False)
    runtime.bus.drain()

    assert runtime.tick_once(host, now=0) is None
    assert runtime.tick_once(host, now=10_000) is None
    assert runtime.scheduler.state.initialized is False
    assert runtime.bus.outbound_size == 0


def test_set_interval_text_outcomes(runtime, settings):
    ok = runtime.set_interval_text("30")
    bad = runtime.set_interval_text("thirty")

    assert ok.accepted is True
    assert ok.interval_seconds == 30
    assert bad.accepted is False
    assert bad.interval_seconds == 30
    assert bad.error == "value is not a base-10 integer"
    assert runtime.get_interval_text() == "30"
    assert "SavesFrequency=30" in settings.settings_path.read_text(encoding="utf-8")


def test_interval_edit_is_hot_reloaded(runtime, host):
    runtime.tick_once(host, now=0)
    runtime.set_interval_text("5")

    assert runtime.tick_once(host, now=6) == TriggerOutcome.saved()


def test_create_loads_persisted_settings(tmp_path, clock):
    (tmp_path / "AutoSave.txt").write_text("IsEnabled=false\r\nSavesFrequency=90\r\n", encoding="utf-8")
    (tmp_path / "RuntimeConfiguration.xml").write_text(
        '<Button ID="AutomaticSaves">NumPad3</Button>\n', encoding="utf-8"
    )

    runtime = AutoSaveRuntime.create(AutoSaveSettings(mods_dir=str(tmp_path)), clock=clock, setup_logging=False)

    assert runtime.get_enabled() is False
    assert runtime.get_interval_text() == "90"
    assert runtime.shortcut == KeyCode.Keypad3


def test_create_logs_lifecycle(settings, log_messages):
    AutoSaveRuntime.create(settings, setup_logging=False)

    assert "Initializing AutomaticSaves..." in log_messages
    assert "AutomaticSaves initialized." in log_messages
    assert "AutomaticSaves has been turned on." in log_messages


def test_unknown_default_key_falls_back(tmp_path):
    settings = AutoSaveSettings(mods_dir=str(tmp_path), default_key="NotAKey")

    runtime = AutoSaveRuntime.create(settings, setup_logging=False)

    assert runtime.shortcut == KeyCode.Keypad7


def test_shortcut_toggles_panel(runtime):
    assert runtime.on_key_down(KeyCode.Keypad7) is True
    assert runtime.on_key_down(KeyCode.F1) is True
    assert runtime.on_key_down(KeyCode.Keypad7) is False


def test_panel_notice_for_non_host(runtime):
    client = HostSnapshot(single_player=False, master=False)

    assert runtime.can_configure(client) is False
    assert runtime.panel_notice(client) == (
        "AutomaticSaves mod only works if you are the host or in singleplayer mode."
    )
    assert runtime.panel_notice(HostSnapshot()) is None


def test_run_loop_ticks_until_stopped(runtime, host, clock):
    ticks = []

    def provider():
        ticks.append(clock.now)
        clock.now += 400
        if len(ticks) >= 4:
            runtime.stop()
        return host

    asyncio.run(runtime.run(provider, poll_interval_s=0))

    assert runtime.is_running is False
    assert len(ticks) == 4
    assert host.saves == 1
