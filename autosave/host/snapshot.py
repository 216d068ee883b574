"""模块说明：snapshot。"""

from dataclasses import dataclass, field
from typing import Callable

from autosave.host.base import SAVE_STATE_IDLE, HostAdapter, Participant


@dataclass
class HostSnapshot(HostAdapter):
    """以普通字段表示宿主状态的适配器。

    适合没有复杂对象模型的宿主，以及测试和模拟。save_game 调用
    save_fn（如果提供），并记录保存次数。
    """

    single_player: bool = True
    master: bool = False
    save_state: str = SAVE_STATE_IDLE
    story_dialog_playing: bool = False
    save_blocked: bool = False
    showcase_mode: bool = False
    challenge_active: bool = False
    playing_alone: bool | None = None
    participant: Participant | None = None
    save_fn: Callable[[], None] | None = None
    saves: int = 0
    participant_saves: int = 0
    announcements: list[tuple[str, str]] = field(default_factory=list)

    def is_single_player(self) -> bool:
        return self.single_player

    def is_master(self) -> bool:
        return self.master

    def get_save_state(self) -> str:
        return self.save_state

    def is_story_dialog_playing(self) -> bool:
        return self.story_dialog_playing

    def is_save_blocked(self) -> bool:
        return self.save_blocked

    def is_showcase_mode(self) -> bool:
        return self.showcase_mode

    def is_challenge_active(self) -> bool:
        return self.challenge_active

    def save_game(self) -> None:
        if self.save_fn:
            self.save_fn()
        self.saves += 1

    def is_playing_alone(self) -> bool:
        if self.playing_alone is None:
            return self.single_player
        return self.playing_alone

    def get_local_participant(self) -> Participant | None:
        return self.participant

    def request_participant_save(self, participant: Participant) -> None:
        self.participant_saves += 1

    def announce(self, key: str, participant: Participant) -> None:
        self.announcements.append((key, participant.display_name))
