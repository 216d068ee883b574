"""宿主边界。

HostAdapter 抽象了自动保存需要从宿主读取的实时状态和需要调用的
保存原语。会话、对话、存档系统本身都属于宿主，这里只定义接口。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

# 宿主存档子系统的空闲状态
SAVE_STATE_IDLE = "None"

PLAYER_SAVED_KEY = "SessionInfo_PlayerSaved"


@dataclass
class Participant:
    """类说明：Participant。"""
    display_name: str
    color: str | None = None  # RRGGBBAA


class HostAdapter(ABC):
    """类说明：HostAdapter。"""

    @abstractmethod
    def is_single_player(self) -> bool:
        """函数说明：is_single_player。"""
        pass

    @abstractmethod
    def is_master(self) -> bool:
        """当前参与者是否为会话的权威方（主机）。"""
        pass

    @abstractmethod
    def get_save_state(self) -> str:
        """存档子系统状态；SAVE_STATE_IDLE 表示空闲。"""
        pass

    @abstractmethod
    def is_story_dialog_playing(self) -> bool:
        """函数说明：is_story_dialog_playing。"""
        pass

    @abstractmethod
    def is_save_blocked(self) -> bool:
        """函数说明：is_save_blocked。"""
        pass

    @abstractmethod
    def is_showcase_mode(self) -> bool:
        """函数说明：is_showcase_mode。"""
        pass

    @abstractmethod
    def is_challenge_active(self) -> bool:
        """函数说明：is_challenge_active。"""
        pass

    @abstractmethod
    def save_game(self) -> None:
        """宿主保存原语；失败时抛出任意异常。"""
        pass

    def is_playing_alone(self) -> bool:
        """函数说明：is_playing_alone。"""
        return self.is_single_player()

    def get_local_participant(self) -> Participant | None:
        """函数说明：get_local_participant。"""
        return None

    def request_participant_save(self, participant: Participant) -> None:
        """持久化本地参与者的复制状态。"""
        pass

    def announce(self, key: str, participant: Participant) -> None:
        """向会话聊天记录写入一条本地化消息。"""
        pass

    def is_authoritative(self) -> bool:
        """函数说明：is_authoritative。"""
        return self.is_single_player() or self.is_master()
