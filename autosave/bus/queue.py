"""模块说明：queue。"""

from collections import deque
from typing import Callable

from loguru import logger

from autosave.bus.events import HudMessage


class MessageBus:
    """面向宿主 UI 的消息总线（同步、单线程）。

    消息先入队；宿主可以在每帧 drain() 拉取，或注册订阅者后
    调用 dispatch() 推送。单个订阅者出错不会影响其他订阅者。
    """

    def __init__(self):
        self.outbound: deque[HudMessage] = deque()
        self._subscribers: list[Callable[[HudMessage], None]] = []

    def publish(self, msg: HudMessage) -> None:
        """函数说明：publish。"""
        self.outbound.append(msg)

    def subscribe(self, callback: Callable[[HudMessage], None]) -> None:
        """函数说明：subscribe。"""
        self._subscribers.append(callback)

    def drain(self) -> list[HudMessage]:
        """取出并清空所有待发送消息。"""
        messages = list(self.outbound)
        self.outbound.clear()
        return messages

    def dispatch(self) -> int:
        """把待发送消息推给所有订阅者，返回推送的消息数。"""
        messages = self.drain()
        for msg in messages:
            for callback in self._subscribers:
                try:
                    callback(msg)
                except Exception as e:
                    logger.error(f"Error dispatching HUD message {msg.text!r}: {e}")
        return len(messages)

    @property
    def outbound_size(self) -> int:
        """函数说明：outbound_size。"""
        return len(self.outbound)
