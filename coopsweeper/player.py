"""Player component for multiplayer cursors."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

LOCAL_PLAYER_COLOR = "#00FF00"


def _now_ms() -> float:
    return time.time() * 1000.0


@dataclass
class PlayerComponent:
    """A player's identity, cursor colour and the time of their last action in ms."""

    id: str
    color: str
    is_local: bool
    last_action_time: float = field(default_factory=_now_ms)

    @classmethod
    def local(cls, player_id: str) -> PlayerComponent:
        return cls(player_id, LOCAL_PLAYER_COLOR, True)

    @classmethod
    def remote(cls, player_id: str, color: str) -> PlayerComponent:
        return cls(player_id, color, False)

    def update_action_time(self) -> None:
        self.last_action_time = _now_ms()