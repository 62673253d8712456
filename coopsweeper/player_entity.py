"""Players as entities, and operations on their positions and activity."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass

from coopsweeper.entity import Entity, EntityId
from coopsweeper.entity_manager import EntityBuilder, EntityManager
from coopsweeper.player import PlayerComponent
from coopsweeper.position import Position

PLAYER_TAG = "player"
LOCAL_PLAYER_TAG = "local_player"
REMOTE_PLAYER_TAG = "remote_player"


@dataclass(frozen=True)
class PlayerEntity:
    """A handle on a player entity and whether it is the local player."""

    id: EntityId
    is_local: bool


def create_local_player(builder: EntityBuilder, player_id: str, x: float, y: float) -> Entity:
    """Build the local player's entity at a cursor position."""
    return (
        builder.with_component(PlayerComponent.local(player_id))
        .with_component(Position(x, y))
        .with_tag(PLAYER_TAG)
        .with_tag(LOCAL_PLAYER_TAG)
        .build()
    )


def create_remote_player(
    builder: EntityBuilder, player_id: str, color: str, x: float, y: float
) -> Entity:
    """Build a remote player's entity with its cursor colour."""
    return (
        builder.with_component(PlayerComponent.remote(player_id, color))
        .with_component(Position(x, y))
        .with_tag(PLAYER_TAG)
        .with_tag(REMOTE_PLAYER_TAG)
        .build()
    )


def create_player_entity(
    builder: EntityBuilder, player_id: str, color: str, x: float, y: float, is_local: bool
) -> Entity:
    """Build a local or remote player; the colour is ignored for the local one."""
    if is_local:
        return create_local_player(builder, player_id, x, y)
    return create_remote_player(builder, player_id, color, x, y)


def update_player_position(
    manager: EntityManager, entity_id: EntityId, x: float, y: float
) -> bool:
    """Move a player's cursor and refresh their action time; False if impossible."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return False
    position = entity.get_component(Position)
    if position is None:
        return False
    position.x = x
    position.y = y
    player = entity.get_component(PlayerComponent)
    if player is not None:
        player.update_action_time()
    return True


def get_player_position(manager: EntityManager, entity_id: EntityId) -> tuple[float, float] | None:
    entity = manager.get_entity(entity_id)
    if entity is None:
        return None
    position = entity.get_component(Position)
    return (position.x, position.y) if position is not None else None


def get_player_info(manager: EntityManager, entity_id: EntityId) -> PlayerComponent | None:
    """A copy of the player's component, or None."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return None
    player = entity.get_component(PlayerComponent)
    return dataclasses.replace(player) if player is not None else None


def get_local_player_id(manager: EntityManager) -> EntityId | None:
    return next(iter(manager.entities_with_tag(LOCAL_PLAYER_TAG)), None)


def find_inactive_players(manager: EntityManager, timeout_ms: float) -> list[EntityId]:
    """Players whose last action is more than timeout_ms milliseconds ago."""
    now = time.time() * 1000.0
    inactive = []
    for entity_id in manager.entities_with_tag(PLAYER_TAG):
        entity = manager.get_entity(entity_id)
        if entity is None:
            continue
        player = entity.get_component(PlayerComponent)
        if player is not None and now - player.last_action_time > timeout_ms:
            inactive.append(entity_id)
    return inactive