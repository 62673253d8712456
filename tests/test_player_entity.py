import pytest

from coopsweeper.entity import EntityId
from coopsweeper.entity_manager import EntityManager
from coopsweeper.player import LOCAL_PLAYER_COLOR, PlayerComponent
from coopsweeper.player_entity import (
    PlayerEntity,
    create_local_player,
    create_player_entity,
    create_remote_player,
    find_inactive_players,
    get_local_player_id,
    get_player_info,
    get_player_position,
    update_player_position,
)
from coopsweeper.position import Position


@pytest.fixture
def manager():
    return EntityManager()


def test_local_player_entity(manager):
    entity = create_local_player(manager.create_builder(), "alice", 10.0, 20.0)
    player = entity.get_component(PlayerComponent)
    assert player.id == "alice"
    assert player.color == LOCAL_PLAYER_COLOR
    assert player.is_local
    assert entity.get_component(Position) == Position(10.0, 20.0)
    assert entity.has_tag("player")
    assert entity.has_tag("local_player")
    assert not entity.has_tag("remote_player")


def test_remote_player_entity(manager):
    entity = create_remote_player(manager.create_builder(), "bob", "#123456", 1.0, 2.0)
    player = entity.get_component(PlayerComponent)
    assert player.color == "#123456"
    assert not player.is_local
    assert entity.has_tag("remote_player")


@pytest.mark.parametrize("is_local", [True, False])
def test_create_player_entity_dispatch(manager, is_local):
    entity = create_player_entity(manager.create_builder(), "p", "#ABCDEF", 0.0, 0.0, is_local)
    player = entity.get_component(PlayerComponent)
    assert player.is_local == is_local
    assert entity.has_tag("local_player") == is_local
    expected_color = LOCAL_PLAYER_COLOR if is_local else "#ABCDEF"
    assert player.color == expected_color


def test_update_position_refreshes_action_time(manager):
    pid = manager.register_entity(create_local_player(manager.create_builder(), "a", 0.0, 0.0))
    manager.get_entity(pid).get_component(PlayerComponent).last_action_time = 0.0
    assert update_player_position(manager, pid, 33.0, 44.0) is True
    assert get_player_position(manager, pid) == (33.0, 44.0)
    assert get_player_info(manager, pid).last_action_time > 0.0


def test_update_missing_player(manager):
    assert update_player_position(manager, EntityId(42), 1.0, 1.0) is False
    assert get_player_position(manager, EntityId(42)) is None
    assert get_player_info(manager, EntityId(42)) is None


def test_get_player_info_is_a_copy(manager):
    pid = manager.register_entity(
        create_remote_player(manager.create_builder(), "r", "#FF0000", 0.0, 0.0)
    )
    info = get_player_info(manager, pid)
    info.color = "#000000"
    assert get_player_info(manager, pid).color == "#FF0000"


def test_get_local_player_id(manager):
    assert get_local_player_id(manager) is None
    manager.register_entity(create_remote_player(manager.create_builder(), "r", "#FF0000", 0.0, 0.0))
    assert get_local_player_id(manager) is None
    local = manager.register_entity(create_local_player(manager.create_builder(), "l", 0.0, 0.0))
    assert get_local_player_id(manager) == local


def test_find_inactive_players(manager):
    stale = manager.register_entity(create_local_player(manager.create_builder(), "s", 0.0, 0.0))
    fresh = manager.register_entity(
        create_remote_player(manager.create_builder(), "f", "#FF0000", 0.0, 0.0)
    )
    manager.get_entity(stale).get_component(PlayerComponent).last_action_time = 0.0
    assert find_inactive_players(manager, 60_000.0) == [stale]
    assert fresh not in find_inactive_players(manager, 60_000.0)


def test_player_entity_handle():
    handle = PlayerEntity(EntityId(3), is_local=True)
    assert handle.id == EntityId(3)
    assert handle.is_local
    assert not PlayerEntity(EntityId(4), is_local=False).is_local