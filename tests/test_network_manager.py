import pytest

from enginebravo.gameobject import GameObject
from enginebravo.network_manager import NetworkManager
from enginebravo.network_object import NetworkObject
from enginebravo.packet import NetworkPacket, NetworkRole


def _manager():
    spawned = []
    removed = []
    manager = NetworkManager(on_spawn=spawned.append, on_remove=removed.append)
    return manager, spawned, removed


def _networked(guid):
    obj = GameObject(name="net")
    net = NetworkObject()
    net.client_guid = guid
    obj.add_component(net)
    return obj


def test_defaults():
    manager = NetworkManager()
    assert manager.role is NetworkRole.UNASSIGNED
    assert manager.tick_rate == 60
    assert manager.is_networked() is False


@pytest.mark.parametrize(
    "role, server, client, host",
    [
        (NetworkRole.SERVER, True, False, False),
        (NetworkRole.CLIENT, False, True, False),
        (NetworkRole.HOST, False, False, True),
    ],
)
def test_role_predicates(role, server, client, host):
    manager = NetworkManager()
    manager.role = role
    assert manager.is_server() is server
    assert manager.is_client() is client
    assert manager.is_host() is host
    assert manager.is_networked() is True


def test_prefab_unset_raises():
    manager = NetworkManager()
    with pytest.raises(LookupError):
        manager.default_player_prefab
    prefab = GameObject(name="late")
    manager.set_default_player_prefab(prefab)
    assert manager.default_player_prefab.name == "late"


def test_set_prefab_adds_network_object():
    manager = NetworkManager()
    prefab = GameObject(name="player")
    manager.set_default_player_prefab(prefab)
    assert manager.default_player_prefab is prefab
    assert len(prefab.get_components(NetworkObject)) == 1


def test_set_prefab_keeps_existing_network_object():
    manager = NetworkManager()
    prefab = GameObject()
    net = NetworkObject()
    prefab.add_component(net)
    manager.set_default_player_prefab(prefab)
    assert prefab.get_components(NetworkObject) == [net]


def test_instantiate_without_prefab_raises():
    manager = NetworkManager()
    with pytest.raises(RuntimeError):
        manager.instantiate_player(NetworkPacket(client_guid=5))


def test_instantiate_uses_packet_ids():
    manager, spawned, _ = _manager()
    prefab = GameObject(name="player")
    manager.set_default_player_prefab(prefab)
    player = manager.instantiate_player(NetworkPacket(client_guid=5, network_object_id=2))
    assert player is not prefab
    assert player.name == "player"
    net = player.get_components(NetworkObject)[0]
    assert net.client_guid == 5
    assert net.network_object_id == 2
    assert net.is_player is True
    assert spawned == [player]
    assert prefab.get_components(NetworkObject)[0].is_player is False


def test_instantiate_without_id_takes_fresh_counter_value():
    manager, _, _ = _manager()
    prefab = GameObject()
    manager.set_default_player_prefab(prefab)
    prefab_id = prefab.get_components(NetworkObject)[0].network_object_id
    player = manager.instantiate_player(NetworkPacket(client_guid=7))
    new_id = player.get_components(NetworkObject)[0].network_object_id
    assert new_id > prefab_id
    assert NetworkObject().network_object_id > new_id


def test_instantiate_existing_player_returns_none():
    manager, spawned, _ = _manager()
    manager.set_default_player_prefab(GameObject())
    manager.add_object(_networked(5))
    assert manager.instantiate_player(NetworkPacket(client_guid=5)) is None
    assert spawned == []


def test_instantiate_prefab_without_network_object_raises():
    manager = NetworkManager()
    prefab = GameObject()
    manager.set_default_player_prefab(prefab)
    prefab.remove_component(prefab.get_components(NetworkObject)[0])
    with pytest.raises(RuntimeError):
        manager.instantiate_player(NetworkPacket(client_guid=5))


def test_destroy_player_requests_removal():
    manager, _, removed = _manager()
    other = _networked(3)
    target = _networked(5)
    manager.add_object(other)
    manager.add_object(target)
    assert manager.destroy_player(5) is target
    assert removed == [target]


def test_destroy_unknown_player_does_nothing():
    manager, _, removed = _manager()
    manager.add_object(_networked(3))
    assert manager.destroy_player(9) is None
    assert removed == []


def test_add_object_ignores_duplicates():
    manager = NetworkManager()
    obj = GameObject()
    manager.add_object(obj)
    manager.add_object(obj)
    assert manager.objects == [obj]


def test_remove_and_clear_objects():
    manager = NetworkManager()
    first, second = GameObject(), GameObject()
    manager.add_object(first)
    manager.add_object(second)
    manager.remove_object(first)
    assert manager.objects == [second]
    manager.clear_objects()
    assert manager.objects == []