import pytest

from enginebravo.gameobject import GameObject
from enginebravo.packet import BitStream
from enginebravo.register import (
    NetworkPrefab,
    NetworkRegister,
    NetworkSerializable,
    fnv1a_hash,
    register_network_prefab,
    register_network_serializable,
    type_id,
)


@register_network_serializable
class ConcreteNetworkSerializable(NetworkSerializable):
    def __init__(self):
        self.value = 0

    def serialize(self, stream):
        stream.write("i", self.value)

    def deserialize(self, stream):
        self.value = stream.read("i")


@register_network_prefab
class EnemyPrefab(NetworkPrefab):
    def create_prefab(self):
        return GameObject(name="Enemy")


class Unregistered(NetworkSerializable):
    def serialize(self, stream):
        pass

    def deserialize(self, stream):
        pass


def _stream_with(value):
    stream = BitStream()
    stream.write("i", value)
    return stream


@pytest.mark.parametrize(
    "data, expected",
    [("", 0x811C9DC5), ("a", 0xE40C292C), ("foobar", 0xBF9CF968), (b"foobar", 0xBF9CF968)],
)
def test_fnv1a_vectors(data, expected):
    assert fnv1a_hash(data) == expected


def test_type_id_is_stable_and_distinct():
    assert type_id(EnemyPrefab) == type_id(EnemyPrefab)
    assert type_id(EnemyPrefab) != type_id(ConcreteNetworkSerializable)


def test_serializable_registration():
    obj = NetworkRegister.instance().create_serializable(type_id(ConcreteNetworkSerializable))
    assert obj.value == 0
    obj.deserialize(_stream_with(5))
    assert obj.value == 5


def test_unknown_serializable_returns_none():
    assert NetworkRegister.instance().create_serializable(type_id(Unregistered)) is None


def test_instance_is_shared():
    registry = NetworkRegister.instance()
    registry.register_serializable(Unregistered)
    try:
        again = NetworkRegister.instance()
        assert again is registry
        created = again.create_serializable(type_id(Unregistered))
        assert type(created) is Unregistered
    finally:
        registry._serialize_registry.pop(type_id(Unregistered), None) if hasattr(
            registry, "_serialize_registry"
        ) else None


def test_prefab_registration_and_creation():
    prefab = NetworkRegister.instance().create_prefab(type_id(EnemyPrefab))
    assert isinstance(prefab, EnemyPrefab)
    assert prefab.create_prefab().name == "Enemy"
    assert prefab.prefab_id() == type_id(EnemyPrefab)


def test_unknown_prefab_returns_none():
    assert NetworkRegister().create_prefab(type_id(EnemyPrefab)) is None


def test_register_wrong_type_raises():
    registry = NetworkRegister()
    with pytest.raises(TypeError):
        registry.register_serializable(EnemyPrefab)
    with pytest.raises(TypeError):
        registry.register_prefab(ConcreteNetworkSerializable)


def test_fresh_registry_registration():
    registry = NetworkRegister()
    assert registry.create_serializable(type_id(ConcreteNetworkSerializable)) is None
    registry.register_serializable(ConcreteNetworkSerializable)
    first = registry.create_serializable(type_id(ConcreteNetworkSerializable))
    second = registry.create_serializable(type_id(ConcreteNetworkSerializable))
    assert first is not second
    first.deserialize(_stream_with(11))
    assert first.value == 11
    assert second.value == 0


def test_created_serializable_round_trip():
    source = ConcreteNetworkSerializable()
    source.value = -17
    stream = BitStream()
    source.serialize(stream)
    target = NetworkRegister.instance().create_serializable(type_id(ConcreteNetworkSerializable))
    target.deserialize(stream)
    assert target.value == -17