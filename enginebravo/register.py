"""Registry of network-serializable types and network prefabs, keyed by type id."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from enginebravo.gameobject import GameObject
from enginebravo.packet import BitStream

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619

T = TypeVar("T", bound=type)


def fnv1a_hash(data: bytes | str) -> int:
    """32-bit FNV-1a hash of ``data``; text is hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = _FNV_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFF_FFFF
    return value


def type_id(cls: type) -> int:
    """A stable 32-bit identifier for a class, derived from its qualified name."""
    return fnv1a_hash(f"{cls.__module__}.{cls.__qualname__}")


class NetworkSerializable(ABC):
    """A value that can be written to and read from a bit stream."""

    @abstractmethod
    def serialize(self, stream: BitStream) -> None:
        """Write this value to ``stream``."""

    @abstractmethod
    def deserialize(self, stream: BitStream) -> None:
        """Read this value from ``stream``."""


class NetworkPrefab(ABC):
    """A factory for game objects that can be spawned over the network."""

    @abstractmethod
    def create_prefab(self) -> GameObject:
        """Create a new game object."""

    def prefab_id(self) -> int:
        """The identifier this prefab is registered under."""
        return type_id(type(self))


class NetworkRegister:
    """Maps type ids to factories for serializables and prefabs."""

    _instance: NetworkRegister | None = None

    def __init__(self) -> None:
        self._serializables: dict[int, Callable[[], NetworkSerializable]] = {}
        self._prefabs: dict[int, Callable[[], NetworkPrefab]] = {}

    @classmethod
    def instance(cls) -> NetworkRegister:
        """The shared registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_serializable(self, cls: type[NetworkSerializable]) -> None:
        if not (isinstance(cls, type) and issubclass(cls, NetworkSerializable)):
            raise TypeError("Type must derive from NetworkSerializable")
        self._serializables[type_id(cls)] = cls

    def register_prefab(self, cls: type[NetworkPrefab]) -> None:
        if not (isinstance(cls, type) and issubclass(cls, NetworkPrefab)):
            raise TypeError("Type must derive from NetworkPrefab")
        self._prefabs[type_id(cls)] = cls

    def create_serializable(self, type_id: int) -> NetworkSerializable | None:
        """A new instance of the registered type, or None if the id is unknown."""
        factory = self._serializables.get(type_id)
        return factory() if factory is not None else None

    def create_prefab(self, type_id: int) -> NetworkPrefab | None:
        """A new prefab of the registered type, or None if the id is unknown."""
        factory = self._prefabs.get(type_id)
        return factory() if factory is not None else None


def register_network_serializable(cls: T) -> T:
    """Class decorator registering ``cls`` with the shared registry."""
    NetworkRegister.instance().register_serializable(cls)
    return cls


def register_network_prefab(cls: T) -> T:
    """Class decorator registering ``cls`` with the shared registry."""
    NetworkRegister.instance().register_prefab(cls)
    return cls