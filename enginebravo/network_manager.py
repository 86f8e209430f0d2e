"""Bookkeeping for networked game objects, the network role and player spawning."""

from __future__ import annotations

from typing import Callable, Optional

from enginebravo.gameobject import GameObject
from enginebravo.network_object import NetworkObject
from enginebravo.packet import NetworkPacket, NetworkRole

_NO_NETWORK_OBJECT_ID = 0xFFFF

SceneHook = Callable[[GameObject], None]


class NetworkManager:
    """Tracks networked objects and spawns or removes player objects.

    ``on_spawn`` is called with each newly created player object so that the
    caller can put it into the scene; ``on_remove`` is called with an object
    that should be taken out of the scene.
    """

    def __init__(
        self,
        tick_rate: int = 60,
        on_spawn: Optional[SceneHook] = None,
        on_remove: Optional[SceneHook] = None,
    ) -> None:
        self.role = NetworkRole.UNASSIGNED
        self.tick_rate = tick_rate
        self.on_spawn = on_spawn
        self.on_remove = on_remove
        self._default_player_prefab: GameObject | None = None
        self._objects: list[GameObject] = []

    def is_server(self) -> bool:
        return self.role is NetworkRole.SERVER

    def is_client(self) -> bool:
        return self.role is NetworkRole.CLIENT

    def is_host(self) -> bool:
        return self.role is NetworkRole.HOST

    def is_networked(self) -> bool:
        """Whether the role is server, client or host."""
        return self.is_server() or self.is_client() or self.is_host()

    @property
    def default_player_prefab(self) -> GameObject:
        """The prefab players are copied from; raises LookupError if none is set."""
        if self._default_player_prefab is None:
            raise LookupError("Player prefab not set.")
        return self._default_player_prefab

    def set_default_player_prefab(self, prefab: GameObject) -> None:
        """Use ``prefab`` for new players, giving it a NetworkObject if it lacks one."""
        if not prefab.has_component(NetworkObject):
            prefab.add_component(NetworkObject())
        self._default_player_prefab = prefab

    @staticmethod
    def _network_object(obj: GameObject) -> NetworkObject | None:
        found = obj.get_components(NetworkObject)
        return found[0] if found else None

    def instantiate_player(self, packet: NetworkPacket) -> GameObject | None:
        """Create a player for the packet's client, or return None if it already has one."""
        if self._default_player_prefab is None:
            raise RuntimeError("Player prefab not set.")

        for obj in self._objects:
            network_object = self._network_object(obj)
            if network_object is not None and network_object.client_guid == packet.client_guid:
                return None

        player = self._default_player_prefab.copy()
        network_objects = player.get_components(NetworkObject)
        if not network_objects:
            raise RuntimeError("Player prefab does not have a NetworkObject component")
        network_object = network_objects[0]
        network_object.client_guid = packet.client_guid
        if packet.network_object_id != _NO_NETWORK_OBJECT_ID:
            network_object.network_object_id = packet.network_object_id
        else:
            network_object.network_object_id = NetworkObject.next_network_object_id()
        network_object.is_player = True

        if self.on_spawn is not None:
            self.on_spawn(player)
        return player

    def destroy_player(self, client_guid: int) -> GameObject | None:
        """Request removal of the first object owned by ``client_guid`` and return it."""
        for obj in self._objects:
            network_object = self._network_object(obj)
            if network_object is not None and network_object.client_guid == client_guid:
                if self.on_remove is not None:
                    self.on_remove(obj)
                return obj
        return None

    @property
    def objects(self) -> list[GameObject]:
        return list(self._objects)

    def add_object(self, obj: GameObject) -> None:
        """Track ``obj`` unless it is already tracked."""
        if not any(existing is obj for existing in self._objects):
            self._objects.append(obj)

    def remove_object(self, obj: GameObject) -> None:
        self._objects = [existing for existing in self._objects if existing is not obj]

    def clear_objects(self) -> None:
        self._objects.clear()