"""Component marking a game object as shared over the network."""

from __future__ import annotations

import itertools
from typing import ClassVar, Iterator

from enginebravo.gameobject import Component
from enginebravo.packet import UNASSIGNED_GUID


class NetworkObject(Component):
    """Identifies a game object on the network: its id, owning client and prefab."""

    _id_counter: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self, tag: str = "defaultNetworkObject") -> None:
        super().__init__(tag)
        self.is_owner = False
        self.client_guid = UNASSIGNED_GUID
        self.is_player = False
        self.network_object_id = next(NetworkObject._id_counter)
        self.prefab_id = -1

    @classmethod
    def next_network_object_id(cls) -> int:
        """Take the next id from the shared counter."""
        return next(cls._id_counter)

    def clone(self) -> NetworkObject:
        """A copy with the same ownership, client and ids, not attached to any object."""
        duplicate = NetworkObject.__new__(NetworkObject)
        Component.__init__(duplicate, self.tag)
        duplicate.is_owner = self.is_owner
        duplicate.client_guid = self.client_guid
        duplicate.is_player = self.is_player
        duplicate.network_object_id = self.network_object_id
        duplicate.prefab_id = self.prefab_id
        return duplicate

    def move_from(self, other: NetworkObject) -> NetworkObject:
        """Take over ownership, client and player state from ``other`` and reset them there."""
        if other is self:
            return self
        self.tag = other.tag
        self.is_owner = other.is_owner
        self.client_guid = other.client_guid
        self.is_player = other.is_player

        other.is_owner = False
        other.client_guid = UNASSIGNED_GUID
        other.is_player = False
        return self