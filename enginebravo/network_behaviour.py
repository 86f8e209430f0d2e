"""Behaviour components holding variables that are synchronised over the network."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from enginebravo.gameobject import Component
from enginebravo.network_object import NetworkObject
from enginebravo.packet import BitStream
from enginebravo.register import NetworkSerializable, type_id

S = TypeVar("S", bound=NetworkSerializable)


class RpcUnavailableError(NotImplementedError):
    """Raised when a behaviour is asked for a network hook it does not define."""

    def __init__(self, behaviour: str, hook: str) -> None:
        super().__init__(f"{behaviour}.{hook}() is not defined for this behaviour")
        self.behaviour = behaviour
        self.hook = hook


class NetworkVariableBase(ABC):
    """A value a behaviour shares over the network, identified by its slot."""

    def __init__(self) -> None:
        self.network_variable_id = -1

    @abstractmethod
    def serialize(self, stream: BitStream) -> None:
        """Write the value to ``stream``."""

    @abstractmethod
    def deserialize(self, stream: BitStream) -> None:
        """Read the value from ``stream``."""

    @abstractmethod
    def type_id(self) -> int:
        """Identifier of the value's type."""


class NetworkVariable(NetworkVariableBase, Generic[S]):
    """A network variable holding a serializable value; registers itself with its owner."""

    def __init__(self, owner: NetworkBehaviour | None, kind: type[S], value: S | None = None) -> None:
        super().__init__()
        if owner is None:
            raise ValueError("NetworkVariable owner is None")
        self.kind = kind
        self.value: S = value if value is not None else kind()
        owner.register_network_variable(self)

    def serialize(self, stream: BitStream) -> None:
        self.value.serialize(stream)

    def deserialize(self, stream: BitStream) -> None:
        self.value.deserialize(stream)

    def type_id(self) -> int:
        return type_id(self.kind)


class NetworkBehaviour(Component):
    """Base for behaviour scripts whose variables are synchronised over the network.

    The network hooks run the callables found under their names in
    ``rpc_handlers``; a hook with no handler raises ``RpcUnavailableError``.
    """

    def __init__(self, tag: str = "defaultNetworkBehaviour") -> None:
        super().__init__(tag)
        self.network_behaviour_id = 0
        self._network_variables: list[NetworkVariableBase] = []
        self.rpc_handlers: dict[str, Callable[[], None]] = {}

    @property
    def network_variables(self) -> list[NetworkVariableBase]:
        return list(self._network_variables)

    def _run_hook(self, hook: str) -> None:
        handler = self.rpc_handlers.get(hook)
        if handler is None:
            raise RpcUnavailableError(type(self).__name__, hook)
        handler()

    def server_rpc(self) -> None:
        """Run the remote call handled on the server."""
        self._run_hook("server_rpc")

    def client_rpc(self) -> None:
        """Run the remote call handled on the clients."""
        self._run_hook("client_rpc")

    def on_network_spawn(self) -> None:
        """Run the hook for the object spawning on the network."""
        self._run_hook("on_network_spawn")

    def register_network_variable(self, variable: NetworkVariableBase) -> None:
        """Add ``variable`` and give it the index of its slot."""
        self._network_variables.append(variable)
        variable.network_variable_id = len(self._network_variables) - 1

    def is_owner(self) -> bool:
        """Whether the game object's network object is owned locally."""
        if self.game_object is None:
            raise LookupError("NetworkObject not found")
        network_objects = self.game_object.get_components(NetworkObject)
        if not network_objects:
            raise LookupError("NetworkObject not found")
        return network_objects[0].is_owner

    def clone(self) -> NetworkBehaviour:
        """A deep copy whose registered variables are the copies of this one's."""
        return super().clone()