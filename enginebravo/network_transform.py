"""Component choosing which parts of a transform are synchronised over the network."""

from __future__ import annotations

from enginebravo.gameobject import Component


class NetworkTransform(Component):
    """Flags telling which transform fields are sent over the network."""

    def __init__(
        self,
        send_position_x: bool = False,
        send_position_y: bool = False,
        send_rotation: bool = False,
        send_scale_x: bool = False,
        send_scale_y: bool = False,
        tag: str = "defaultNetworkTransform",
    ) -> None:
        super().__init__(tag)
        self.send_position_x = send_position_x
        self.send_position_y = send_position_y
        self.send_rotation = send_rotation
        self.send_scale_x = send_scale_x
        self.send_scale_y = send_scale_y

    def clone(self) -> NetworkTransform:
        """A copy with the same flags and tag, not attached to any object."""
        return NetworkTransform(
            self.send_position_x,
            self.send_position_y,
            self.send_rotation,
            self.send_scale_x,
            self.send_scale_y,
            self.tag,
        )