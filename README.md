# enginebravo

Core building blocks of a small 2D game engine, in plain Python with no
third-party dependencies.

## Modules

- `enginebravo.gameobject`: `Vector2`, `Transform`, `Component` and
  `GameObject`. A game object holds components (`add_component`,
  `remove_component`, `get_components`, `has_component`,
  `components_with_tag`), can be placed under a parent (`set_parent`,
  `remove_parent`, `children`), and `world_transform()` combines its
  transform with those of its ancestors: positions and rotations are added,
  scales multiplied. `set_active` sets the state of the object and all its
  descendants. `copy()` makes a copy with deep-copied components but no
  children; `detach()` leaves the parent, orphans the children and drops all
  components. An optional `on_change` callback is called whenever a
  component is added or removed.
- `enginebravo.particle`: `Color` and `Particle`. Lifetimes are given in
  milliseconds; `update(delta_time)` advances the particle by `delta_time`
  seconds, moving it, accelerating it, turning it and scaling its size from
  the start size towards the end size. A particle whose size drops below zero
  ends its life. `current_color()` returns white for an empty gradient, the
  only colour of a one-colour gradient, and otherwise a colour interpolated
  along the gradient (or the nearest gradient colour when
  `interpolate_color` is false).
- `enginebravo.particlesystem`: `ParticleSystem(emitter_kind)` tracks game
  objects and, on `update()`, calls `update()` on every component of type
  `emitter_kind` of each active object.
- `enginebravo.maptograph`: `TileMapData` and `MapToGraph`. `MapToGraph`
  takes the first layer with an `isGraphLayer` property and connects every
  non-zero tile to its non-zero neighbours (left, right, up, down) in an
  undirected adjacency list. Nodes are numbered `row * width + col`. A map
  without a graph layer raises `LookupError`.
- `enginebravo.resources`: `ResourceLocator` finds a `Resources` directory
  next to the running program or up to three levels above it, caches the
  first directory found for later instances, and resolves resource names to
  paths with `resource_path(name, check_exists)`, raising
  `FileNotFoundError` for missing ones.
- `enginebravo.packet`: `NetworkRole`, `NetworkMessage`, `NetworkPacket`
  (the header carried by every message, with its default field values) and
  `BitStream`, a byte stream written and read with `struct` formats
  (little-endian unless the format says otherwise). `reserve_packet_bits`
  clears a stream and writes a default header, `write_packet_header`
  overwrites the header at the start while keeping the write position, and
  `read_packet` reads a header back.
- `enginebravo.register`: `fnv1a_hash`, `type_id` (a 32-bit FNV-1a hash of
  a class's module and qualified name), the abstract `NetworkSerializable`
  and `NetworkPrefab`, and the shared `NetworkRegister`, filled with the
  `register_network_serializable` and `register_network_prefab` class
  decorators. Unknown ids give `None`.
- `enginebravo.network_transform`: `NetworkTransform`, a component with flags
  for which transform fields are synchronised.
- `enginebravo.network_object`: `NetworkObject`, a component holding a
  network object id (taken from a shared counter), the owning client's GUID,
  ownership and player flags and a prefab id. `move_from` takes over another
  object's ownership, client and player state and resets them there.
- `enginebravo.network_behaviour`: `NetworkVariableBase`, `NetworkVariable`
  and `NetworkBehaviour`. A `NetworkVariable(owner, kind)` registers itself
  with its behaviour and is numbered by its slot. The hooks `server_rpc`,
  `client_rpc` and `on_network_spawn` run the callables stored under those
  names in `rpc_handlers` and raise `RpcUnavailableError` when none is
  stored. `is_owner()` reports the ownership of the game object's
  `NetworkObject`.
- `enginebravo.network_manager`: `NetworkManager` holds the role and tick
  rate, tracks networked objects, and creates player objects from a default
  prefab (`instantiate_player`) or finds them for removal
  (`destroy_player`). The `on_spawn` and `on_remove` callbacks let the caller
  put those objects into or take them out of a scene.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

World transforms:

```python
from enginebravo.gameobject import GameObject, Transform, Vector2

parent = GameObject()
parent.transform = Transform(position=Vector2(10, 0))

child = GameObject()
child.transform = Transform(position=Vector2(5, 5))
child.set_parent(parent)

print(child.world_transform().position)  # Vector2(x=15, y=5)
```

Turning a tile map into a graph:

```python
from enginebravo.maptograph import MapToGraph, TileMapData

data = TileMapData(
    layers=[[[1, 1], [0, 1]]],
    layer_names=["paths"],
    layer_properties={"paths": {"isGraphLayer": "true"}},
)
graph = MapToGraph(data)
graph.convert_to_graph()
print(graph.adjacency_list)  # {0: [1], 1: [0, 3], 3: [1]}
```

Writing and reading a packet header:

```python
from enginebravo.packet import (
    BitStream, NetworkMessage, NetworkPacket,
    read_packet, reserve_packet_bits, write_packet_header,
)

stream = BitStream()
reserve_packet_bits(stream)
stream.write("f", 1.5)  # payload after the header
write_packet_header(stream, NetworkPacket(message_id=NetworkMessage.ID_TRANSFORM_PACKET))

header = read_packet(stream)
print(header.message_id, stream.read("f"))  # 135 1.5
```

Registering a network type and creating it again from its id:

```python
from enginebravo.register import (
    NetworkRegister, NetworkSerializable, register_network_serializable, type_id,
)

@register_network_serializable
class Score(NetworkSerializable):
    def serialize(self, stream): ...
    def deserialize(self, stream): ...

instance = NetworkRegister.instance().create_serializable(type_id(Score))
```

## What it does not do

The package has no network transport: there is no server, client or host
that opens sockets and sends the packets it can build and read. There is no
scene, renderer, sprite or physics component, no tile-map file parser (a
`TileMapData` is filled in by the caller), and no particle emitter class —
`ParticleSystem` drives whatever component type it is given. There is no
command to run.