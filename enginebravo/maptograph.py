"""Turning the graph layer of a tile map into an adjacency list."""

from __future__ import annotations

from dataclasses import dataclass, field

Layer = list[list[int]]


@dataclass
class TileMapData:
    """Tile layers of a map with their names and custom properties."""

    layers: list[Layer] = field(default_factory=list)
    layer_names: list[str] = field(default_factory=list)
    layer_properties: dict[str, dict[str, str]] = field(default_factory=dict)


class MapToGraph:
    """Builds an undirected graph from the non-zero tiles of a graph layer."""

    DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

    def __init__(self, tile_map_data: TileMapData) -> None:
        self.tile_map_data = tile_map_data
        self._adjacency: dict[int, list[int]] = {}

    @property
    def adjacency_list(self) -> dict[int, list[int]]:
        return self._adjacency

    def find_graph_layer(self) -> Layer | None:
        """Return the first layer with an ``isGraphLayer`` property, or None."""
        data = self.tile_map_data
        for layer, name in zip(data.layers, data.layer_names):
            if "isGraphLayer" in data.layer_properties.get(name, {}):
                return layer
        return None

    def convert_to_graph(self) -> None:
        """Connect every non-zero tile to its non-zero neighbours."""
        layer = self.find_graph_layer()
        if layer is None:
            raise LookupError("Graph layer not found in map!")
        for row, cells in enumerate(layer):
            for col, tile in enumerate(cells):
                if tile != 0:
                    node = self.node_index(row, col, len(cells))
                    self._connect_adjacent_nodes(node, row, col, layer)

    def node_index(self, row: int, col: int, width: int) -> int:
        return row * width + col

    def _connect_adjacent_nodes(self, node: int, row: int, col: int, layer: Layer) -> None:
        for dx, dy in self.DIRECTIONS:
            new_row, new_col = row + dy, col + dx
            if not 0 <= new_row < len(layer) or not 0 <= new_col < len(layer[new_row]):
                continue
            if layer[new_row][new_col] != 0:
                self.add_edge(node, self.node_index(new_row, new_col, len(layer[new_row])))

    def add_edge(self, source: int, target: int) -> None:
        """Add an undirected edge, ignoring duplicates."""
        source_links = self._adjacency.setdefault(source, [])
        target_links = self._adjacency.setdefault(target, [])
        if target not in source_links:
            source_links.append(target)
        if source not in target_links:
            target_links.append(source)