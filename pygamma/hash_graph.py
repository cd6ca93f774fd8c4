from collections.abc import Hashable, Iterable, Mapping, Sequence
from .graph import Graph
from .error import UnknownNode, DuplicateNode, DuplicateEdge, InvalidEdge, MissingEdge

__all__ = ['HashGraph']


class HashGraph(Graph):
    """
    Graph with arbitrary hashable node identifiers and optional edge labels.

    Nodes are iterated in the order in which they are declared,
    edges in the order and orientation in which they are declared,
    and the neighbors of a node in the order of its incident edges.
    """
    def __init__(self, nodes: Sequence[Hashable], edges: Sequence[tuple]):
        self._nodes = []
        self._adjacency = {}
        for id in nodes:
            if id in self._adjacency:
                raise DuplicateNode(id)
            self._adjacency[id] = {}
            self._nodes.append(id)
        self._edges = []
        for edge in edges:
            if len(edge) == 2:
                (s, t), label = edge, None
            elif len(edge) == 3:
                s, t, label = edge
            else:
                raise ValueError(f'expecting (source, target) or (source, target, label), received {edge}')
            for id in (s, t):
                if id not in self._adjacency:
                    raise UnknownNode(id)
            if s == t:
                raise InvalidEdge(s, t)
            if t in self._adjacency[s]:
                raise DuplicateEdge(s, t)
            # neighbor dictionaries preserve insertion order
            self._adjacency[s][t] = label
            self._adjacency[t][s] = label
            self._edges.append((s, t))

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Hashable, Sequence[Hashable]]):
        """
        Construct a graph from a mapping of each node to its ordered neighbors.
        Every neighbor must be a key of the mapping and list the node in return.
        """
        edges = []
        for s, neighbors in adjacency.items():
            for k, t in enumerate(neighbors):
                if t not in adjacency:
                    raise UnknownNode(t)
                if t == s:
                    raise InvalidEdge(s, t)
                if t in neighbors[k+1:]:
                    raise DuplicateEdge(s, t)
                if s not in adjacency[t]:
                    raise MissingEdge(t, s)
        graph = cls(list(adjacency.keys()), [])
        # fill in neighbors directly to keep the per-node order as given
        for s, neighbors in adjacency.items():
            for t in neighbors:
                graph._adjacency[s][t] = None
                if s not in graph._adjacency[t]:
                    # first appearance of the edge
                    graph._edges.append((s, t))
        return graph

    @classmethod
    def from_traversal(cls, root: Hashable, steps: Iterable):
        """
        Construct the graph explored by a traversal started at 'root':
        the root followed by the target of each tree step as nodes,
        and every traversed edge in step order.
        """
        nodes = [root]
        edges = []
        for (source, target, cut) in steps:
            if not cut:
                nodes.append(target)
            edges.append((source, target))
        return cls(nodes, edges)

    def order(self) -> int:
        return len(self._nodes)

    def size(self) -> int:
        return len(self._edges)

    def nodes(self) -> list:
        return list(self._nodes)

    def edges(self) -> list[tuple]:
        return list(self._edges)

    def has_node(self, id) -> bool:
        try:
            return id in self._adjacency
        except TypeError:
            # unhashable identifier
            return False

    def _neighbor_map(self, id) -> dict:
        try:
            return self._adjacency[id]
        except (KeyError, TypeError):
            raise UnknownNode(id) from None

    def neighbors(self, id) -> list:
        return list(self._neighbor_map(id))

    def degree(self, id) -> int:
        return len(self._neighbor_map(id))

    def has_edge(self, source, target) -> bool:
        neighbors = self._neighbor_map(source)
        self._neighbor_map(target)
        return target in neighbors

    def label(self, source, target):
        """
        Label of the edge between 'source' and 'target' (None if unlabeled).
        Raises KeyError if the nodes are not adjacent.
        """
        neighbors = self._neighbor_map(source)
        self._neighbor_map(target)
        if target not in neighbors:
            raise KeyError(f'no edge between {source!r} and {target!r}')
        return neighbors[target]
