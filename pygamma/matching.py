from collections.abc import Hashable, Sequence
from .graph import Graph
from .error import UnknownNode, InvalidMatching

__all__ = ['Matching']


class Matching(Graph):
    """
    Matching: set of edges without common nodes, itself represented as a graph
    (nodes = matched nodes, edges = matched pairs, each node of degree one).
    """
    def __init__(self, pairs: Sequence[tuple[Hashable, Hashable]] = ()):
        self._mates = {}
        self._pairs = []
        for (s, t) in pairs:
            if s in self._mates:
                raise InvalidMatching(s)
            if t in self._mates or t == s:
                raise InvalidMatching(t)
            self._mates[s] = t
            self._mates[t] = s
            self._pairs.append((s, t))

    @classmethod
    def from_mates(cls, mates: dict, order: Sequence[Hashable]):
        """
        Construct a matching from a symmetric node -> partner mapping,
        reporting pairs in the order in which their first node appears in 'order'.
        """
        pairs = []
        seen = set()
        for id in order:
            if id in mates and id not in seen:
                partner = mates[id]
                assert mates.get(partner) == id, f'mapping is not symmetric at node {id!r}'
                seen.update((id, partner))
                pairs.append((id, partner))
        return cls(pairs)

    def order(self) -> int:
        return len(self._mates)

    def size(self) -> int:
        return len(self._pairs)

    def nodes(self) -> list:
        return [id for pair in self._pairs for id in pair]

    def edges(self) -> list[tuple]:
        return list(self._pairs)

    def has_node(self, id) -> bool:
        try:
            return id in self._mates
        except TypeError:
            return False

    def mate(self, id):
        """
        Matching partner of 'id'.
        """
        if not self.has_node(id):
            raise UnknownNode(id)
        return self._mates[id]

    def neighbors(self, id) -> list:
        return [self.mate(id)]

    def degree(self, id) -> int:
        self.mate(id)
        return 1

    def has_edge(self, source, target) -> bool:
        if not self.has_node(target):
            raise UnknownNode(target)
        return self.mate(source) == target

    def mates(self) -> dict:
        """
        Copy of the symmetric node -> partner mapping.
        """
        return dict(self._mates)

    def is_consistent(self, graph: Graph, verbose: bool = False) -> bool:
        """
        Whether this is a valid matching of 'graph'.
        """
        for (s, t) in self._pairs:
            for id in (s, t):
                if not graph.has_node(id):
                    if verbose:
                        print(f'Consistency check failed: node {id!r} is not part of the graph.')
                    return False
            if not graph.has_edge(s, t):
                if verbose:
                    print(f'Consistency check failed: ({s!r}, {t!r}) is not an edge of the graph.')
                return False
        return True

    def is_perfect(self, graph: Graph) -> bool:
        """
        Whether the matching covers every node of 'graph'.
        """
        return all(self.has_node(id) for id in graph.nodes())

    def __eq__(self, other):
        if not isinstance(other, Matching):
            return NotImplemented
        return self._mates == other._mates

    def __repr__(self):
        return f'Matching({self._pairs})'
