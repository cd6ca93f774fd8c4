from collections.abc import Sequence
import numpy as np
from scipy import sparse
from .graph import Graph
from .error import UnknownNode, DuplicateEdge, InvalidEdge, MissingEdge

__all__ = ['IndexGraph']


def _is_index(id, order: int) -> bool:
    """
    Whether 'id' is a valid node index of a graph with 'order' nodes.
    """
    return (isinstance(id, (int, np.integer)) and not isinstance(id, bool)
            and 0 <= id < order)


class IndexGraph(Graph):
    """
    Graph whose nodes are the sequential indices 0, 1, ..., n-1,
    with neighbors stored as ordered lists.

    Neighbors are iterated in the order given by the adjacency lists,
    and edges (i, j) with i < j in order of first appearance.
    """
    def __init__(self, adjacency: Sequence[Sequence[int]]):
        num_nodes = len(adjacency)
        self._adjacency = []
        self._neighbor_sets = []
        self._edges = []
        for i, neighbors in enumerate(adjacency):
            for j in neighbors:
                if not _is_index(j, num_nodes):
                    raise UnknownNode(j)
            neighbors = [int(j) for j in neighbors]
            for k, j in enumerate(neighbors):
                if j == i:
                    raise InvalidEdge(i, j)
                if j in neighbors[k+1:]:
                    raise DuplicateEdge(i, j)
                if i not in adjacency[j]:
                    raise MissingEdge(j, i)
                if i < j:
                    self._edges.append((i, j))
            self._adjacency.append(neighbors)
            self._neighbor_sets.append(set(neighbors))

    @classmethod
    def from_edges(cls, order: int, edges: Sequence[tuple[int, int]]):
        """
        Construct a graph with 'order' nodes from a list of edges.
        Neighbor order follows the order of the edges.
        """
        if order < 0:
            raise ValueError(f"'order' cannot be negative, received {order}")
        adjacency = [[] for _ in range(order)]
        seen = set()
        for (s, t) in edges:
            for id in (s, t):
                if not _is_index(id, order):
                    raise UnknownNode(id)
            if s == t:
                raise InvalidEdge(s, t)
            key = (min(s, t), max(s, t))
            if key in seen:
                raise DuplicateEdge(s, t)
            seen.add(key)
            adjacency[s].append(t)
            adjacency[t].append(s)
        return cls(adjacency)

    @classmethod
    def from_matrix(cls, a):
        """
        Construct a graph from a symmetric adjacency matrix,
        given as dense numpy array or scipy sparse matrix.
        Any non-zero entry is interpreted as an edge.
        """
        m = sparse.csr_matrix(a)
        if m.shape[0] != m.shape[1]:
            raise ValueError(f'adjacency matrix must be square, received shape {m.shape}')
        num_nodes = m.shape[0]
        pattern = (m != 0).astype(int)
        pattern.eliminate_zeros()
        diag = np.flatnonzero(pattern.diagonal())
        if len(diag) > 0:
            raise InvalidEdge(int(diag[0]), int(diag[0]))
        asym = (pattern - pattern.T).tocoo()
        # positive entries: row lists column, but not vice versa
        mask = asym.data > 0
        if np.any(mask):
            rows = asym.row[mask]
            cols = asym.col[mask]
            k = np.argmin(rows * num_nodes + cols)
            raise MissingEdge(int(cols[k]), int(rows[k]))
        pattern.sort_indices()
        adjacency = [pattern.indices[pattern.indptr[i]:pattern.indptr[i+1]].tolist()
                     for i in range(num_nodes)]
        return cls(adjacency)

    def order(self) -> int:
        return len(self._adjacency)

    def size(self) -> int:
        return len(self._edges)

    def nodes(self) -> list[int]:
        return list(range(len(self._adjacency)))

    def edges(self) -> list[tuple[int, int]]:
        return list(self._edges)

    def has_node(self, id) -> bool:
        return _is_index(id, len(self._adjacency))

    def _check_node(self, id):
        if not self.has_node(id):
            raise UnknownNode(id)

    def neighbors(self, id) -> list[int]:
        self._check_node(id)
        return list(self._adjacency[id])

    def degree(self, id) -> int:
        self._check_node(id)
        return len(self._adjacency[id])

    def has_edge(self, source, target) -> bool:
        self._check_node(source)
        self._check_node(target)
        return target in self._neighbor_sets[source]
