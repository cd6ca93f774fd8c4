"""
Abstract interface shared by all graph representations.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
import numpy as np

__all__ = ['Graph']


class Graph(ABC):
    """
    Undirected simple graph, read-only after construction.

    Nodes are identified by hashable values. Each undirected edge is
    stored symmetrically, i.e., if 'b' is a neighbor of 'a', then 'a'
    is a neighbor of 'b'. Iteration order of nodes, neighbors and edges
    is fixed at construction time.
    """

    def is_empty(self) -> bool:
        """
        Whether the graph has no nodes.
        """
        return self.order() == 0

    @abstractmethod
    def order(self) -> int:
        """
        Number of nodes.
        """

    @abstractmethod
    def size(self) -> int:
        """
        Number of (undirected) edges.
        """

    @abstractmethod
    def nodes(self) -> Sequence[Hashable]:
        """
        Node identifiers in construction order.
        """

    @abstractmethod
    def edges(self) -> Sequence[tuple]:
        """
        Edges as (source, target) pairs, each undirected edge reported once.
        """

    @abstractmethod
    def has_node(self, id) -> bool:
        """
        Whether 'id' is a node of the graph.
        """

    @abstractmethod
    def neighbors(self, id) -> Sequence[Hashable]:
        """
        Nodes adjacent to 'id'; raises UnknownNode if 'id' is absent.
        """

    def degree(self, id) -> int:
        """
        Number of neighbors of 'id'; raises UnknownNode if 'id' is absent.
        """
        return len(self.neighbors(id))

    @abstractmethod
    def has_edge(self, source, target) -> bool:
        """
        Whether 'source' and 'target' are adjacent (symmetric);
        raises UnknownNode if either endpoint is absent.
        """

    def adjacency_matrix(self) -> np.ndarray:
        """
        Dense 0/1 adjacency matrix, rows and columns in node order.
        """
        nodes = self.nodes()
        index = {id: i for i, id in enumerate(nodes)}
        a = np.zeros((len(nodes), len(nodes)), dtype=int)
        for (s, t) in self.edges():
            a[index[s], index[t]] = 1
            a[index[t], index[s]] = 1
        return a

    def __repr__(self):
        return f'{self.__class__.__name__}(order={self.order()}, size={self.size()})'
