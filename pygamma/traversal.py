"""
Depth-first and breadth-first traversals, produced lazily as sequences of steps.
"""

from collections import deque
from collections.abc import Hashable, Iterable
from typing import NamedTuple
from .graph import Graph
from .error import UnknownNode

__all__ = ['Step', 'DepthFirst', 'BreadthFirst', 'depth_first', 'breadth_first',
           'to_adjacency', 'traversal_table']


class Step(NamedTuple):
    """
    Single traversal step along the edge (source, target).
    'cut' is set if the target had already been visited,
    i.e., the edge closes a cycle.
    """
    source: Hashable
    target: Hashable
    cut: bool


class _Traversal:
    """
    Common state of a traversal: frontier of candidate edges,
    visited nodes and edges already reported.
    """
    def __init__(self, graph: Graph, root):
        if not graph.has_node(root):
            raise UnknownNode(root)
        self.graph = graph
        self.root = root
        self.visited = {root}
        self.reported = set()
        self.frontier = deque()
        self._expand(root)

    def _push(self, candidates: list):
        raise NotImplementedError

    def _pop(self) -> tuple:
        raise NotImplementedError

    def _expand(self, node):
        """
        Add the edges leaving 'node' to the frontier,
        except for edges already reported.
        """
        self._push([(node, neighbor) for neighbor in self.graph.neighbors(node)
                    if frozenset((node, neighbor)) not in self.reported])

    def __iter__(self):
        return self

    def __next__(self) -> Step:
        while self.frontier:
            source, target = self._pop()
            edge = frozenset((source, target))
            if edge in self.reported:
                # reverse direction of an edge which closed a cycle
                continue
            self.reported.add(edge)
            if target in self.visited:
                return Step(source, target, True)
            self.visited.add(target)
            self._expand(target)
            return Step(source, target, False)
        raise StopIteration


class DepthFirst(_Traversal):
    """
    Depth-first traversal from 'root' as an iterator over steps.
    Neighbors are explored in the order reported by the graph.
    """
    def _push(self, candidates: list):
        # first neighbor on top of the stack
        self.frontier.extend(reversed(candidates))

    def _pop(self) -> tuple:
        return self.frontier.pop()


class BreadthFirst(_Traversal):
    """
    Breadth-first traversal from 'root' as an iterator over steps.
    """
    def _push(self, candidates: list):
        self.frontier.extend(candidates)

    def _pop(self) -> tuple:
        return self.frontier.popleft()


def depth_first(graph: Graph, root) -> DepthFirst:
    """
    Depth-first traversal of 'graph' starting at 'root'.
    Raises UnknownNode immediately if 'root' is not a node of the graph.
    """
    return DepthFirst(graph, root)


def breadth_first(graph: Graph, root) -> BreadthFirst:
    """
    Breadth-first traversal of 'graph' starting at 'root'.
    Raises UnknownNode immediately if 'root' is not a node of the graph.
    """
    return BreadthFirst(graph, root)


def to_adjacency(steps: Iterable[Step]) -> dict:
    """
    Reconstruct the adjacency mapping of the subgraph explored by a traversal.
    """
    adjacency = {}
    for (source, target, cut) in steps:
        if not adjacency:
            adjacency[source] = []
        if source not in adjacency:
            raise UnknownNode(source)
        if cut:
            if target not in adjacency:
                raise UnknownNode(target)
        else:
            adjacency[target] = []
        adjacency[source].append(target)
        adjacency[target].append(source)
    return adjacency


def traversal_table(steps: Iterable[Step]) -> tuple[list, list]:
    """
    Nodes in visitation order and traversed edges of a traversal.
    """
    nodes = []
    edges = []
    for (source, target, cut) in steps:
        if not nodes:
            nodes.append(source)
        if not cut:
            nodes.append(target)
        edges.append((source, target))
    return nodes, edges
