"""
Maximum-cardinality matching in general graphs by Edmonds' blossom algorithm, see
https://en.wikipedia.org/wiki/Blossom_algorithm

The augmenting path search grows an alternating forest rooted at all exposed
nodes simultaneously, contracting odd cycles (blossoms) via a union-find
structure, following Z. Galil, "Efficient algorithms for finding maximum
matching in graphs", ACM Computing Surveys 18 (1986), and the
CardinalityMatching module of D. Eppstein's PADS library
(Python Algorithms and Data Structures).
"""

import logging
from collections.abc import Hashable, Sequence
from typing import NamedTuple, Optional, Union
from .graph import Graph
from .matching import Matching
from .greedy import greedy_matching
from .error import UnknownNode, InvalidMatching

__all__ = ['Blossom', 'BlossomMatching', 'maximum_matching']

logger = logging.getLogger(__name__)


class _UnionFind:
    """
    Disjoint sets of nodes with path compression and union by weight.
    Nodes are added lazily as singleton sets.
    """
    def __init__(self):
        self.parents = {}
        self.weights = {}

    def find(self, x):
        """
        Representative of the set containing 'x'.
        """
        if x not in self.parents:
            self.parents[x] = x
            self.weights[x] = 1
            return x
        path = [x]
        root = self.parents[x]
        while root != path[-1]:
            path.append(root)
            root = self.parents[root]
        for y in path:
            self.parents[y] = root
        return root

    def union(self, *objects):
        """
        Merge the sets containing 'objects', and return the new representative.
        """
        roots = list(dict.fromkeys(self.find(x) for x in objects))
        heaviest = max(roots, key=lambda r: self.weights[r])
        for r in roots:
            if r != heaviest:
                self.weights[heaviest] += self.weights[r]
                self.parents[r] = heaviest
        return heaviest


class Blossom(NamedTuple):
    """
    Record of a contracted odd cycle.

    'bridge' is the outer-outer edge which closed the cycle, 'apex' the
    representative of the nearest common ancestor of its endpoints (the base
    of the blossom), and 'cycle' the nodes around the cycle (union-find
    representatives and former inner nodes), starting at the apex, running
    through the bridge and returning to the apex.
    """
    apex: Hashable
    bridge: tuple
    cycle: list


# marker for an alternating path leading up to the root of its tree
_ROOT = object()


class _AlternatingForest:
    """
    Search structure of a single augmenting path search, discarded afterwards.

    Outer nodes lie at even distance from a root, inner nodes at odd distance.
    A contracted blossom is represented by the union-find leader of its nodes;
    the whole blossom counts as outer.
    """
    def __init__(self, graph: Graph, mates: dict):
        self.graph = graph
        # current matching, updated in-place on augmentation
        self.mates = mates
        self.leader = _UnionFind()
        # outer blossom leader -> inner tree parent (root maps to itself)
        self.outer = {}
        # inner node -> outer node across the non-matching tree edge
        self.inner = {}
        # outer nodes whose edges are still to be examined, in FIFO order
        self.unexplored = []
        # arena of blossoms contracted during this search
        self.blossoms = []
        # former inner node -> (arena index, side of the bridge it lies on)
        self.expansion = {}

    def search(self) -> bool:
        """
        Search for an augmenting path and augment the matching along it.
        Returns true if the matching was augmented.
        """
        for v in self.graph.nodes():
            if v not in self.mates:
                self.outer[v] = v
                self.unexplored.append(v)
        current = 0
        while current < len(self.unexplored):
            v = self.unexplored[current]
            current += 1
            for w in self.graph.neighbors(v):
                if self.leader.find(w) in self.outer:
                    # outer-outer edge: blossom or augmenting path
                    if self._outer_edge(v, w):
                        return True
                elif w not in self.inner:
                    # 'w' is unvisited and therefore matched, since
                    # every exposed node is a root; extend the tree
                    self.inner[w] = v
                    u = self.mates[w]
                    if self.leader.find(u) not in self.outer:
                        self.outer[u] = w
                        self.unexplored.append(u)
                # edges to inner nodes are skipped
        return False

    def _outer_edge(self, v, w) -> bool:
        """
        Handle an edge between two outer nodes. Walk up both trees in parallel
        until reaching a common ancestor (contract a blossom) or both roots
        (augment). Returns true if the matching was augmented.
        """
        if self.leader.find(v) == self.leader.find(w):
            # edge within a blossom
            return False
        path1, head1 = {}, v
        path2, head2 = {}, w
        while True:
            head1 = self._step(path1, head1)
            head2 = self._step(path2, head2)
            if head1 == head2:
                self._contract(v, w, head1)
                return False
            if self._is_root(head1) and self._is_root(head2):
                # distinct trees
                self._augment(v, w)
                return True
            if head1 in path2:
                self._contract(v, w, head1)
                return False
            if head2 in path1:
                self._contract(v, w, head2)
                return False

    def _is_root(self, head) -> bool:
        return self.leader.find(self.outer[head]) == head

    def _step(self, path: dict, head):
        """
        Move one outer level up the tree, recording the visited nodes in 'path'.
        """
        head = self.leader.find(head)
        parent = self.leader.find(self.outer[head])
        if parent == head:
            # reached root
            return head
        path[head] = parent
        path[parent] = self.leader.find(self.inner[parent])
        return path[parent]

    def _contract(self, v, w, apex):
        """
        Contract the cycle formed by the tree paths from 'v' and 'w' up to
        'apex' together with the edge (v, w) into a single outer blossom.
        """
        apex = self.leader.find(apex)
        index = len(self.blossoms)

        def find_side(x, side):
            path = [self.leader.find(x)]
            while path[-1] != apex:
                tnode = self.outer[path[-1]]
                path.append(tnode)
                self.expansion[tnode] = (index, side)
                # inner nodes of the cycle become outer
                self.unexplored.append(tnode)
                path.append(self.leader.find(self.inner[tnode]))
            return path

        path1 = find_side(v, 0)
        path2 = find_side(w, 1)
        blossom = Blossom(apex, (v, w), list(reversed(path1)) + path2)
        self.blossoms.append(blossom)
        self.leader.union(*path1)
        self.leader.union(*path2)
        # the contracted blossom inherits the tree parent of the apex
        self.outer[self.leader.find(apex)] = self.outer[apex]
        logger.debug('contracted blossom %d with apex %r over bridge (%r, %r), cycle length %d',
                     index, blossom.apex, v, w, len(blossom.cycle) - 1)

    def _bridge(self, tnode) -> tuple:
        """
        Bridge of the blossom containing the former inner node 'tnode',
        oriented such that its first node lies on the same side as 'tnode'.
        """
        index, side = self.expansion[tnode]
        x, y = self.blossoms[index].bridge
        return (x, y) if side == 0 else (y, x)

    def _alternating_path(self, start, goal=_ROOT) -> list:
        """
        Sequence of nodes on the even alternating path from the outer node
        'start' up to 'goal', which must be an inner node on the way to the
        root; by default the path leads up to the root of the tree.
        Blossoms are expanded by routing through their bridge.
        """
        path = []
        while True:
            while start in self.inner:
                # former inner node inside a blossom: go around the cycle
                # via the bridge, which preserves alternation
                x, y = self._bridge(start)
                sub = self._alternating_path(x, start)
                sub.reverse()
                path += sub
                start = y
            path.append(start)
            if start not in self.mates:
                # reached root
                return path
            tnode = self.mates[start]
            path.append(tnode)
            if tnode == goal:
                return path
            start = self.inner[tnode]

    def _alternate(self, v):
        """
        Flip the matching along the path from 'v' to its root,
        leaving 'v' unmatched.
        """
        path = self._alternating_path(v)
        path.reverse()
        for i in range(0, len(path) - 1, 2):
            self.mates[path[i]] = path[i + 1]
            self.mates[path[i + 1]] = path[i]

    def _augment(self, v, w):
        """
        Augment the matching along the path root(v) ... v - w ... root(w).
        """
        self._alternate(v)
        self._alternate(w)
        self.mates[v] = w
        self.mates[w] = v


class BlossomMatching:
    """
    Edmonds' blossom algorithm to find a maximum-cardinality matching
    of a general (not necessarily bipartite) graph, storing the
    temporary data for running the algorithm.
    """
    def __init__(self, graph: Graph):
        # store a reference to the graph
        self.graph = graph
        self.mates = {}
        self.num_augmentations = 0
        # blossoms contracted during the last run, across all search passes
        self.blossoms = []

    @property
    def num_blossoms(self) -> int:
        return len(self.blossoms)

    def _initial_mates(self, matching) -> dict:
        """
        Validate a starting matching against the graph.
        """
        if not isinstance(matching, Matching):
            matching = Matching(matching)
        for (s, t) in matching.edges():
            for id in (s, t):
                if not self.graph.has_node(id):
                    raise UnknownNode(id)
            if not self.graph.has_edge(s, t):
                raise InvalidMatching(s, t)
        return matching.mates()

    def _augment(self) -> bool:
        """
        Run one augmenting path search pass. Returns true if
        the matching cardinality was increased by one.
        """
        forest = _AlternatingForest(self.graph, self.mates)
        augmented = forest.search()
        self.blossoms += forest.blossoms
        return augmented

    def __call__(self, matching: Optional[Union[Matching, Sequence[tuple]]] = None) -> Matching:
        """
        Run the blossom algorithm, optionally starting from 'matching'
        (which is not modified), and return a maximum-cardinality matching.
        """
        # reset internal data
        self.mates = {} if matching is None else self._initial_mates(matching)
        self.num_augmentations = 0
        self.blossoms = []
        # each pass either augments or certifies maximality,
        # hence at most order/2 + 1 passes
        while self._augment():
            self.num_augmentations += 1
            logger.debug('augmentation %d, matching cardinality %d',
                         self.num_augmentations, len(self.mates) // 2)
        logger.debug('maximum matching of cardinality %d found after %d augmentations '
                     'and %d blossom contractions',
                     len(self.mates) // 2, self.num_augmentations, self.num_blossoms)
        return Matching.from_mates(self.mates, self.graph.nodes())


def maximum_matching(graph: Graph,
                     matching: Optional[Union[Matching, Sequence[tuple]]] = None,
                     warm_start: bool = False) -> Matching:
    """
    Find a maximum-cardinality matching of 'graph'.

    Args:
        graph: any graph representation
        matching: optional valid matching of 'graph' to start from
        warm_start: if no starting matching is given, start from
                    the greedy matching instead of the empty one

    Returns:
        Matching: a matching of maximum cardinality

    Raises:
        UnknownNode: if 'matching' references a node absent from the graph
        InvalidMatching: if 'matching' covers a node twice or pairs non-adjacent nodes
    """
    if matching is None and warm_start:
        matching = greedy_matching(graph)
    return BlossomMatching(graph)(matching)
