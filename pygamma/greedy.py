from .graph import Graph
from .matching import Matching

__all__ = ['greedy_matching']


def greedy_matching(graph: Graph) -> Matching:
    """
    Find a maximal (not necessarily maximum) matching by a single pass over
    the edges in graph order, selecting each edge whose endpoints are both
    still unmatched.
    """
    matched = set()
    pairs = []
    for (s, t) in graph.edges():
        if s in matched or t in matched:
            continue
        matched.add(s)
        matched.add(t)
        pairs.append((s, t))
    return Matching(pairs)
