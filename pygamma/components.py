from collections.abc import Iterator
from .graph import Graph
from .hash_graph import HashGraph
from .traversal import depth_first

__all__ = ['components']


def components(graph: Graph) -> Iterator[HashGraph]:
    """
    Lazily generate the connected components of a graph.

    Each component is the subgraph induced by the nodes reachable from
    the first node (in node order) not contained in a previous component,
    with nodes and edges in depth-first traversal order.
    """
    visited = set()
    for root in graph.nodes():
        if root in visited:
            continue
        steps = list(depth_first(graph, root))
        component = HashGraph.from_traversal(root, steps)
        visited.update(component.nodes())
        yield component
