import unittest
import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import connected_components
import pygamma as pg


class TestTraversal(unittest.TestCase):

    def test_depth_first_triangle(self):

        graph = pg.IndexGraph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        steps = list(pg.depth_first(graph, 0))
        self.assertEqual(steps, [pg.Step(0, 1, False),
                                 pg.Step(1, 2, False),
                                 pg.Step(2, 0, True)])

    def test_breadth_first_triangle(self):

        graph = pg.HashGraph([0, 1, 2], [(0, 1, 'a'), (1, 2, 'b'), (2, 0, 'c')])
        steps = list(pg.breadth_first(graph, 0))
        self.assertEqual(steps, [pg.Step(0, 1, False),
                                 pg.Step(0, 2, False),
                                 pg.Step(1, 2, True)])

    def test_square(self):

        graph = pg.IndexGraph([[1, 3], [0, 2], [1, 3], [2, 0]])
        self.assertEqual(list(pg.DepthFirst(graph, 0)),
                         [(0, 1, False), (1, 2, False), (2, 3, False), (3, 0, True)])
        self.assertEqual(list(pg.BreadthFirst(graph, 0)),
                         [(0, 1, False), (0, 3, False), (1, 2, False), (3, 2, True)])

    def test_star(self):

        graph = pg.IndexGraph([[1], [0, 2, 3], [1], [1]])
        self.assertEqual(list(pg.depth_first(graph, 0)),
                         [(0, 1, False), (1, 2, False), (1, 3, False)])
        self.assertEqual(list(pg.depth_first(graph, 2)),
                         [(2, 1, False), (1, 0, False), (1, 3, False)])

    def test_trivial(self):

        # single node without edges
        graph = pg.IndexGraph([[]])
        self.assertEqual(list(pg.depth_first(graph, 0)), [])
        self.assertEqual(list(pg.breadth_first(graph, 0)), [])

        # unreachable nodes are never visited
        graph = pg.IndexGraph.from_edges(4, [(0, 1), (2, 3)])
        self.assertEqual(list(pg.depth_first(graph, 2)), [(2, 3, False)])

    def test_unknown_root(self):

        graph = pg.IndexGraph([[1], [0]])
        # failure is reported on construction, before any step is requested
        with self.assertRaises(pg.UnknownNode):
            pg.depth_first(graph, 2)
        with self.assertRaises(pg.UnknownNode):
            pg.breadth_first(graph, 'a')

    def test_lazy(self):

        graph = pg.IndexGraph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        traversal = pg.depth_first(graph, 0)
        self.assertEqual(next(traversal), pg.Step(0, 1, False))
        self.assertEqual(list(traversal), [(1, 2, False), (2, 3, False), (3, 0, True)])
        # traversal is not restartable
        self.assertEqual(list(traversal), [])
        # source graph is unaffected
        self.assertEqual(graph.size(), 4)

    def test_to_adjacency(self):

        graph = pg.IndexGraph([[1, 3], [0, 2], [1, 3], [2, 0]])
        adjacency = pg.to_adjacency(pg.depth_first(graph, 0))
        self.assertEqual(adjacency, {0: [1, 3], 1: [0, 2], 2: [1, 3], 3: [2, 0]})
        self.assertEqual(pg.to_adjacency([]), {})
        with self.assertRaises(pg.UnknownNode):
            pg.to_adjacency([pg.Step(0, 1, False), pg.Step(2, 3, False)])
        with self.assertRaises(pg.UnknownNode):
            pg.to_adjacency([pg.Step(0, 1, False), pg.Step(1, 2, True)])

    def test_traversal_table(self):

        graph = pg.IndexGraph([[1, 3], [0, 2], [1, 3], [2, 0]])
        nodes, edges = pg.traversal_table(pg.breadth_first(graph, 0))
        self.assertEqual(nodes, [0, 1, 3, 2])
        self.assertEqual(edges, [(0, 1), (0, 3), (1, 2), (3, 2)])

    def test_random_graph(self):

        rng = np.random.default_rng()

        n = int(rng.integers(1, 40))
        a = (rng.uniform(size=(n, n)) < 0.1).astype(int)
        a = np.triu(a, 1)
        a = a + a.T
        graph = pg.IndexGraph.from_matrix(a)
        _, labels = connected_components(sparse.csr_matrix(a), directed=False)

        for traverse in (pg.depth_first, pg.breadth_first):
            for root in range(n):
                reachable = set(np.flatnonzero(labels == labels[root]))
                component_edges = {frozenset(e) for e in graph.edges() if e[0] in reachable}
                steps = list(traverse(graph, root))
                # each reachable node except the root is visited once via a tree edge
                targets = [step.target for step in steps if not step.cut]
                self.assertEqual(len(targets), len(reachable) - 1)
                self.assertEqual(set(targets) | {root}, reachable)
                # every edge of the component is reported exactly once
                self.assertEqual(len(steps), len(component_edges))
                self.assertEqual({frozenset((s.source, s.target)) for s in steps}, component_edges)
                for step in steps:
                    self.assertTrue(graph.has_edge(step.source, step.target))
                # determinism
                self.assertEqual(list(traverse(graph, root)), steps)


if __name__ == '__main__':
    unittest.main()
