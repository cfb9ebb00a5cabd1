import unittest
from santasolver.errors import AlreadyExistsError, EdgeNotFoundError, VertexNotFoundError
from santasolver.graph import Edge, Graph, Vertex


class TestGraph(unittest.TestCase):
    def setUp(self):
        self.graph = Graph()
        self.graph.add_vertices(["a", "b", "c", "d"])
        self.graph.add_edge("a", "b", 3)
        self.graph.add_edge("a", "c")
        self.graph.add_edge("b", "c", 1)
        self.graph.add_edge("c", "a")

    def test_add_vertex_twice(self):
        with self.assertRaises(AlreadyExistsError):
            self.graph.add_vertex("a")
        self.assertEqual(self.graph.vertex_count(), 4)

    def test_none_is_no_vertex(self):
        with self.assertRaises(ValueError):
            self.graph.add_vertex(None)

    def test_add_edge_weights(self):
        self.graph.add_edge("d", "a", 0)
        self.assertEqual(self.graph.get_weight("d", "a"), 0)
        with self.assertRaises(ValueError):
            self.graph.add_edge("d", "b", -1)
        self.assertFalse(self.graph.has_edge("d", "b"))

    def test_add_edge_non_integer_weight(self):
        for weight in [2.7, 2.0, "2", True, None]:
            with self.assertRaises(ValueError):
                self.graph.add_edge("d", "b", weight)
        self.assertFalse(self.graph.has_edge("d", "b"))
        with self.assertRaises(ValueError):
            Edge(Vertex("a"), Vertex("b"), 0.5)

    def test_add_edge_twice_any_weight(self):
        with self.assertRaises(AlreadyExistsError):
            self.graph.add_edge("a", "b", 3)
        with self.assertRaises(AlreadyExistsError):
            self.graph.add_edge("a", "b", 7)
        self.assertEqual(self.graph.get_weight("a", "b"), 3)

    def test_add_edge_unknown_vertex(self):
        with self.assertRaises(VertexNotFoundError):
            self.graph.add_edge("a", "x")
        with self.assertRaises(VertexNotFoundError):
            self.graph.add_edge("x", "a")
        # the not-found errors are KeyErrors as well
        with self.assertRaises(KeyError):
            self.graph.get_successors("x")

    def test_add_edges(self):
        self.graph.add_edges("d", ["a", "b"], [1, 2])
        self.assertEqual(self.graph.get_successors("d"), ["a", "b"])
        self.assertEqual(self.graph.get_weight("d", "b"), 2)
        with self.assertRaises(ValueError):
            self.graph.add_edges("d", ["c"], [1, 2])
        self.assertFalse(self.graph.has_edge("d", "c"))

    def test_connect(self):
        self.graph.connect("b", "d", 4)
        self.assertTrue(self.graph.has_edge("b", "d"))
        self.assertTrue(self.graph.has_edge("d", "b"))
        self.graph.connect_all("d", ["a", "c"])
        self.assertEqual(self.graph.get_degree("d"), 3)
        self.assertEqual(sorted(self.graph.get_predecessors("d")), ["a", "b", "c"])
        with self.assertRaises(ValueError):
            self.graph.connect_all("a", ["d"], [])

    def test_remove_vertex(self):
        self.graph.remove_vertex("c")
        self.assertFalse(self.graph.has_vertex("c"))
        self.assertEqual(self.graph.get_successors("a"), ["b"])
        self.assertEqual(self.graph.get_successors("b"), [])
        self.assertEqual(self.graph.edge_count(), 1)
        with self.assertRaises(VertexNotFoundError):
            self.graph.remove_vertex("c")

    def test_remove_edge_is_idempotent(self):
        self.graph.remove_edge("a", "b")
        self.graph.remove_edge("a", "b")
        self.graph.remove_edge("x", "y")
        self.assertFalse(self.graph.has_edge("a", "b"))
        self.graph.disconnect("a", "c")
        self.assertFalse(self.graph.has_edge("a", "c"))
        self.assertFalse(self.graph.has_edge("c", "a"))
        self.assertEqual(self.graph.edge_count(), 1)

    def test_queries(self):
        self.assertEqual(self.graph.get_vertices(), ["a", "b", "c", "d"])
        self.assertEqual(self.graph.get_successors("a"), ["b", "c"])
        self.assertEqual(sorted(self.graph.get_predecessors("c")), ["a", "b"])
        self.assertEqual(self.graph.get_predecessors("d"), [])
        self.assertEqual(self.graph.get_degree("a"), 2)
        self.assertEqual(self.graph.get_degree("d"), 0)
        self.assertEqual(self.graph.edge_count(), 4)
        self.assertEqual(self.graph.vertex_count(), 4)
        self.assertFalse(self.graph.is_empty())
        self.assertTrue(self.graph.has_edge("c", "a"))
        self.assertFalse(self.graph.has_edge("a", "d"))
        with self.assertRaises(VertexNotFoundError):
            self.graph.has_edge("a", "x")

    def test_get_weight_without_edge(self):
        with self.assertRaises(EdgeNotFoundError):
            self.graph.get_weight("b", "a")
        with self.assertRaises(VertexNotFoundError):
            self.graph.get_weight("x", "a")

    def test_clear(self):
        self.graph.clear()
        self.assertTrue(self.graph.is_empty())
        self.assertEqual(self.graph.edge_count(), 0)
        self.graph.add_vertex("a")
        self.assertEqual(self.graph.vertex_count(), 1)

    def test_copy(self):
        copy = self.graph.copy()
        self.assertEqual(copy, self.graph)
        for v in self.graph.get_vertices():
            self.assertEqual(copy.get_successors(v), self.graph.get_successors(v))
            self.assertEqual(copy.get_predecessors(v), self.graph.get_predecessors(v))
            self.assertEqual(copy.get_degree(v), self.graph.get_degree(v))
        self.assertEqual(copy.edge_count(), self.graph.edge_count())

        copy.add_edge("d", "a")
        copy.remove_edge("a", "b")
        copy.remove_vertex("c")
        copy.add_vertex("e")
        self.assertNotEqual(copy, self.graph)
        self.assertTrue(self.graph.has_edge("a", "b"))
        self.assertEqual(self.graph.get_successors("d"), [])
        self.assertTrue(self.graph.has_vertex("c"))
        self.assertFalse(self.graph.has_vertex("e"))
        self.assertEqual(self.graph.edge_count(), 4)


class TestVertexEdge(unittest.TestCase):
    def test_vertex_equality(self):
        self.assertEqual(Vertex("a"), Vertex("a"))
        self.assertNotEqual(Vertex("a"), Vertex("b"))
        self.assertEqual(len({Vertex(1), Vertex(1), Vertex(2)}), 2)
        with self.assertRaises(AttributeError):
            Vertex("a").value = "b"

    def test_edge_equality(self):
        a, b = Vertex("a"), Vertex("b")
        self.assertEqual(Edge(a, b, 1), Edge(Vertex("a"), Vertex("b"), 1))
        self.assertNotEqual(Edge(a, b, 1), Edge(a, b, 2))
        self.assertTrue(Edge(a, b, 1).has_same_vertices(Edge(a, b, 2)))
        self.assertFalse(Edge(a, b).has_same_vertices(Edge(b, a)))
        with self.assertRaises(ValueError):
            Edge(a, b, -1)


if __name__ == "__main__":
    unittest.main()
