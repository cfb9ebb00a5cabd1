from numbers import Integral

from santasolver.errors import AlreadyExistsError, EdgeNotFoundError, VertexNotFoundError


class Vertex:
    """Immutable wrapper around a hashable key. Two vertices are equal iff their keys are."""

    __slots__ = ("_value",)

    def __init__(self, value):
        if value is None:
            raise ValueError("Vertex cannot store None")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Vertex is immutable")

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return "Vertex(%r)" % (self._value,)


class Edge:
    """
    Directed, weighted connection between two vertices.
    Equality compares start, end and weight; has_same_vertices ignores the weight.
    """

    __slots__ = ("_start", "_end", "_weight")

    def __init__(self, start: Vertex, end: Vertex, weight: int = 0):
        if start is None or end is None:
            raise ValueError("Edge endpoints cannot be None")
        if isinstance(weight, bool) or not isinstance(weight, Integral):
            raise ValueError("Weight is not an integer: %r" % (weight,))
        if weight < 0:
            raise ValueError("Weight is negative: %s" % weight)
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_weight", int(weight))

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    @property
    def start(self) -> Vertex:
        return self._start

    @property
    def end(self) -> Vertex:
        return self._end

    @property
    def weight(self) -> int:
        return self._weight

    def has_same_vertices(self, other: "Edge") -> bool:
        return self._start == other._start and self._end == other._end

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.has_same_vertices(other) and self._weight == other._weight

    def __hash__(self):
        return hash((self._start, self._end, self._weight))

    def __repr__(self):
        return "Edge(start=%r, end=%r, weight=%d)" % (self._start.value, self._end.value, self._weight)


class Graph:
    """
    ATTRIBUTES:
    adj_map: dict of Vertex -> outgoing Edges, keyed by their end Vertex (one edge per ordered pair of vertices)

    There is no reverse index, so get_predecessors and edge_count scan every edge set.
    """

    def __init__(self):
        self.adj_map = dict()

    def _vertex(self, key, role: str = "Vertex") -> Vertex:
        vertex = Vertex(key)
        if vertex not in self.adj_map:
            raise VertexNotFoundError("%s %r is not part of the graph" % (role, key))
        return vertex

    def add_vertex(self, key):
        vertex = Vertex(key)
        if vertex in self.adj_map:
            raise AlreadyExistsError("Vertex %r already exists in the graph" % (key,))
        self.adj_map[vertex] = dict()

    def add_vertices(self, keys):
        for key in keys:
            self.add_vertex(key)

    def add_edge(self, start, end, weight: int = 0):
        """
        adds a directed edge start -> end
        raises: VertexNotFoundError if start or end is not a vertex
                AlreadyExistsError if an edge start -> end exists, whatever its weight
                ValueError if the weight is not a non-negative integer
        """
        start_vertex = self._vertex(start, "Start vertex")
        end_vertex = self._vertex(end, "End vertex")
        edge = Edge(start_vertex, end_vertex, weight)
        if end_vertex in self.adj_map[start_vertex]:
            raise AlreadyExistsError("Edge %r -> %r already exists in the graph" % (start, end))
        self.adj_map[start_vertex][end_vertex] = edge

    def add_edges(self, start, ends: list, weights: list = None):
        if weights is None:
            weights = [0] * len(ends)
        if len(weights) != len(ends):
            raise ValueError("Got %d weights for %d end vertices" % (len(weights), len(ends)))
        for end, weight in zip(ends, weights):
            self.add_edge(start, end, weight)

    def connect(self, start, end, weight: int = 0):
        self.add_edge(start, end, weight)
        self.add_edge(end, start, weight)

    def connect_all(self, start, ends: list, weights: list = None):
        if weights is None:
            weights = [0] * len(ends)
        if len(weights) != len(ends):
            raise ValueError("Got %d weights for %d end vertices" % (len(weights), len(ends)))
        for end, weight in zip(ends, weights):
            self.connect(start, end, weight)

    def remove_vertex(self, key):
        """removes the vertex together with all of its outgoing and incoming edges"""
        vertex = self._vertex(key)
        del self.adj_map[vertex]
        for edges in self.adj_map.values():
            edges.pop(vertex, None)

    def remove_edge(self, start, end):
        start_vertex = Vertex(start)
        if start_vertex in self.adj_map:
            self.adj_map[start_vertex].pop(Vertex(end), None)

    def disconnect(self, start, end):
        self.remove_edge(start, end)
        self.remove_edge(end, start)

    def get_vertices(self) -> list:
        # insertion order, the projector relies on it for reproducible matchings
        return [vertex.value for vertex in self.adj_map]

    def get_successors(self, key) -> list:
        return [end.value for end in self.adj_map[self._vertex(key)]]

    # CAUTION: scans all edges
    def get_predecessors(self, key) -> list:
        vertex = self._vertex(key)
        return [start.value for start, edges in self.adj_map.items() if vertex in edges]

    def get_weight(self, start, end) -> int:
        start_vertex = self._vertex(start, "Start vertex")
        edge = self.adj_map[start_vertex].get(Vertex(end))
        if edge is None:
            raise EdgeNotFoundError("No edge %r -> %r in the graph" % (start, end))
        return edge.weight

    def get_degree(self, key) -> int:
        return len(self.adj_map[self._vertex(key)])

    def has_vertex(self, key) -> bool:
        return Vertex(key) in self.adj_map

    def has_edge(self, start, end) -> bool:
        start_vertex = self._vertex(start, "Start vertex")
        end_vertex = self._vertex(end, "End vertex")
        return end_vertex in self.adj_map[start_vertex]

    def is_empty(self) -> bool:
        return len(self.adj_map) == 0

    def vertex_count(self) -> int:
        return len(self.adj_map)

    def edge_count(self) -> int:
        return sum(map(len, self.adj_map.values()))

    def clear(self):
        self.adj_map = dict()

    def copy(self) -> "Graph":
        # vertices and edges are immutable, only the per-vertex edge maps need copying
        new_g = Graph()
        new_g.adj_map = {vertex: edges.copy() for vertex, edges in self.adj_map.items()}
        return new_g

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self.adj_map == other.adj_map

    __hash__ = None

    def __repr__(self):
        vertices = ", ".join(
            "%r -> {%s}" % (vertex.value, ", ".join(repr(end.value) for end in edges))
            for vertex, edges in self.adj_map.items()
        )
        return "Graph[%s]" % vertices
