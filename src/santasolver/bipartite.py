from santasolver.graph import Graph


class BipartiteGraph:
    """
    ATTRIBUTES:
    keys: list of the vertex keys of the source graph, the index of a key is its left vertex
    offset: number of keys, right vertex of key i is i + offset
    left: set of left vertices (int) not matched yet
    right: set of right vertices (int) not matched yet
    adjacency: dict of vertex (int) -> list of vertices it can be traversed to.
               An entry l -> r is an unmatched edge, once matched it is stored as r -> l.
    """

    def __init__(self, keys: list, adjacency: dict):
        self.keys = keys
        self.offset = len(keys)
        self.left = set(range(self.offset))
        self.right = set(range(self.offset, 2 * self.offset))
        self.adjacency = adjacency

    def is_right(self, vertex: int) -> bool:
        return vertex >= self.offset

    def key_of(self, vertex: int):
        return self.keys[vertex - self.offset] if self.is_right(vertex) else self.keys[vertex]

    def num_edges(self) -> int:
        return sum(map(len, self.adjacency.values()))


def project(g: Graph, forbid_self_assignment: bool = False) -> BipartiteGraph:
    # We construct the sets L and R of the bipartite graph from the vertices of g.
    # Both sides hold every vertex, so the keys are replaced by their index:
    # vertices in L keep the index and vertices in R get the index plus an offset.
    keys = g.get_vertices()
    index = {key: i for i, key in enumerate(keys)}
    offset = len(keys)
    adjacency = dict()
    for i, key in enumerate(keys):
        # For every edge (a, b) add the edge (l_a, r_b)
        adjacency[i] = [
            index[successor] + offset
            for successor in g.get_successors(key)
            if not (forbid_self_assignment and successor == key)
        ]
        # R vertices only get entries once a matched edge is flipped onto them
        adjacency[i + offset] = list()
    return BipartiteGraph(keys, adjacency)
