from santasolver.bipartite import BipartiteGraph, project
from santasolver.graph import Graph
from santasolver.solution import Solution

# Hopcroft-Karp on a bipartite graph (L, R, adjacency) where a single adjacency dict
# encodes the matching: an entry l -> r is an unmatched edge and may only be
# traversed from L to R, a matched edge is stored flipped as r -> l and may only be
# traversed from R back to L. So every traversal simply follows adjacency[vertex]
# and automatically alternates between unmatched and matched edges.
#
# Every phase consists of two steps:
# BFS: starting at the free vertices of L, put every vertex into the layer of its shortest
#      alternating path and remember its predecessors in the layer before. Stop at the
#      first layer that reaches a free vertex of R.
# Commit: starting at each of these free vertices of R, walk back through the predecessors
#         to a free vertex of L with a DFS. Every vertex on a committed path, and every vertex
#         the DFS got stuck at, is deleted for the rest of the phase, so the paths are vertex
#         disjoint and every vertex and edge is looked at only once per phase.
#         All edges on a committed path are flipped (matched <-> unmatched).
#
# The algorithm stops as soon as the BFS finds no free vertex of R. Free vertices left
# in L or R at that point just mean that no perfect matching exists.


class Layers:
    """
    Layered graph of one BFS phase, one entry per reached vertex.
    ATTRIBUTES:
    layer: dict of vertex -> layer of its shortest alternating path (0 for the free vertices of L)
    predecessors: dict of vertex -> vertices in the layer before with an edge to it
    endpoints: free vertices of R in the last layer, in the order they were reached
    """

    def __init__(self):
        self.layer = dict()
        self.predecessors = dict()
        self.endpoints = list()

    def is_root(self, vertex: int) -> bool:
        return self.layer[vertex] == 0

    def num_links(self) -> int:
        return sum(map(len, self.predecessors.values()))

    def __len__(self):
        return len(self.layer)


def hopcroft_karp_bfs(L: set, R: set, adjlist: dict) -> Layers:
    """
    L, R: the free vertices of both sides, not modified
    returns the layers up to the first one containing a free vertex of R
    """
    layers = Layers()
    # free vertices of L in index order so the result is reproducible
    queue = sorted(L)
    for li in queue:
        layers.layer[li] = 0
    l_to_r = True
    layer = 0

    while len(queue) != 0 and len(layers.endpoints) == 0:
        layer += 1
        next_queue = list()
        for vertex in queue:
            for next_vertex in adjlist[vertex]:
                next_layer = layers.layer.get(next_vertex)
                if next_layer is None:
                    layers.layer[next_vertex] = layer
                    layers.predecessors[next_vertex] = [vertex]
                    if l_to_r and next_vertex in R:
                        layers.endpoints.append(next_vertex)
                    else:
                        next_queue.append(next_vertex)
                elif next_layer == layer:
                    # another shortest path to next_vertex
                    layers.predecessors[next_vertex].append(vertex)
                # vertices of earlier layers, including the path back to the root, are skipped
        # stop at the first layer which reached a free vertex in R
        queue = next_queue
        l_to_r = not l_to_r

    return layers


def find_disjoint_path(layers: Layers, endpoint: int, deleted: set, position: dict):
    """
    DFS from endpoint back to a free vertex of L through vertices which are not deleted.
    position remembers per vertex how many predecessors were tried already.
    returns the path (endpoint first, root last) or None
    """
    path = [endpoint]
    while len(path) != 0:
        vertex = path[-1]
        if layers.is_root(vertex):
            return path
        predecessors = layers.predecessors[vertex]
        i = position.get(vertex, 0)
        while i < len(predecessors) and predecessors[i] in deleted:
            i += 1
        position[vertex] = i + 1
        if i < len(predecessors):
            path.append(predecessors[i])
        else:
            # no way back to a free vertex of L from here in this phase
            deleted.add(vertex)
            path.pop()
    return None


def commit_augmenting_paths(layers: Layers, L: set, R: set, adjlist: dict) -> int:
    """
    Flips the edges along vertex disjoint augmenting paths and removes their end vertices from L and R.
    returns the number of committed paths
    """
    deleted = set()
    position = dict()
    num_committed = 0
    for endpoint in layers.endpoints:
        path = find_disjoint_path(layers, endpoint, deleted, position)
        if path is None:
            continue
        R.remove(path[0])
        L.remove(path[-1])
        # The edge between two consecutive vertices is stored under the one closer to
        # the root since that is the direction it was traversed. Flip it.
        for towards_leaf, towards_root in zip(path, path[1:]):
            adjlist[towards_root].remove(towards_leaf)
            adjlist[towards_leaf].append(towards_root)
        deleted.update(path)
        num_committed += 1
    return num_committed


def hopcroft_karp(L: set, R: set, adjlist: dict) -> (dict, int):
    """
    L, R: free vertices of the bipartite graph, matched vertices are removed from both sets
    adjlist: see above, modified in place to hold the maximum matching as flipped edges r -> l
    returns adjlist and the number of phases
    """
    phases = 0
    while True:
        layers = hopcroft_karp_bfs(L, R, adjlist)
        if len(layers.endpoints) == 0:
            break
        phases += 1
        commit_augmenting_paths(layers, L, R, adjlist)
    return adjlist, phases


def match(bip: BipartiteGraph) -> (Solution, int):
    _, phases = hopcroft_karp(bip.left, bip.right, bip.adjacency)
    return Solution.from_bipartite(bip), phases


def find_maximum_matching(g: Graph, forbid_self_assignment: bool = False) -> Solution:
    """
    Creates a bipartite graph of g with L and R both being the vertices of g and
    runs Hopcroft-Karp on it.
    Self-loops in g allow a vertex to be assigned to itself unless forbid_self_assignment is set.
    """
    solution, _ = match(project(g, forbid_self_assignment))
    return solution
