from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import maximum_bipartite_matching
import numpy as np

from santasolver.graph import Graph


def get_csr_biadjacency(g: Graph, forbid_self_assignment: bool = False) -> "csr_matrix":
    """
    Create the bipartite graph of g as sparse biadjacency csr_matrix.
    Input: "g", rows are the givers and columns the receivers, both in vertex order
    Output: compressed sparse matrix from scipi.sparse package
    """
    keys = g.get_vertices()
    index = {key: i for i, key in enumerate(keys)}
    edges = np.array(
        [
            (index[key], index[successor])
            for key in keys
            for successor in g.get_successors(key)
            if not (forbid_self_assignment and successor == key)
        ],
        dtype=np.intc,
    ).reshape((-1, 2))
    data = np.ones(len(edges), dtype=bool)
    return csr_matrix((data, (edges[:, 0], edges[:, 1])), shape=(len(keys), len(keys)), dtype=bool)


def maximum_matching_size(g: Graph, forbid_self_assignment: bool = False) -> int:
    """
    Size of a maximum matching of the bipartite graph of g, computed by scipy.
    Used to check the result of Hopcroft-Karp.
    """
    if g.edge_count() == 0:
        return 0
    biadjacency = get_csr_biadjacency(g, forbid_self_assignment)
    if biadjacency.nnz == 0:
        return 0
    matching = maximum_bipartite_matching(biadjacency, perm_type="column")
    return int(np.count_nonzero(matching >= 0))
