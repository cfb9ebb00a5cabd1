from santasolver.errors import (
    AlreadyExistsError,
    EdgeNotFoundError,
    GraphError,
    MatchingInvariantError,
    VertexNotFoundError,
)
from santasolver.graph import Edge, Graph, Vertex
from santasolver.hopcroft_karp import find_maximum_matching
from santasolver.selector import SantaSelector
from santasolver.solution import NO_MAPPING, Solution
