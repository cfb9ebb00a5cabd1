class GraphError(Exception):
    pass


class VertexNotFoundError(GraphError, KeyError):
    pass


class EdgeNotFoundError(GraphError, KeyError):
    pass


class AlreadyExistsError(GraphError, ValueError):
    pass


# raised when the matcher leaves a right vertex with more than one matched edge
class MatchingInvariantError(GraphError, RuntimeError):
    pass
