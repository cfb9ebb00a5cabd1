from santasolver.errors import MatchingInvariantError

# keys of a Graph are never None, so None cannot be confused with a real receiver
NO_MAPPING = None
NO_MAPPING_TEXT = "No mapping found!"


class Solution:
    """
    ATTRIBUTES:
    assignment: dict of giver key -> receiver key, or NO_MAPPING if the giver got no receiver
    solved: True iff every giver got a receiver
    """

    def __init__(self, assignment: dict):
        self.assignment = assignment
        self.solved = all(receiver is not NO_MAPPING for receiver in assignment.values())

    @classmethod
    def from_bipartite(cls, bip) -> "Solution":
        """
        Reads the matching from the flipped edges r -> l of a bipartite graph after Hopcroft-Karp.
        raises MatchingInvariantError if a vertex ends up in more than one matched edge
        """
        claimed = dict()  # left vertex -> receiver key
        for r in range(bip.offset, 2 * bip.offset):
            matched = bip.adjacency[r]
            if len(matched) > 1:
                raise MatchingInvariantError("%r is claimed by %d givers" % (bip.key_of(r), len(matched)))
            if len(matched) == 0:
                continue
            li = matched[0]
            if li in claimed:
                raise MatchingInvariantError("%r got more than one receiver" % (bip.key_of(li),))
            claimed[li] = bip.key_of(r)
        return cls({key: claimed.get(li, NO_MAPPING) for li, key in enumerate(bip.keys)})

    @property
    def size(self) -> int:
        return sum(1 for receiver in self.assignment.values() if receiver is not NO_MAPPING)

    def matched_pairs(self) -> list:
        return [(giver, receiver) for giver, receiver in self.assignment.items() if receiver is not NO_MAPPING]

    def unassigned(self) -> list:
        return [giver for giver, receiver in self.assignment.items() if receiver is NO_MAPPING]

    def __repr__(self):
        return "Solution(solved=%s, assignment=%r)" % (self.solved, self.assignment)
