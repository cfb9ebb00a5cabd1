import time

from santasolver.bipartite import project
from santasolver.graph import Graph
from santasolver.hopcroft_karp import match
from santasolver.solution import Solution


class SantaSelector:
    def __init__(
        self,
        forbid_self_assignment=False,
        print_stats=False,
        **kwargs,
    ):
        """This is the class container for the matching runs of one batch
        method: run"""
        self.forbid_self_assignment = forbid_self_assignment
        self.print_stats = print_stats
        # counters over all runs, to get this information in the results
        self.runs = 0
        self.unsolved = 0
        self.phases = 0
        self.augmentations = 0
        self.last_duration = 0.0
        if self.print_stats:
            print("# init: forbid_self_assignment: %d" % forbid_self_assignment)

    def run(self, g: Graph) -> Solution:
        start_time = time.time()
        bip = project(g, self.forbid_self_assignment)
        solution, phases = match(bip)
        self.last_duration = time.time() - start_time

        self.runs += 1
        self.phases += phases
        self.augmentations += solution.size
        if not solution.solved:
            self.unsolved += 1
        if self.print_stats:
            print(
                "# vertices: %d, edges: %d, phases: %d, matched: %d, solved: %d, after %s sec"
                % (len(bip.keys), bip.num_edges(), phases, solution.size, solution.solved, self.last_duration)
            )
        return solution
