import argparse
import sys
import time

from santasolver.crosscheck import maximum_matching_size
from santasolver.generator import generate_full_graph, generate_random_graph
from santasolver.read_configurations import read_configurations, read_configurations_file, to_graph
from santasolver.selector import SantaSelector
from santasolver.write_results import write_solutions, write_solutions_file


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Secret Santa selector via maximum bipartite matching")

    parser.add_argument("input", nargs="?", default=None, help="Configurations csv file (default: stdin)")
    parser.add_argument(
        "--output", "-o", default="-", help="Write the solutions to this csv file (default: - for stdout)"
    )
    parser.add_argument(
        "--generate", "-g", type=int, default=0, help="Generate this many graphs instead of reading input (default: 0)"
    )
    parser.add_argument("--size", "-n", type=int, default=10, help="Number of vertices of generated graphs")
    parser.add_argument(
        "--density",
        "-d",
        type=float,
        default=1.0,
        help="Probability to keep an edge of generated graphs, 1.0 for full graphs (default: 1.0)",
    )
    parser.add_argument("--seed", "-s", type=int, default=None, help="Seed for generated graphs")
    parser.add_argument(
        "--forbid_self_assignment",
        "-f",
        action="store_true",
        help="Ignore self-loops so nobody is assigned to themselves (default: disabled)",
    )
    parser.add_argument(
        "--verify", "-v", action="store_true", help="Check every matching size against scipy (default: disabled)"
    )
    parser.add_argument(
        "--print_stats", "-p", action="store_true", help="Print statistics of every run (default: disabled)"
    )

    return parser.parse_args(argv)


def load_graphs(args) -> list:
    if args.generate > 0:
        if args.density >= 1.0:
            return [to_graph(generate_full_graph(args.size)) for _ in range(args.generate)]
        seed = args.seed
        graphs = list()
        for i in range(args.generate):
            graphs.append(to_graph(generate_random_graph(args.size, args.density, None if seed is None else seed + i)))
        return graphs
    if args.input is None:
        return read_configurations(sys.stdin)
    return read_configurations_file(args.input)


def main(argv=None) -> int:
    start_time = time.time()
    args = parse_arguments(argv)
    args_dict = vars(args)

    graphs = load_graphs(args)
    print("# finished reading %d graphs after %s sec" % (len(graphs), time.time() - start_time))
    selector = SantaSelector(**args_dict)

    solve_start = time.time()
    solutions = list()
    mismatches = 0
    for g in graphs:
        solution = selector.run(g)
        solutions.append(solution)
        if args.verify and solution.size != maximum_matching_size(g, args.forbid_self_assignment):
            mismatches += 1
    duration = time.time() - solve_start

    print("# duration: %s sec" % duration)
    if len(graphs) > 0:
        print("# duration per graph: %s sec" % (duration / len(graphs)))
    print("# impossible ones: %d" % selector.unsolved)
    print("# total ones: %d" % selector.runs)
    if args.verify:
        print("# verified against scipy, mismatches: %d" % mismatches)

    if args.output == "-":
        write_solutions(solutions, sys.stdout)
    else:
        write_solutions_file(solutions, args.output)
    print("# output after %s sec" % (time.time() - start_time))
    return 1 if mismatches > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
