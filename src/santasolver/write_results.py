import sys

from santasolver.solution import NO_MAPPING, NO_MAPPING_TEXT


def format_solution(solution) -> str:
    return "".join(
        "%s:%s," % (giver, NO_MAPPING_TEXT if receiver is NO_MAPPING else receiver)
        for giver, receiver in solution.assignment.items()
    )


def write_solutions(solutions: list, stream=None):
    """writes one line per solution, giver:receiver pairs separated by commas"""
    if stream is None:
        stream = sys.stdout
    for solution in solutions:
        stream.write(format_solution(solution))
        stream.write("\n")


def write_solutions_file(solutions: list, path: str):
    with open(path, "w", encoding="utf-8") as f:
        write_solutions(solutions, f)
