import sys
import numpy as np

from santasolver.read_configurations import END_OF_FILE


def generate_full_graph(size: int) -> dict:
    """every vertex may be assigned to every other vertex, but not to itself"""
    if size < 0:
        raise ValueError("size must not be negative: %s" % size)
    keys = [str(i) for i in range(size)]
    return {keys[i]: [keys[j] for j in range(size) if j != i] for i in range(size)}


def generate_random_graph(size: int, density: float, seed=None) -> dict:
    """
    Keeps every edge of the full graph with probability density.
    Self-loops are never generated.
    """
    if size < 0:
        raise ValueError("size must not be negative: %s" % size)
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0, 1]: %s" % density)
    rng = np.random.default_rng(seed)
    allowed = rng.random((size, size)) < density
    np.fill_diagonal(allowed, False)
    keys = [str(i) for i in range(size)]
    return {keys[i]: [keys[j] for j in np.nonzero(allowed[i])[0]] for i in range(size)}


def write_configurations(configurations: list, stream=None):
    """writes the configurations in the format of read_configurations"""
    if stream is None:
        stream = sys.stdout
    for i, configuration in enumerate(configurations):
        if i > 0:
            stream.write("\n")
        for key, successors in configuration.items():
            stream.write("%s,%s\n" % (key, " ".join(successors)))
    stream.write(END_OF_FILE)
