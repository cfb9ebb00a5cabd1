import sys

from santasolver.graph import Graph

END_OF_FILE = "endoffile,"
BOM = "\ufeff"


def to_graph(configuration: dict) -> Graph:
    """configuration: dict of key -> list of keys it may be assigned to"""
    g = Graph()
    g.add_vertices(list(configuration))
    for key, successors in configuration.items():
        g.add_edges(key, successors)
    return g


def parse_line(line: str) -> (str, list):
    # can look like this: anna,bert carl
    # or this: dora,
    key_value = line.split(",")
    key = key_value[0].strip()
    successors = key_value[1].split() if len(key_value) > 1 else list()
    return key, successors


def read_configurations(stream=None) -> list:
    """
    Reads blocks of "key,successor successor ..." lines, one block per graph.
    A block ends at an empty line or at the line "endoffile,", which also ends the input.
    """
    if stream is None:
        stream = sys.stdin
    graphs = list()
    configuration = dict()
    first_line = True
    for line in stream:
        line = line.rstrip("\r\n")
        if first_line:
            line = line.lstrip(BOM)
            first_line = False
        if len(line) == 0 or line == END_OF_FILE:
            if len(configuration) > 0:
                graphs.append(to_graph(configuration))
            configuration = dict()
            if line == END_OF_FILE:
                return graphs
            continue
        key, successors = parse_line(line)
        configuration[key] = successors
    if len(configuration) > 0:  # input without a closing line
        graphs.append(to_graph(configuration))
    return graphs


def read_configurations_file(path: str) -> list:
    with open(path, "r", encoding="utf-8") as f:
        return read_configurations(f)
