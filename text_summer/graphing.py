from __future__ import annotations
from typing import Mapping, Sequence, Union
from .datatypes import Graph, SimilarityMatrix

def as_graph(adjacency: Union[Mapping, Sequence[Sequence]]) -> Graph:
    """Normalize key-indexed or array-indexed adjacency into one ordered mapping."""
    if isinstance(adjacency, Mapping):
        return {node: list(dests) for node, dests in adjacency.items()}
    return {i: list(dests) for i, dests in enumerate(adjacency)}

def matrix_to_graph(simM: SimilarityMatrix) -> Graph:
    # Each row is handed to the engine as node i's outgoing list: out-degree is
    # N for every node and the cell values are the destinations.
    return as_graph(simM)

def invert_graph(outgoing: Graph) -> Graph:
    incoming: Graph = {}
    for node, dests in outgoing.items():
        for dest in dests:
            incoming.setdefault(dest, []).append(node)
    return incoming
