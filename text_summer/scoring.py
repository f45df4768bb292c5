from __future__ import annotations
import logging
from typing import List, Mapping, Sequence, Union
from .datatypes import Graph, ProbabilityVector, RankResult, SimilarityMatrix
from .errors import NonConvergenceError
from .graphing import as_graph, invert_graph

logger = logging.getLogger(__name__)

DEFAULT_DAMPING = 0.85
DEFAULT_TOLERANCE = 1e-4
DEFAULT_MAX_ITER = 1000

def pagerank_result(outgoing: Union[Mapping, Sequence[Sequence]],
                    damping: float = DEFAULT_DAMPING,
                    tolerance: float = DEFAULT_TOLERANCE,
                    max_iter: int = DEFAULT_MAX_ITER) -> RankResult:
    """
    Random-surfer ranking over a directed graph.

    PageRank Formula: PR(b) = (1-d)/N + d × Σ(PR(a)/C(a)) over incoming a

    Args:
        outgoing: node -> outgoing destinations, or a list of neighbor lists
        damping: probability of following an edge, in (0, 1)
        tolerance: max per-node change for a node to count as stable
        max_iter: number of full sweeps before giving up

    Returns:
        RankResult with the converged probability of every node and the
        number of sweeps it took.

    Raises:
        NonConvergenceError: if no sweep within ``max_iter`` left every node
            stable at the same time.
    """
    if not 0.0 < damping < 1.0:
        raise ValueError(f"damping must be in (0, 1), got {damping}")
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    graph: Graph = as_graph(outgoing)
    n = len(graph)
    if n == 0:
        return RankResult()
    if n == 1:
        (node,) = graph
        return RankResult(scores={node: 1.0}, iterations=0)

    probs: ProbabilityVector = {node: 1.0 / n for node in graph}
    incoming = invert_graph(graph)
    coeff = (1.0 - damping) / n

    for iteration in range(1, max_iter + 1):
        new_probs: ProbabilityVector = {}
        stable = 0
        for b, prev in probs.items():
            total = 0.0
            for a in incoming.get(b, ()):
                degree = len(graph[a])
                # dangling nodes contribute nothing
                if degree:
                    total += probs[a] / degree
            res = coeff + damping * total
            if prev - tolerance <= res <= prev + tolerance:
                stable += 1
            new_probs[b] = res
        probs = new_probs

        if stable == n:
            logger.debug("PageRank converged after %d iterations on %d nodes", iteration, n)
            return RankResult(scores=probs, iterations=iteration)

    logger.warning("PageRank gave up after %d iterations (tolerance=%g, nodes=%d)",
                   max_iter, tolerance, n)
    raise NonConvergenceError(max_iter, tolerance, probs)

def pagerank(outgoing: Union[Mapping, Sequence[Sequence]],
             damping: float = DEFAULT_DAMPING,
             tolerance: float = DEFAULT_TOLERANCE,
             max_iter: int = DEFAULT_MAX_ITER) -> ProbabilityVector:
    return pagerank_result(outgoing, damping=damping, tolerance=tolerance, max_iter=max_iter).scores

def centroid_scores(matrix: SimilarityMatrix) -> List[float]:
    # Score(i) = sum of overlaps with every other sentence
    n = len(matrix)
    scores: List[float] = []
    for i in range(n):
        scores.append(sum(matrix[i][j] for j in range(n) if j != i))
    return scores
