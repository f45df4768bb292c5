from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, List

NodeId = Hashable

Graph = Dict[NodeId, List[NodeId]]  # node -> outgoing destinations, insertion-ordered
ProbabilityVector = Dict[NodeId, float]
SimilarityMatrix = List[List[float]]  # N x N, includes the diagonal

@dataclass
class RankResult:
    scores: ProbabilityVector = field(default_factory=dict)
    iterations: int = 0

    def as_list(self) -> List[float]:
        # scores in node insertion order, i.e. sentence order for dense graphs
        return list(self.scores.values())
