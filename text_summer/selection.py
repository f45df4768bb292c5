from __future__ import annotations
from typing import Iterable, List, Sequence

def select_top_indices(scores: Sequence[float], count: int) -> List[int]:
    """
    Pick the indices of the ``count`` highest scores, best first.

    Ties go to the lowest index: each of the top values is matched against
    the original scores from the start, skipping indices already taken.
    """
    if count <= 0:
        return []
    top_values = sorted(scores, reverse=True)[:int(count)]
    selected: List[int] = []
    taken = set()
    for value in top_values:
        for j, score in enumerate(scores):
            if score == value and j not in taken:
                selected.append(j)
                taken.add(j)
                break
    return selected

def rank_by_score(scores: Sequence[float], count: int) -> List[int]:
    # stable sort: on equal scores the earlier sentence stays ahead
    if count <= 0:
        return []
    order = sorted(range(len(scores)), key=lambda i: scores[i], reverse=True)
    return order[:int(count)]

def restore_order(indices: Iterable[int], sentences: Sequence[str]) -> List[str]:
    keep = set(indices)
    return [s for i, s in enumerate(sentences) if i in keep]
