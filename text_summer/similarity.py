from __future__ import annotations
from typing import List, Sequence
from .datatypes import SimilarityMatrix
from .preprocessing import tokenize

DIAGONAL_THRESHOLD = 4

def word_levenshtein(s: Sequence[str], t: Sequence[str], threshold: int = DIAGONAL_THRESHOLD) -> int:
    """
    Levenshtein distance over word tokens.

    Pruned: as soon as a diagonal cell d[i][i] exceeds ``threshold`` the
    computation stops and ``len(s)`` is returned, so long dissimilar
    sentences cost O(threshold * len(t)) instead of the full table.
    """
    n, m = len(s), len(t)
    if n == 0:
        return m
    if m == 0:
        return n

    prev = list(range(m + 1))
    for i in range(1, n + 1):
        cur = [i] + [0] * m
        s_i = s[i - 1]
        for j in range(1, m + 1):
            cost = 0 if s_i == t[j - 1] else 1
            cur[j] = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
            if i == j and cur[j] > threshold:
                return n
        prev = cur
    return prev[m]

def build_similarity_matrix(sentences: Sequence[str]) -> SimilarityMatrix:
    """
    Pairwise word edit distances, diagonal included.

    The raw distance is used as the edge weight even though a smaller value
    means a closer pair.
    """
    tokens = [tokenize(s) for s in sentences]
    return [[word_levenshtein(a, b) for b in tokens] for a in tokens]

def _intersect_sorted(a: Sequence[str], b: Sequence[str]) -> List[str]:
    ai = bi = 0
    common: List[str] = []
    while ai < len(a) and bi < len(b):
        if a[ai] < b[bi]:
            ai += 1
        elif a[ai] > b[bi]:
            bi += 1
        else:
            common.append(a[ai])
            ai += 1
            bi += 1
    return common

def sentences_intersection(sent1: str, sent2: str) -> int:
    # merge intersection needs both sides sorted
    s1 = sorted(tokenize(sent1))
    s2 = sorted(tokenize(sent2))
    common = _intersect_sorted(s1, s2)
    avg_len = (len(s1) + len(s2)) / 2
    return len(common[:int(avg_len)])

def build_overlap_matrix(sentences: Sequence[str]) -> SimilarityMatrix:
    n = len(sentences)
    M = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            M[i][j] = sentences_intersection(sentences[i], sentences[j])
    return M
