from .datatypes import NodeId, Graph, ProbabilityVector, SimilarityMatrix, RankResult
from .errors import SummarizerError, NonConvergenceError
from .preprocessing import split_sentences, tokenize
from .similarity import word_levenshtein, build_similarity_matrix, sentences_intersection, build_overlap_matrix
from .graphing import as_graph, matrix_to_graph, invert_graph
from .scoring import pagerank, pagerank_result, centroid_scores
from .selection import select_top_indices, rank_by_score, restore_order
from .summarize import (Algorithm, SummarizerConfig, SummarizationStrategy, TextRankStrategy,
                        CentroidRankStrategy, get_strategy, resolve_count, filter_sentences,
                        summarize_sentences, summarize, format_summary, arrange)
