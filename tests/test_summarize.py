"""Tests for the summarization strategies and the text pipeline."""

import pytest

from text_summer.errors import NonConvergenceError
from text_summer.summarize import (Algorithm, SummarizerConfig, TextRankStrategy, CentroidRankStrategy,
                                   get_strategy, resolve_count, filter_sentences, summarize_sentences,
                                   summarize, format_summary, arrange)


PETS = ["Cats are great pets.", "Dogs are great pets.", "Cats and Dogs are great pets."]


@pytest.fixture
def sentences():
    return [
        "The city council approved the new budget on Monday.",
        "The budget includes money for parks and schools.",
        "Critics said the budget ignores public transport.",
        "The mayor defended the plan at a press conference.",
        "Parks will receive new trees and benches.",
        "The vote passed by a narrow margin.",
    ]


@pytest.fixture(params=[TextRankStrategy, CentroidRankStrategy], ids=["textrank", "centroid"])
def strategy(request):
    return request.param()


class TestContract:
    def test_zero_count(self, strategy, sentences):
        assert strategy.summarize(sentences, 0) == []

    def test_negative_count(self, strategy, sentences):
        assert strategy.summarize(sentences, -3) == []

    def test_empty_input(self, strategy):
        assert strategy.summarize([], 3) == []

    def test_size_membership_and_uniqueness(self, strategy, sentences):
        for count in range(len(sentences) + 3):
            result = strategy.summarize(sentences, count)
            assert len(result) == min(count, len(sentences))
            assert all(s in sentences for s in result)
            assert len(set(result)) == len(result)

    def test_count_above_size_returns_everything(self, strategy, sentences):
        assert set(strategy.summarize(sentences, len(sentences) + 1)) == set(sentences)

    def test_repeatable(self, strategy, sentences):
        assert strategy.summarize(sentences, 3) == strategy.summarize(sentences, 3)

    def test_single_sentence(self, strategy):
        assert strategy.summarize(["Only one."], 2) == ["Only one."]

    @pytest.mark.parametrize("count,expected", [(2.0, 2), (1.5, 1), (0.5, 0)])
    def test_fractional_count(self, strategy, count, expected):
        result = strategy.summarize(["A b.", "C d.", "E f."], count)
        assert len(result) == expected

    def test_select_matches_pick_on_scores(self, strategy, sentences):
        scores = strategy.scores(sentences)
        assert len(scores) == len(sentences)
        assert strategy.select(sentences, 3) == strategy.pick(scores, 3)


class TestTextRank:
    def test_distances_route_rank_mass(self):
        # row values are destination nodes: 0 and 1 receive the most edges
        sents = ["A b c d.", "A b c e.", "X y z w v u t.", "A b q d."]
        result = TextRankStrategy().rank(sents)
        assert result.as_list() == pytest.approx([0.108, 0.116, 0.070, 0.0375], abs=2e-3)
        assert TextRankStrategy().select(sents, 4) == [1, 0, 2, 3]
        cfg = SummarizerConfig(preserve_order=False)
        assert summarize_sentences(sents, 2, cfg) == [sents[1], sents[0]]

    def test_identical_sentences_tie_to_lowest_index(self):
        assert TextRankStrategy().select(["Same words here."] * 3, 2) == [0, 1]

    def test_rank_has_one_score_per_sentence(self, sentences):
        result = TextRankStrategy().rank(sentences)
        assert list(result.scores) == list(range(len(sentences)))
        assert result.iterations >= 1

    def test_non_convergence_propagates(self):
        with pytest.raises(NonConvergenceError):
            TextRankStrategy(tolerance=0, max_iter=1).summarize(["A b c.", "D e f.", "A b c."], 1)


class TestCentroid:
    def test_picks_sentence_overlapping_both_others(self):
        assert CentroidRankStrategy().summarize(PETS, 1) == ["Cats and Dogs are great pets."]

    def test_ties_keep_first_computed(self):
        assert CentroidRankStrategy().select(PETS, 3) == [2, 0, 1]


class TestOrder:
    def test_arrange(self):
        assert arrange([2, 0], ["a", "b", "c"]) == ["a", "c"]
        assert arrange([2, 0], ["a", "b", "c"], preserve_order=False) == ["c", "a"]

    def test_preserve_order(self):
        cfg = SummarizerConfig(algorithm=Algorithm.CENTROID, preserve_order=True)
        assert summarize_sentences(PETS, 2, cfg) == [PETS[0], PETS[2]]

    def test_rank_order(self):
        cfg = SummarizerConfig(algorithm=Algorithm.CENTROID, preserve_order=False)
        assert summarize_sentences(PETS, 2, cfg) == [PETS[2], PETS[0]]

    def test_preserved_output_is_subsequence(self, sentences):
        result = summarize_sentences(sentences, 4, SummarizerConfig())
        positions = [sentences.index(s) for s in result]
        assert positions == sorted(positions)


class TestStrategySelection:
    def test_default_is_textrank_with_config(self):
        strategy = get_strategy(SummarizerConfig(damping=0.5, tolerance=1e-3, max_iter=50))
        assert isinstance(strategy, TextRankStrategy)
        assert (strategy.damping, strategy.tolerance, strategy.max_iter) == (0.5, 1e-3, 50)

    def test_centroid(self):
        assert isinstance(get_strategy(SummarizerConfig(algorithm=Algorithm.CENTROID)), CentroidRankStrategy)
        assert isinstance(get_strategy(SummarizerConfig(algorithm="centroid")), CentroidRankStrategy)

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            get_strategy(SummarizerConfig(algorithm="lexrank"))


@pytest.mark.parametrize("value,n,expected", [
    (3, 10, 3),
    (0, 10, 0),
    (-2, 10, 0),
    (0.25, 10, 3),
    ("3 sentences", 10, 3),
    ("1 sentence", 10, 1),
    ("50%", 10, 5),
    ("25%", 8, 2),
    ("150%", 4, 4),
    ("0.5", 4, 2),
    ("1", 10, 10),
    (None, 10, 10),
    ("none", 10, 10),
    ("", 5, 5),
])
def test_resolve_count(value, n, expected):
    assert resolve_count(value, n) == expected


def test_resolve_count_rejects_garbage():
    with pytest.raises(ValueError):
        resolve_count("lots", 10)


@pytest.mark.parametrize("value", [True, False])
def test_resolve_count_rejects_bool(value):
    with pytest.raises(ValueError):
        resolve_count(value, 10)


def test_filter_sentences_by_word_count():
    sents = ["One two.", "One two three four.", "One two three four five six."]
    assert filter_sentences(sents) == sents
    assert filter_sentences(sents, skip_min_words=2) == sents[1:]
    assert filter_sentences(sents, skip_max_words=6) == sents[:2]
    assert filter_sentences(sents, skip_min_words=2, skip_max_words=6) == [sents[1]]


class TestPipeline:
    def test_end_to_end_centroid(self):
        text = "Cats are great pets. dogs are great pets.\n\nCats and Dogs are great pets."
        cfg = SummarizerConfig(algorithm=Algorithm.CENTROID)
        assert summarize(text, 1, cfg) == ["Cats and Dogs are great pets."]

    def test_end_to_end_textrank(self, sentences):
        result = summarize(" ".join(sentences), "50%")
        assert len(result) == 3
        positions = [sentences.index(s) for s in result]
        assert positions == sorted(positions)

    def test_empty_text(self):
        assert summarize("", 3) == []

    def test_filters_before_counting(self):
        text = "Hi. This sentence is long enough. So is this one here."
        cfg = SummarizerConfig(algorithm=Algorithm.CENTROID, skip_min_words=1)
        result = summarize(text, None, cfg)
        assert "Hi." not in result
        assert len(result) == 2


class TestFormat:
    def test_join(self):
        assert format_summary(["A.", "B."]) == "A.\nB."
        assert format_summary(["A.", "B."], separator=" ", list_style="none") == "A. B."

    def test_lists(self):
        assert format_summary(["A.", "B."], list_style="ordered") == \
            '<ol class="text-summary"><li>A.</li>\n<li>B.</li></ol>'
        assert format_summary(["A."], list_style="unordered") == '<ul class="text-summary"><li>A.</li></ul>'

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_summary(["A."], list_style="table")
