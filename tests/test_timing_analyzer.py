"""Tests for the queue/stack timing analyzer."""

from __future__ import annotations

import random

import pytest

from lexbench.analyzers import OperationRequest, TimingAnalyzer
from lexbench.config import AnalyzerConfig
from lexbench.core.errors import EmptyLexemePoolError
from lexbench.core.lexemes import LexemeCategory
from lexbench.core.stats import OperationKind, StructureKind

from conftest import FakeRandom, StubLexemeSource


def _seed(analyzer: TimingAnalyzer, lexemes):
    for lexeme in lexemes:
        analyzer.add_lexeme(lexeme)


class TestConstruction:

    def test_one_stats_record_per_structure(self, make_analyzer):
        analyzer = make_analyzer()

        assert analyzer.supported_structures == [StructureKind.QUEUE, StructureKind.STACK]
        assert analyzer.chart_labels == ["Queue", "Stack"]
        assert set(analyzer.stats) == {StructureKind.QUEUE, StructureKind.STACK}
        assert analyzer.stats[StructureKind.QUEUE] is not analyzer.stats[StructureKind.STACK]

    def test_starts_empty(self, make_analyzer):
        analyzer = make_analyzer()

        assert analyzer.snapshot() == {StructureKind.QUEUE: [], StructureKind.STACK: []}


class TestSeeding:

    def test_random_subset_seeds_both_structures(self, make_analyzer, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(count=2), lexeme_analyzer=foo_bar_baz)

        selected = analyzer.seed_from_code("foo bar baz")

        assert selected == ["bar", "baz"]
        assert list(analyzer.queue) == ["bar", "baz"]
        assert analyzer.stack == ["bar", "baz"]
        assert analyzer.stack[-1] == "baz"
        assert analyzer.stats[StructureKind.QUEUE].add_count == 2
        assert analyzer.stats[StructureKind.STACK].add_count == 2

    def test_subset_size_drawn_from_full_pool_range(self, make_analyzer, foo_bar_baz):
        rng = FakeRandom(count=10)
        analyzer = make_analyzer(rng=rng, lexeme_analyzer=foo_bar_baz)

        selected = analyzer.seed_from_code("foo bar baz")

        assert rng.randint_calls == [(1, 3)]
        assert len(selected) == 3

    def test_category_filter_is_forwarded(self, make_analyzer, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(), lexeme_analyzer=foo_bar_baz)

        analyzer.seed_from_code("code", LexemeCategory.IDENTIFIER)

        assert foo_bar_baz.calls == [("code", LexemeCategory.IDENTIFIER)]

    @pytest.mark.parametrize("seed", range(20))
    def test_seed_bounds(self, make_analyzer, code_sample, seed):
        analyzer = make_analyzer(seed=seed)
        pool = analyzer.extract_lexemes(code_sample)

        selected = analyzer.seed_from_code(code_sample)

        assert 1 <= len(selected) <= len(pool)
        assert set(selected) <= set(pool)
        assert len(analyzer.queue) == len(analyzer.stack) == len(selected)
        for kind in analyzer.supported_structures:
            assert analyzer.stats[kind].add_count == len(selected)

    def test_same_seed_same_selection(self, make_analyzer, code_sample):
        first = make_analyzer(seed=42).seed_from_code(code_sample)
        second = make_analyzer(seed=42).seed_from_code(code_sample)

        assert first == second

    def test_seed_taken_from_config(self, make_analyzer, code_sample):
        config = AnalyzerConfig(seed=5, show_chart=False)

        first = make_analyzer(config=config).seed_from_code(code_sample)
        second = make_analyzer(config=config).seed_from_code(code_sample)

        assert first == second

    def test_injected_rng(self, make_analyzer, code_sample):
        a = make_analyzer(rng=random.Random(9)).seed_from_code(code_sample)
        b = make_analyzer(rng=random.Random(9)).seed_from_code(code_sample)

        assert a == b


class TestEmptyPool:

    @pytest.mark.parametrize("code", ["", "   \n\t  "])
    def test_analysis_fails_without_lexemes(self, make_analyzer, code):
        analyzer = make_analyzer()

        with pytest.raises(EmptyLexemePoolError, match="No lexemes available"):
            analyzer.analyze_performance(code, lambda: None)

        for stats in analyzer.stats.values():
            assert stats.total_count == 0
            assert stats.total_elapsed == 0

    def test_filtered_category_without_lexemes(self, make_analyzer):
        analyzer = make_analyzer()

        with pytest.raises(EmptyLexemePoolError):
            analyzer.seed_from_code("x = 1", LexemeCategory.STRING)

        assert analyzer.snapshot()[StructureKind.QUEUE] == []

    def test_error_is_a_value_error(self, make_analyzer):
        with pytest.raises(ValueError):
            make_analyzer().seed_from_code("")

    def test_operation_not_run_when_pool_empty(self, make_analyzer, console):
        calls = []
        analyzer = make_analyzer()

        with pytest.raises(EmptyLexemePoolError):
            analyzer.analyze_performance("", lambda: calls.append(1))

        assert calls == []
        assert "Timing analysis" not in console.export_text()


class TestOperations:

    def test_add_then_search_found_in_both(self, make_analyzer):
        analyzer = make_analyzer()

        analyzer.add_lexeme("token")
        found = analyzer.search_lexeme("token")

        assert found == {StructureKind.QUEUE: True, StructureKind.STACK: True}

    def test_search_miss(self, make_analyzer):
        analyzer = make_analyzer()
        _seed(analyzer, ["a"])

        found = analyzer.search_lexeme("b")

        assert found == {StructureKind.QUEUE: False, StructureKind.STACK: False}
        for stats in analyzer.stats.values():
            assert stats.search_count == 1

    def test_remove_absent_then_present(self, make_analyzer):
        analyzer = make_analyzer()
        _seed(analyzer, ["a", "b"])

        removed = analyzer.remove_lexeme("c")

        assert removed == {StructureKind.QUEUE: False, StructureKind.STACK: False}
        assert analyzer.snapshot() == {StructureKind.QUEUE: ["a", "b"], StructureKind.STACK: ["a", "b"]}
        for stats in analyzer.stats.values():
            assert stats.remove_count == 1

        analyzer.remove_lexeme("a")

        assert list(analyzer.queue) == ["b"]
        assert analyzer.stack == ["b"]
        for stats in analyzer.stats.values():
            assert stats.remove_count == 2

    def test_replay_requests(self, make_analyzer):
        analyzer = make_analyzer()

        replayed = analyzer.replay([
            OperationRequest(OperationKind.ADD, "x"),
            OperationRequest("search", "x"),
            OperationRequest(OperationKind.REMOVE, "x"),
            OperationRequest(OperationKind.SEARCH, "x"),
        ])

        assert replayed == 4
        assert analyzer.snapshot()[StructureKind.QUEUE] == []
        for stats in analyzer.stats.values():
            assert (stats.add_count, stats.search_count, stats.remove_count) == (1, 2, 1)


class TestLookups:

    def test_lexeme_at_position(self, make_analyzer):
        analyzer = make_analyzer()
        _seed(analyzer, ["x", "y", "z"])

        assert analyzer.lexeme_at_position(0) == "x"
        assert analyzer.lexeme_at_position(1) == "y"
        assert analyzer.lexeme_at_position(5) is None
        assert analyzer.lexeme_at_position(-1) is None

    def test_lexeme_at_position_does_not_touch_stats(self, make_analyzer):
        analyzer = make_analyzer()
        _seed(analyzer, ["x", "y", "z"])

        analyzer.lexeme_at_position(2)

        for stats in analyzer.stats.values():
            assert stats.search_count == 0

    def test_random_lexeme_count_in_range(self, make_analyzer):
        analyzer = make_analyzer(seed=1)
        _seed(analyzer, ["x", "y", "z"])

        for _ in range(50):
            assert 1 <= analyzer.random_lexeme_count() <= 3

    def test_random_lexeme_count_empty_queue(self, make_analyzer):
        with pytest.raises(ValueError):
            make_analyzer().random_lexeme_count()


class TestAnalyzePerformance:

    def test_report_lists_every_structure_and_operation(self, make_analyzer, console, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(count=2), lexeme_analyzer=foo_bar_baz)

        stats = analyzer.analyze_performance("code", [OperationRequest(OperationKind.SEARCH, "bar")])

        output = console.export_text()
        assert "Extracted lexemes in each data structure:" in output
        assert "Queue: ['bar', 'baz']" in output
        assert "Stack: ['bar', 'baz']" in output
        assert "Timing analysis of each function:" in output
        for label in ("Queue", "Stack"):
            assert f"{label} Additions: 2 operations" in output
            assert f"{label} Searches: 1 operations" in output
            assert f"{label} Removals: 0 operations" in output
        assert stats is analyzer.stats

    def test_callable_operation_runs_after_seeding(self, make_analyzer, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(count=3), lexeme_analyzer=foo_bar_baz)
        seen = []

        def operation():
            seen.append(list(analyzer.queue))
            analyzer.remove_lexeme("foo")

        analyzer.analyze_performance("code", operation)

        assert seen == [["bar", "baz", "foo"]]
        assert analyzer.stats[StructureKind.STACK].remove_count == 1

    def test_run_analysis_alias(self, make_analyzer, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(count=1), lexeme_analyzer=foo_bar_baz)

        analyzer.run_analysis("code")

        assert analyzer.stats[StructureKind.QUEUE].add_count == 1

    def test_statistics_accumulate_across_runs(self, make_analyzer, foo_bar_baz):
        analyzer = make_analyzer(rng=FakeRandom(count=2), lexeme_analyzer=foo_bar_baz)

        analyzer.analyze_performance("code", [OperationRequest(OperationKind.SEARCH, "bar")])
        analyzer.analyze_performance("code", [OperationRequest(OperationKind.SEARCH, "bar")])

        for stats in analyzer.stats.values():
            assert stats.add_count == 4
            assert stats.search_count == 2
        assert len(analyzer.queue) == 4

    def test_chart_rendered_when_enabled(self, make_analyzer, console, foo_bar_baz):
        analyzer = make_analyzer(
            config=AnalyzerConfig(show_chart=True),
            rng=FakeRandom(count=2),
            lexeme_analyzer=foo_bar_baz,
        )

        analyzer.analyze_performance("code")

        assert "Operation Performance" in console.export_text()

    def test_chart_receives_aligned_labels_and_kinds(self, make_analyzer, foo_bar_baz):
        rendered = []

        class RecordingChart:
            def render(self, labels, kinds, stats):
                rendered.append((list(labels), list(kinds), stats))

        analyzer = make_analyzer(
            config=AnalyzerConfig(show_chart=True),
            rng=FakeRandom(count=1),
            lexeme_analyzer=foo_bar_baz,
            visualizer=RecordingChart(),
        )

        analyzer.analyze_performance("code")

        assert rendered == [
            (["Queue", "Stack"], [StructureKind.QUEUE, StructureKind.STACK], analyzer.stats)
        ]

    def test_real_code_end_to_end(self, make_analyzer, code_sample, console):
        analyzer = make_analyzer(seed=3)

        analyzer.analyze_performance(
            code_sample,
            lambda: [analyzer.search_lexeme(analyzer.lexeme_at_position(0)) for _ in range(3)],
        )

        for stats in analyzer.stats.values():
            assert stats.search_count == 3
            assert stats.add_count == len(analyzer.queue)
