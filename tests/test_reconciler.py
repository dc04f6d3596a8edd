from models.diff import AlignmentGroup, DiffOptions, DiffType
from services.reconciler import is_inline_candidate, reconcile


def group(tag, *units):
    return AlignmentGroup(type=tag, units=list(units))


def rows(result):
    return [
        (line.type, line.old_line_number, line.new_line_number, line.is_inline_diff)
        for line in result.lines
    ]


def stats(result):
    return (result.stats.additions, result.stats.deletions, result.stats.unchanged)


class TestReconcile:

    def test_no_groups(self):
        result = reconcile([])
        assert result.lines == []
        assert stats(result) == (0, 0, 0)

    def test_added_and_unchanged_numbering(self):
        result = reconcile([
            group(DiffType.UNCHANGED, "a"),
            group(DiffType.ADDED, "b"),
        ])

        assert rows(result) == [
            (DiffType.UNCHANGED, 1, 1, False),
            (DiffType.ADDED, None, 2, False),
        ]
        assert [line.content for line in result.lines] == ["a", "b"]
        assert stats(result) == (1, 0, 1)

    def test_low_similarity_pairs_stay_separate(self):
        result = reconcile([
            group(DiffType.REMOVED, "alpha", "beta"),
            group(DiffType.ADDED, "gamma", "delta"),
        ])

        assert rows(result) == [
            (DiffType.REMOVED, 1, None, False),
            (DiffType.REMOVED, 2, None, False),
            (DiffType.ADDED, None, 1, False),
            (DiffType.ADDED, None, 2, False),
        ]
        assert [line.content for line in result.lines] == ["alpha", "beta", "gamma", "delta"]
        assert stats(result) == (2, 2, 0)

    def test_high_similarity_pair_renders_inline(self):
        result = reconcile([
            group(DiffType.REMOVED, "The quick fox."),
            group(DiffType.ADDED, "The quick dog."),
        ])

        assert rows(result) == [(DiffType.UNCHANGED, 1, 1, True)]
        line = result.lines[0]
        assert '<del class="diff-inline-removed">fox</del>' in line.content
        assert '<ins class="diff-inline-added">dog</ins>' in line.content
        assert line.segments
        assert stats(result) == (1, 1, 0)

    def test_similarity_equal_to_threshold_is_not_inline(self):
        result = reconcile([
            group(DiffType.REMOVED, "abcde"),
            group(DiffType.ADDED, "abxye"),
        ])

        assert rows(result) == [
            (DiffType.REMOVED, 1, None, False),
            (DiffType.ADDED, None, 1, False),
        ]

    def test_threshold_is_configurable(self):
        groups = [
            group(DiffType.REMOVED, "abcde"),
            group(DiffType.ADDED, "abxye"),
        ]
        result = reconcile(groups, DiffOptions(similarity_threshold=0.5))
        assert rows(result) == [(DiffType.UNCHANGED, 1, 1, True)]

    def test_mixed_pairs_are_decided_one_by_one(self):
        result = reconcile([
            group(DiffType.REMOVED, "The quick fox.", "alpha"),
            group(DiffType.ADDED, "The quick dog.", "omega"),
        ])

        assert rows(result) == [
            (DiffType.UNCHANGED, 1, 1, True),
            (DiffType.REMOVED, 2, None, False),
            (DiffType.ADDED, None, 2, False),
        ]
        assert stats(result) == (2, 2, 0)

    def test_unequal_runs_are_not_paired(self):
        result = reconcile([
            group(DiffType.REMOVED, "The quick fox.", "extra"),
            group(DiffType.ADDED, "The quick dog."),
        ])

        assert rows(result) == [
            (DiffType.REMOVED, 1, None, False),
            (DiffType.REMOVED, 2, None, False),
            (DiffType.ADDED, None, 1, False),
        ]
        assert stats(result) == (1, 2, 0)

    def test_trailing_removed_group(self):
        result = reconcile([
            group(DiffType.UNCHANGED, "a"),
            group(DiffType.REMOVED, "b", "c"),
        ])

        assert rows(result) == [
            (DiffType.UNCHANGED, 1, 1, False),
            (DiffType.REMOVED, 2, None, False),
            (DiffType.REMOVED, 3, None, False),
        ]

    def test_numbers_continue_across_groups(self):
        result = reconcile([
            group(DiffType.UNCHANGED, "a"),
            group(DiffType.REMOVED, "b"),
            group(DiffType.UNCHANGED, "c"),
            group(DiffType.ADDED, "d", "e"),
            group(DiffType.UNCHANGED, "f"),
        ])

        assert rows(result) == [
            (DiffType.UNCHANGED, 1, 1, False),
            (DiffType.REMOVED, 2, None, False),
            (DiffType.UNCHANGED, 3, 2, False),
            (DiffType.ADDED, None, 3, False),
            (DiffType.ADDED, None, 4, False),
            (DiffType.UNCHANGED, 4, 5, False),
        ]
        assert stats(result) == (2, 1, 3)

    def test_long_units_skip_inline_pass(self):
        options = DiffOptions(max_inline_unit_length=5)
        result = reconcile(
            [
                group(DiffType.REMOVED, "The quick fox."),
                group(DiffType.ADDED, "The quick dog."),
            ],
            options,
        )

        assert rows(result) == [
            (DiffType.REMOVED, 1, None, False),
            (DiffType.ADDED, None, 1, False),
        ]


class TestInlineCandidate:

    def test_close_pair(self):
        assert is_inline_candidate("The quick fox.", "The quick dog.", DiffOptions())

    def test_empty_against_text(self):
        assert not is_inline_candidate("", "text", DiffOptions())

    def test_length_cap(self):
        assert not is_inline_candidate("x" * 11, "x" * 10 + "y", DiffOptions(max_inline_unit_length=10))
