"""
Reconciler - Turn alignment groups into numbered, renderable diff lines
"""

from __future__ import annotations

from dataclasses import dataclass, field

from models.diff import (
    AlignmentGroup,
    DiffLine,
    DiffOptions,
    DiffResult,
    DiffStats,
    DiffType,
)

from .inline_diff import inline_diff
from .similarity import similarity


@dataclass
class _Accumulator:
    """Running counters for one reconcile call"""

    old_line_number: int = 1
    new_line_number: int = 1
    additions: int = 0
    deletions: int = 0
    unchanged: int = 0
    lines: list[DiffLine] = field(default_factory=list)

    def emit_added(self, unit: str):
        self.lines.append(
            DiffLine(type=DiffType.ADDED, content=unit, new_line_number=self.new_line_number)
        )
        self.new_line_number += 1
        self.additions += 1

    def emit_removed(self, unit: str):
        self.lines.append(
            DiffLine(type=DiffType.REMOVED, content=unit, old_line_number=self.old_line_number)
        )
        self.old_line_number += 1
        self.deletions += 1

    def emit_unchanged(self, unit: str):
        self.lines.append(
            DiffLine(
                type=DiffType.UNCHANGED,
                content=unit,
                old_line_number=self.old_line_number,
                new_line_number=self.new_line_number,
            )
        )
        self.old_line_number += 1
        self.new_line_number += 1
        self.unchanged += 1

    def emit_inline(self, old_unit: str, new_unit: str, options: DiffOptions):
        # One rendered row, but counted as one addition and one deletion
        content, segments = inline_diff(old_unit, new_unit, options.inline_granularity)
        self.lines.append(
            DiffLine(
                type=DiffType.UNCHANGED,
                content=content,
                old_line_number=self.old_line_number,
                new_line_number=self.new_line_number,
                is_inline_diff=True,
                segments=segments,
            )
        )
        self.old_line_number += 1
        self.new_line_number += 1
        self.additions += 1
        self.deletions += 1

    def result(self) -> DiffResult:
        return DiffResult(
            lines=self.lines,
            stats=DiffStats(
                additions=self.additions,
                deletions=self.deletions,
                unchanged=self.unchanged,
            ),
        )


def is_inline_candidate(old_unit: str, new_unit: str, options: DiffOptions) -> bool:
    """Whether a replaced pair is close enough to render as one inline-diffed row"""
    if max(len(old_unit), len(new_unit)) > options.max_inline_unit_length:
        return False
    return similarity(old_unit, new_unit) > options.similarity_threshold


def reconcile(groups: list[AlignmentGroup], options: DiffOptions | None = None) -> DiffResult:
    """
    Walk alignment groups and assign line numbers and stats.

    A removed group directly followed by an added group of the same length
    is zipped into replace pairs; every pair whose similarity clears the
    threshold becomes a single inline-diffed row, the rest are emitted as
    a removed row followed by an added row. Runs of unequal length are never
    paired.
    """
    options = options or DiffOptions()
    acc = _Accumulator()

    i = 0
    while i < len(groups):
        group = groups[i]

        if group.type == DiffType.ADDED:
            for unit in group.units:
                acc.emit_added(unit)
            i += 1

        elif group.type == DiffType.REMOVED:
            following = groups[i + 1] if i + 1 < len(groups) else None
            if (
                following is not None
                and following.type == DiffType.ADDED
                and len(following.units) == len(group.units)
            ):
                pairs = list(zip(group.units, following.units))
                inline = [is_inline_candidate(old, new, options) for old, new in pairs]
                if not any(inline):
                    # Keep old-then-new block order when nothing renders inline
                    for old_unit, _ in pairs:
                        acc.emit_removed(old_unit)
                    for _, new_unit in pairs:
                        acc.emit_added(new_unit)
                else:
                    for (old_unit, new_unit), is_inline in zip(pairs, inline):
                        if is_inline:
                            acc.emit_inline(old_unit, new_unit, options)
                        else:
                            acc.emit_removed(old_unit)
                            acc.emit_added(new_unit)
                i += 2
            else:
                for unit in group.units:
                    acc.emit_removed(unit)
                i += 1

        elif group.type == DiffType.UNCHANGED:
            for unit in group.units:
                acc.emit_unchanged(unit)
            i += 1

        else:
            raise ValueError(f"Unknown alignment group type: {group.type}")

    return acc.result()
