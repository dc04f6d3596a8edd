"""
Diff Generator Service - Compare two texts into renderable diff lines
"""

from __future__ import annotations

from difflib import unified_diff

from models.diff import (
    AlignmentGroup,
    DiffHunk,
    DiffLine,
    DiffMode,
    DiffOptions,
    DiffResult,
    DiffStats,
    DiffType,
    InlineGranularity,
    UnifiedDiff,
)

from .alignment import align
from .inline_diff import inline_diff
from .languages import DEFAULT_LANGUAGE, file_names
from .reconciler import reconcile
from .segmenter import segment


class DiffGenerator:
    """Generate structured diffs between an original and a modified text"""

    def __init__(self, options: DiffOptions | None = None):
        self.options = options or DiffOptions()

    def compute_diff(
        self,
        original_content: str,
        modified_content: str,
        mode: DiffMode = DiffMode.LINES,
    ) -> DiffResult:
        """Segment, align and reconcile two texts"""
        if original_content == "" and modified_content == "":
            return DiffResult()

        old_units = segment(original_content, mode)
        new_units = segment(modified_content, mode)

        if (
            mode == DiffMode.SENTENCES
            and len(old_units) == 1
            and len(new_units) == 1
            and old_units[0] != new_units[0]
        ):
            return self._single_sentence_diff(old_units[0], new_units[0])

        groups = align(old_units, new_units)
        return reconcile(groups, self.options)

    def _single_sentence_diff(self, old_sentence: str, new_sentence: str) -> DiffResult:
        """Word-level diff of two lone sentences, shown as one inline row"""
        content, segments = inline_diff(old_sentence, new_sentence, InlineGranularity.WORDS)
        line = DiffLine(
            type=DiffType.UNCHANGED,
            content=content,
            old_line_number=1,
            new_line_number=1,
            is_inline_diff=True,
            segments=segments,
        )
        return DiffResult(lines=[line], stats=DiffStats(additions=1, deletions=1, unchanged=0))

    def generate_unified_diff(
        self,
        original_content: str,
        new_content: str,
        language: str = DEFAULT_LANGUAGE,
    ) -> UnifiedDiff:
        """Generate a unified diff named after the language's file extension"""
        old_file_name, new_file_name = file_names(language)

        original_lines = (original_content or "\n").splitlines(keepends=True)
        new_lines = (new_content or "\n").splitlines(keepends=True)

        # Ensure last lines have newlines for proper diff
        if original_lines and not original_lines[-1].endswith("\n"):
            original_lines[-1] += "\n"
        if new_lines and not new_lines[-1].endswith("\n"):
            new_lines[-1] += "\n"

        unified = list(
            unified_diff(
                original_lines,
                new_lines,
                fromfile=old_file_name,
                tofile=new_file_name,
            )
        )

        return UnifiedDiff(
            old_file_name=old_file_name,
            new_file_name=new_file_name,
            language=language,
            hunks=self._extract_hunks(align(original_lines, new_lines)),
            unified_diff="".join(unified),
        )

    def _extract_hunks(self, groups: list[AlignmentGroup]) -> list[DiffHunk]:
        """Extract individual change hunks from alignment groups"""
        hunks = []
        old_index = 0

        i = 0
        while i < len(groups):
            group = groups[i]

            if group.type == DiffType.UNCHANGED:
                old_index += len(group.units)
                i += 1
                continue

            removed: list[str] = []
            added: list[str] = []
            if group.type == DiffType.REMOVED:
                removed = group.units
                i += 1
                if i < len(groups) and groups[i].type == DiffType.ADDED:
                    added = groups[i].units
                    i += 1
            else:
                added = group.units
                i += 1

            change_type = "modify" if removed and added else "delete" if removed else "add"

            hunks.append(
                DiffHunk(
                    start_line=old_index + 1,  # 1-indexed
                    end_line=old_index + len(removed),
                    original_content="".join(removed),
                    new_content="".join(added),
                    change_type=change_type,
                )
            )
            old_index += len(removed)

        return hunks


def compute_diff(
    original: str,
    modified: str,
    mode: DiffMode = DiffMode.LINES,
    options: DiffOptions | None = None,
) -> DiffResult:
    """Compare two texts with a throwaway generator"""
    return DiffGenerator(options).compute_diff(original, modified, mode)
