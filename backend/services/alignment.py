"""
Alignment Engine - Array diff over two unit sequences

Implements Eugene W. Myers' "An O(ND) Difference Algorithm and Its
Variations" (1986). Every unit is an atomic element compared by exact
equality; the result is a list of alignment groups whose units, filtered
by tag, rebuild both input sequences in order.
"""

from __future__ import annotations

from collections.abc import Sequence

from models.diff import AlignmentGroup, DiffType


def align(old_units: Sequence[str], new_units: Sequence[str]) -> list[AlignmentGroup]:
    """Diff two unit sequences into ordered added/removed/unchanged groups.

    Inside every contiguous edit block the removed run comes before the
    added run, so a replacement always shows up as a ``removed`` group
    immediately followed by an ``added`` group.
    """
    old_units = list(old_units)
    new_units = list(new_units)

    # Common prefix and suffix never take part in the edit search
    prefix = 0
    limit = min(len(old_units), len(new_units))
    while prefix < limit and old_units[prefix] == new_units[prefix]:
        prefix += 1

    suffix = 0
    limit -= prefix
    while (
        suffix < limit
        and old_units[len(old_units) - 1 - suffix] == new_units[len(new_units) - 1 - suffix]
    ):
        suffix += 1

    old_middle = old_units[prefix:len(old_units) - suffix]
    new_middle = new_units[prefix:len(new_units) - suffix]

    script: list[tuple[DiffType, str]] = [(DiffType.UNCHANGED, unit) for unit in old_units[:prefix]]
    script.extend(edit_script(old_middle, new_middle))
    script.extend((DiffType.UNCHANGED, unit) for unit in old_units[len(old_units) - suffix:])

    return _group(script)


def edit_script(a: Sequence[str], b: Sequence[str]) -> list[tuple[DiffType, str]]:
    """Return one shortest edit script turning ``a`` into ``b``"""
    n = len(a)
    m = len(b)

    if n == 0:
        return [(DiffType.ADDED, unit) for unit in b]
    if m == 0:
        return [(DiffType.REMOVED, unit) for unit in a]

    max_d = n + m
    offset = max_d + 1
    # v[offset + k] holds the furthest x reached on diagonal k
    v = [0] * (2 * max_d + 3)
    trace: list[list[int]] = []

    for d in range(max_d + 1):
        # Only diagonals -d-1 .. d+1 are read back for this d
        trace.append(v[offset - d - 1:offset + d + 2])

        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k

            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[offset + k] = x

            if x >= n and y >= m:
                return _backtrack(trace, a, b, n, m)

    raise RuntimeError("Myers search exhausted without reaching the end of both sequences")


def _backtrack(
    trace: list[list[int]],
    a: Sequence[str],
    b: Sequence[str],
    x: int,
    y: int,
) -> list[tuple[DiffType, str]]:
    """Walk the recorded frontiers back from (x, y) to the origin"""
    steps: list[tuple[DiffType, str]] = []

    for d in range(len(trace) - 1, -1, -1):
        frontier = trace[d]
        k = x - y

        def furthest(diagonal: int) -> int:
            return frontier[diagonal + d + 1]

        if k == -d or (k != d and furthest(k - 1) < furthest(k + 1)):
            prev_k = k + 1
        else:
            prev_k = k - 1

        prev_x = furthest(prev_k)
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            steps.append((DiffType.UNCHANGED, a[x]))

        if d > 0:
            if x == prev_x:
                steps.append((DiffType.ADDED, b[prev_y]))
            else:
                steps.append((DiffType.REMOVED, a[prev_x]))

        x, y = prev_x, prev_y

    steps.reverse()
    return steps


def _group(script: list[tuple[DiffType, str]]) -> list[AlignmentGroup]:
    """Collapse an edit script into maximal runs, removals first within each edit block"""
    groups: list[AlignmentGroup] = []
    removed: list[str] = []
    added: list[str] = []
    unchanged: list[str] = []

    def flush_changes():
        if removed:
            groups.append(AlignmentGroup(type=DiffType.REMOVED, units=list(removed)))
            removed.clear()
        if added:
            groups.append(AlignmentGroup(type=DiffType.ADDED, units=list(added)))
            added.clear()

    def flush_unchanged():
        if unchanged:
            groups.append(AlignmentGroup(type=DiffType.UNCHANGED, units=list(unchanged)))
            unchanged.clear()

    for tag, unit in script:
        if tag == DiffType.UNCHANGED:
            flush_changes()
            unchanged.append(unit)
        else:
            flush_unchanged()
            if tag == DiffType.REMOVED:
                removed.append(unit)
            else:
                added.append(unit)

    flush_changes()
    flush_unchanged()
    return groups
