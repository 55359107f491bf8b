"""Turn one array into another by repeatedly replacing a maximum-sum subarray."""

import sys

__all__ = ["transform_operations", "main"]


def _bad_flags(values):
    """Mark the elements that split the cool partition of ``values``."""
    bad = [False] * len(values)
    indexed = list(enumerate(values))
    while True:
        updated = False
        for sweep in (indexed, indexed[::-1]):
            running = 0
            for index, value in sweep:
                running += value
                if bad[index]:
                    running = 0
                elif running < 0:
                    bad[index] = True
                    updated = True
                    break
        if not updated:
            return bad


def _segments(values):
    """Return the (start, end, sum) segments between bad elements."""
    n = len(values)
    bad = _bad_flags(values)
    segments = []
    start = 0
    for end in range(1, n + 1):
        if end == n or bad[end - 1] or bad[end]:
            segments.append((start, end, sum(values[start:end])))
            start = end
    return segments


def _max_subarray_table(values):
    """best[lo][hi] is the largest subarray sum inside values[lo:hi]."""
    m = len(values)
    best = [[0] * (m + 1) for _ in range(m + 1)]
    for lo in range(m, -1, -1):
        running = 0
        for hi in range(lo + 1, m + 1):
            running += values[hi - 1]
            value = running
            if hi - lo > 1:
                value = max(value, best[lo + 1][hi], best[lo][hi - 1])
            best[lo][hi] = value
    return best


def _lcp_table(source, target):
    """lcp[i][j] is the common prefix length of source[i:] and target[j:]."""
    n, m = len(source), len(target)
    lcp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if source[i] == target[j]:
                lcp[i][j] = lcp[i + 1][j + 1] + 1
    return lcp


def _match(segments, threshold, target, best, lcp):
    """Return the target span matched by each segment, or None if impossible."""
    k, m = len(segments), len(target)
    back = [[[None, None] for _ in range(m + 1)] for _ in range(k + 1)]
    back[0][0][0] = (-1, 0)
    for h, (lo, hi, total) in enumerate(segments):
        cur, nxt = back[h], back[h + 1]
        if total < threshold:
            length = hi - lo
            for j in range(m):
                if lcp[lo][j] >= length:
                    for u in (0, 1):
                        if cur[j][u] is not None:
                            nxt[j + length][u] = (j, u)
            continue
        for u in (0, 1):
            reach = 0
            for j in range(m):
                if cur[j][u] is None:
                    continue
                reach = max(reach, j + 1)
                while reach <= m and best[j][reach] <= threshold:
                    nxt[reach][u] = (j, u)
                    reach += 1
            if u == 0:
                first = next((j for j in range(m) if cur[j][0] is not None), None)
                if first is not None:
                    for end in range(first + 1, m + 1):
                        nxt[end][1] = (first, 0)
    final = back[k][m]
    if final[0] is None and final[1] is None:
        return None
    j, u = m, (0 if final[0] is not None else 1)
    spans = [None] * k
    for h in range(k - 1, -1, -1):
        prev_j, prev_u = back[h + 1][j][u]
        spans[h] = (prev_j, j)
        j, u = prev_j, prev_u
    return spans


def transform_operations(source, target):
    """Return the operations turning ``source`` into ``target``, or None.

    Each operation is ``(left, right, values)``: positions ``left..right``
    (1-based, inclusive) of the current array are replaced by ``values``.
    """
    source = [int(v) for v in source]
    target = [int(v) for v in target]
    segments = _segments(source)
    best = _max_subarray_table(target)
    lcp = _lcp_table(source, target)
    for _, _, threshold in segments:
        spans = _match(segments, threshold, target, best, lcp)
        if spans is None:
            continue
        k = len(segments)
        used = [0] * k
        operations = []
        while True:
            free = [h for h in range(k) if used[h] == 0]
            if not free:
                break
            pick = max(free, key=lambda h: segments[h][2])
            if segments[pick][2] < threshold:
                break
            used[pick] = 1
            left = sum(
                1 if used[h] else segments[h][1] - segments[h][0] for h in range(pick)
            )
            lo, hi, _ = segments[pick]
            operations.append((left + 1, left + hi - lo, (threshold,)))
        while True:
            placed = [h for h in range(k) if used[h] == 1]
            if not placed:
                break
            pick = min(placed, key=lambda h: best[spans[h][0]][spans[h][1]])
            used[pick] = 2
            left = sum(
                1 if used[h] == 1 else spans[h][1] - spans[h][0] for h in range(pick)
            )
            lo, hi = spans[pick]
            operations.append((left + 1, left + 1, tuple(target[lo:hi])))
        return operations
    return None


def main(argv=None):
    """Read test cases from standard input and print the operations per case."""
    tokens = iter(sys.stdin.read().split())
    out = []
    for _ in range(int(next(tokens))):
        n, m = int(next(tokens)), int(next(tokens))
        source = [int(next(tokens)) for _ in range(n)]
        target = [int(next(tokens)) for _ in range(m)]
        operations = transform_operations(source, target)
        if operations is None:
            out.append("-1\n")
            continue
        half = len(operations) // 2
        out.append(f"{len(operations)}\n")
        for index, (left, right, values) in enumerate(operations):
            if index < half:
                out.append(f"{left} {right} 1\n{values[0]}\n")
            else:
                out.append(f"{left} {right} {len(values)}\n")
                out.append("".join(f"{v} " for v in values) + "\n")
    sys.stdout.write("".join(out))
    return 0