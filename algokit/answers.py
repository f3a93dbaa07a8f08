"""Binary search over the answer space: choose a value, test if it is feasible, narrow."""

from math import inf

__all__ = [
    "aggressive_cows",
    "min_eating_rate",
    "median_of_two",
    "allocate_books",
    "kth_element",
    "smallest_divisor",
]


def _ceil_div(numerator, denominator):
    return -(-numerator // denominator)


def _can_place(stalls, cows, gap):
    placed = 1
    last = stalls[0]
    for position in stalls[1:]:
        if position - last >= gap:
            placed += 1
            last = position
        if placed >= cows:
            return True
    return False


def aggressive_cows(stalls, cows):
    """Return the largest minimum distance at which ``cows`` cows fit into ``stalls``.

    The stall positions need not be sorted; the argument is left unchanged.
    """
    if not stalls:
        raise ValueError("no stalls given")
    ordered = sorted(stalls)
    low, high = 1, ordered[-1] - ordered[0]
    while low <= high:
        mid = (low + high) // 2
        if _can_place(ordered, cows, mid):
            low = mid + 1
        else:
            high = mid - 1
    return high


def _hours_needed(piles, rate):
    return sum(_ceil_div(pile, rate) for pile in piles)


def min_eating_rate(piles, hours):
    """Return the smallest bananas-per-hour rate that finishes ``piles`` within ``hours``."""
    low, high = 1, max(piles, default=0)
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= hours:
            high = mid - 1
        else:
            low = mid + 1
    return low


def median_of_two(first, second):
    """Return the median of the union of two sorted sequences as a float."""
    if len(first) > len(second):
        first, second = second, first
    m, n = len(first), len(second)
    if m + n == 0:
        raise ValueError("both sequences are empty")
    half = (m + n + 1) // 2
    low, high = 0, m
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        l1 = first[cut1 - 1] if cut1 else -inf
        l2 = second[cut2 - 1] if cut2 else -inf
        r1 = first[cut1] if cut1 < m else inf
        r2 = second[cut2] if cut2 < n else inf
        if l1 <= r2 and l2 <= r1:
            if (m + n) % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    return 0.0


def _students_needed(books, limit):
    students = 1
    load = books[0]
    for pages in books[1:]:
        if load + pages > limit:
            students += 1
            load = pages
        else:
            load += pages
    return students


def allocate_books(books, students):
    """Return the least possible maximum of pages any student reads.

    Books are handed out in order, each student taking a contiguous run.
    Returns -1 when there are more students than books.
    """
    if not books:
        raise ValueError("no books given")
    low = max(books)
    if students > len(books):
        return -1
    high = sum(books)
    while low <= high:
        mid = (low + high) // 2
        if _students_needed(books, mid) > students:
            low = mid + 1
        else:
            high = mid - 1
    return low


def kth_element(first, second, k):
    """Return the ``k``-th smallest (1-based) element of two sorted sequences combined."""
    if len(second) < len(first):
        first, second = second, first
    n, m = len(first), len(second)
    if not 1 <= k <= n + m:
        raise IndexError(f"k must be between 1 and {n + m}")
    low, high = max(0, k - m), min(k, n)
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = k - cut1
        l1 = first[cut1 - 1] if cut1 else -inf
        l2 = second[cut2 - 1] if cut2 else -inf
        r1 = first[cut1] if cut1 < n else inf
        r2 = second[cut2] if cut2 < m else inf
        if l1 <= r2 and l2 <= r1:
            return max(l1, l2)
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    return -1


def smallest_divisor(items, limit):
    """Return the smallest divisor whose rounded-up quotients sum to at most ``limit``."""
    low, high = 1, max(items, default=0)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(item, mid) for item in items) <= limit:
            high = mid - 1
        else:
            low = mid + 1
    return low