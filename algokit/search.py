"""Binary-search routines over sorted and rotated sorted sequences.

Functions that look up a position return -1 when there is none, as str.find does.
"""

__all__ = [
    "binary_search",
    "find_rotation",
    "search_rotated",
    "single_non_duplicate",
    "first_occurrence",
    "last_occurrence",
    "first_and_last_position",
    "search_insert",
    "lower_bound",
    "upper_bound",
    "find_peak_element",
]


def binary_search(items, target):
    """Return an index of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            return mid
    return -1


def find_rotation(items):
    """Return the index of the minimum of a rotated sorted sequence.

    That index is how many times the sorted sequence was rotated right.
    """
    low, high = 0, len(items) - 1
    min_index = 0
    while low <= high:
        mid = (low + high) // 2
        if items[low] <= items[high]:
            if items[min_index] > items[low]:
                min_index = low
            break
        if items[low] <= items[mid]:
            if items[min_index] > items[low]:
                min_index = low
            low += 1
        else:
            high -= 1
            if items[min_index] > items[mid]:
                min_index = mid
    return min_index


def search_rotated(items, target):
    """Return whether ``target`` is in a rotated sorted sequence (duplicates allowed)."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return True
        if items[low] == items[mid] == items[high]:
            low += 1
            high -= 1
            continue
        if items[low] <= items[mid]:
            if items[low] <= target <= items[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif items[mid] <= target <= items[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def single_non_duplicate(items):
    """Return the one value appearing once in a sorted sequence of pairs.

    Returns -1 if the sequence has no such element; raises ValueError if empty.
    """
    n = len(items)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or items[0] != items[1]:
        return items[0]
    if items[-1] != items[-2]:
        return items[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if items[mid] != items[mid - 1] and items[mid] != items[mid + 1]:
            return items[mid]
        # Before the single element, pairs start at even indices.
        partner = mid - 1 if mid % 2 else mid + 1
        if items[mid] == items[partner]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def first_occurrence(items, target):
    """Return the first index of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    first = -1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            first = mid
            high = mid - 1
    return first


def last_occurrence(items, target):
    """Return the last index of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    last = -1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            last = mid
            low = mid + 1
    return last


def first_and_last_position(items, target):
    """Return ``(first, last)`` indices of ``target``; ``(-1, -1)`` if absent."""
    return first_occurrence(items, target), last_occurrence(items, target)


def search_insert(items, target):
    """Return an index of ``target``, or where it would be inserted to keep order."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            return mid
    return low


def lower_bound(items, target):
    """Return an index whose value is >= ``target``.

    On an exact match the matched index is returned (any of equal values);
    otherwise the smallest index with a greater value, or ``len(items)``.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            return mid
    return low


def upper_bound(items, target):
    """Return the smallest index whose value is greater than ``target``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_peak_element(items):
    """Return the value of a peak: an element greater than its neighbours.

    Returns -1 if none is found; raises ValueError if ``items`` is empty.
    """
    n = len(items)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or items[0] > items[1]:
        return items[0]
    if items[-1] > items[-2]:
        return items[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if items[mid - 1] < items[mid] > items[mid + 1]:
            return items[mid]
        if items[mid] > items[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1