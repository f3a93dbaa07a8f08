"""Classic comparison sorts. Each returns a new sorted list."""

__all__ = [
    "bubble_sort",
    "recursive_bubble_sort",
    "insertion_sort",
    "recursive_insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
]


def bubble_sort(items):
    """Sort by repeatedly swapping adjacent pairs; stops early once sorted."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def _bubble_pass(values, n):
    if n <= 1:
        return
    swapped = False
    for i in range(n - 1):
        if values[i] > values[i + 1]:
            values[i], values[i + 1] = values[i + 1], values[i]
            swapped = True
    if swapped:
        _bubble_pass(values, n - 1)


def recursive_bubble_sort(items):
    """Bubble sort where each pass recurses on the unsorted prefix."""
    values = list(items)
    _bubble_pass(values, len(values))
    return values


def insertion_sort(items):
    """Sort by sinking each element back into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j] < values[j - 1]:
            values[j], values[j - 1] = values[j - 1], values[j]
            j -= 1
    return values


def _insert_prefix(values, n):
    if n <= 1:
        return
    _insert_prefix(values, n - 1)
    j = n - 1
    while j > 0 and values[j] < values[j - 1]:
        values[j], values[j - 1] = values[j - 1], values[j]
        j -= 1


def recursive_insertion_sort(items):
    """Insertion sort that first sorts the prefix recursively."""
    values = list(items)
    _insert_prefix(values, len(values))
    return values


def selection_sort(items):
    """Sort by moving the smallest remaining element into place."""
    values = list(items)
    for i in range(len(values)):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items):
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values, low, high):
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i < high:
            i += 1
        while values[j] > pivot and j > low:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items):
    """Quick sort using the first element of each range as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(values, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return values