"""
List transforms: chunk, uniq, flatten, group_by.

All functions return new lists and leave their input untouched. Elements are
never copied; the output lists hold the same element references as the input.
"""

import math
from typing import Any, Callable, Dict, Hashable, Iterable, List, Sequence, TypeVar, Union

from lodash_lite.core.types import is_sequence, kind_of
from lodash_lite.objects.access import get

T = TypeVar("T")


def chunk(array: Sequence[T], size: int = 1) -> List[List[T]]:
    """
    Split array into consecutive lists of length size.

    The last chunk holds whatever is left and may be shorter. A size below 1
    has no meaningful chunking and yields an empty list.

    Args:
        array: Sequence to split.
        size: Chunk length (truncated to an int).

    Returns:
        List of chunks.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    size = int(size)
    if size < 1:
        return []
    return [list(array[start:start + size]) for start in range(0, len(array), size)]


def uniq(array: Iterable[T]) -> List[T]:
    """
    De-duplicate array, keeping the first occurrence of each value.

    **Equality**: hashable values are compared by value within the same value
    kind, so 1 and 1.0 collapse but 1 and True do not. Unhashable values
    (lists, dicts) are compared by identity: two equal but distinct dicts are
    both kept. Every float NaN counts as the same value, even though
    nan != nan.

    Example:
        >>> uniq([1, 2, 2, 3, 3, 4])
        [1, 2, 3, 4]
    """
    seen = set()
    result = []
    for item in array:
        if isinstance(item, float) and math.isnan(item):
            marker = ("nan",)
        else:
            try:
                marker = (kind_of(item), item)
                hash(marker)
            except TypeError:
                marker = ("identity", id(item))
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def flatten(array: Iterable[Any]) -> List[Any]:
    """
    Flatten array a single level deep.

    List and tuple elements are spliced into the result; every other element
    is kept as-is. Deeper nesting is preserved.

    Example:
        >>> flatten([[1, 2], [3, 4], [5]])
        [1, 2, 3, 4, 5]
        >>> flatten([[1, [2]], 3])
        [1, [2], 3]
    """
    result = []
    for item in array:
        if is_sequence(item):
            result.extend(item)
        else:
            result.append(item)
    return result


def group_by(
    array: Iterable[T],
    iteratee: Union[Callable[[T], Hashable], str],
) -> Dict[Hashable, List[T]]:
    """
    Group elements by the key computed for each of them.

    **Ordering**: groups appear in the order their key is first seen, and
    elements keep their input order within each group.

    **Shorthand**: a string iteratee is treated as a property path, so
    group_by(users, "address.city") groups by get(user, "address.city").

    Args:
        array: Elements to group.
        iteratee: Function returning the group key for an element, or a
            property path string.

    Returns:
        Dict mapping each key to the list of elements that produced it.

    Example:
        >>> group_by([1.3, 2.1, 2.4], int)
        {1: [1.3], 2: [2.1, 2.4]}
    """
    if isinstance(iteratee, str):
        path = iteratee
        iteratee = lambda item: get(item, path)

    result: Dict[Hashable, List[T]] = {}
    for item in array:
        result.setdefault(iteratee(item), []).append(item)
    return result
