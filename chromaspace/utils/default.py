from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], *defaults: Optional[T]) -> Optional[T]:
    """
    Return the first of ``value`` and ``defaults`` that is not None.

    >>> value_or_default(None, None, 255)
    255
    """
    for candidate in (value, *defaults):
        if candidate is not None:
            return candidate
    return None
