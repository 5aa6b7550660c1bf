from typing import Any, Optional, TypeVar
from collections.abc import Sized

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return ``value`` unless it is None, in which case return ``default``."""
    return value if value is not None else default


def get_dimension(element: Any) -> int:
    """Number of channels in ``element``: 0 for None, 1 for a bare scalar."""
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1
