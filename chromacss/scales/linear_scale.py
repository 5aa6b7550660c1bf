from __future__ import annotations
from typing import Callable, Optional, Tuple, Union

import numpy as np
from numpy import ndarray

from ..errors import InvalidArgumentError
from ..types.color_types import Scalar
from ..utils import value_or_default

ScaleInput = Union[Scalar, ndarray]
UNIT_INTERVAL = (0.0, 1.0)


class LinearScale:
    """
    Affine mapping from a domain interval onto a range interval, in the
    spirit of ``d3.scale.linear()``.

    The default domain and range are both ``[0, 1]``. Bounds do not have to
    be ordered: ``set_domain(10, 0)`` simply reverses the direction of the
    mapping. Setters return ``self`` so calls can be chained::

        LinearScale().set_domain(10, 20).set_range(0, 5).apply(15)  # 2.5

    ``invert`` mutates the scale in place. Do not share a scale between
    threads that invert it; take a :meth:`copy` first.
    """

    __slots__ = ('_domain_min', '_domain_max', '_range_min', '_range_max')

    def __init__(
        self,
        domain: Optional[Tuple[Scalar, Scalar]] = None,
        range: Optional[Tuple[Scalar, Scalar]] = None,
    ) -> None:
        self.set_domain(*value_or_default(domain, UNIT_INTERVAL))
        self.set_range(*value_or_default(range, UNIT_INTERVAL))

    # ------------------ BOUNDS ------------------
    @property
    def domain_min(self) -> float:
        return self._domain_min

    @property
    def domain_max(self) -> float:
        return self._domain_max

    @property
    def range_min(self) -> float:
        return self._range_min

    @property
    def range_max(self) -> float:
        return self._range_max

    @property
    def domain(self) -> Tuple[float, float]:
        return self._domain_min, self._domain_max

    @property
    def range(self) -> Tuple[float, float]:
        return self._range_min, self._range_max

    def set_domain(self, min_value: Scalar, max_value: Scalar) -> LinearScale:
        self._domain_min = float(min_value)
        self._domain_max = float(max_value)
        return self

    def set_range(self, min_value: Scalar, max_value: Scalar) -> LinearScale:
        self._range_min = float(min_value)
        self._range_max = float(max_value)
        return self

    # ------------------ MAPPING ------------------
    def apply(self, x: ScaleInput) -> ScaleInput:
        """
        Map ``x`` from the domain onto the range.

        Works elementwise on numpy arrays.

        Raises:
            InvalidArgumentError: the domain has zero width.
        """
        width = self._domain_max - self._domain_min
        if width == 0:
            raise InvalidArgumentError(
                f"Cannot apply a scale with a zero-width domain {self.domain}"
            )
        if isinstance(x, ndarray):
            x = x.astype(np.float64)
        return (self._range_max - self._range_min) * (x - self._domain_min) / width + self._range_min

    def __call__(self, x: ScaleInput) -> ScaleInput:
        return self.apply(x)

    def invert(self) -> LinearScale:
        """Swap domain and range in place. Returns ``self``."""
        self._domain_min, self._domain_max, self._range_min, self._range_max = (
            self._range_min, self._range_max, self._domain_min, self._domain_max
        )
        return self

    def apply_inverse(self, x: ScaleInput) -> ScaleInput:
        """Map ``x`` from the range back onto the domain. The scale is left untouched."""
        return self.copy().invert().apply(x)

    def copy(self) -> LinearScale:
        return LinearScale(self.domain, self.range)

    def mapping(self) -> Callable[[ScaleInput], ScaleInput]:
        """A function applying the current mapping, unaffected by later changes to this scale."""
        return self.copy().apply

    def inverted_mapping(self) -> Callable[[ScaleInput], ScaleInput]:
        """A function applying the current inverse mapping, unaffected by later changes to this scale."""
        return self.copy().apply_inverse

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearScale):
            return NotImplemented
        return self.domain == other.domain and self.range == other.range

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"
