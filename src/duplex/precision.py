# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Precision variants of a complex value and the conversion policy between them.

Three closed variants exist, ordered by precision: HALF < SINGLE < DOUBLE.
The ordering alone decides whether a conversion may happen implicitly
(widening, or same precision) or must be requested explicitly (narrowing).
"""

from enum import IntEnum
from typing import Any

import numpy as np

from duplex.types import ComplexDoubleNP, ComplexSingleNP, DoubleNP, HalfNP, SingleNP


class Precision(IntEnum):
    """Component precision; the value is the scalar width in bits."""

    HALF = 16
    SINGLE = 32
    DOUBLE = 64

    @property
    def scalar_type(self) -> type[np.floating]:
        """NumPy scalar type holding one component."""
        return _SCALAR_TYPES[self]

    @property
    def itemsize(self) -> int:
        """Size in bytes of one component."""
        return self.value // 8

    @property
    def native_complex(self) -> type[np.complexfloating] | None:
        """NumPy complex type with the same layout, or None for HALF."""
        return _NATIVE_COMPLEX.get(self)

    @classmethod
    def of(cls, x: Any) -> "Precision":  # noqa: ANN401
        """Resolve a precision from a Precision, a dtype-like or a name.

        Args:
            x: A `Precision`, a floating dtype-like (``np.float32``,
                ``"float16"``), a native complex dtype-like (``np.complex64``)
                or a variant name (``"single"``).

        Returns
        -------
            The matching `Precision`.

        Raises
        ------
            TypeError: If `x` does not name one of the three precisions.
        """
        if isinstance(x, cls):
            return x
        if isinstance(x, str) and x.upper() in cls.__members__:
            return cls[x.upper()]
        dtype = None
        if x is not None:
            try:
                dtype = np.dtype(x)
            except TypeError:
                pass
        if dtype is not None:
            for precision in cls:
                if dtype == precision.scalar_type:
                    return precision
                if precision.native_complex is not None and dtype == precision.native_complex:
                    return precision
        msg = f"Cannot resolve a complex precision from {x!r}"
        raise TypeError(msg)


_SCALAR_TYPES: dict[Precision, type[np.floating]] = {
    Precision.HALF: HalfNP,
    Precision.SINGLE: SingleNP,
    Precision.DOUBLE: DoubleNP,
}

_NATIVE_COMPLEX: dict[Precision, type[np.complexfloating]] = {
    Precision.SINGLE: ComplexSingleNP,
    Precision.DOUBLE: ComplexDoubleNP,
}


def is_implicit(src: Precision, dst: Precision) -> bool:
    """Return True if converting `src` to `dst` may happen implicitly.

    Same-precision copies and widening conversions are implicit; narrowing
    conversions must be requested explicitly.
    """
    return dst >= src


def promote(a: Precision, b: Precision) -> Precision:
    """Return the wider of two precisions."""
    return max(a, b)


__all__ = ["Precision", "is_implicit", "promote"]
