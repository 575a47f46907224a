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

"""Physical layout of a complex value and aligned storage for it.

A value of precision P with component size ``s`` occupies ``2*s`` bytes:
the real component at offset 0 followed by the imaginary component at
offset ``s``, with no padding. Its storage is aligned to ``2*s`` bytes
(4 for HALF, 8 for SINGLE, 16 for DOUBLE), which is what vectorized
load/store paths and native paired-scalar complex types assume.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from duplex.precision import Precision, is_implicit, promote
from duplex.types import ComplexArrayNP, ComponentArrayNP

if TYPE_CHECKING:
    from duplex.complex import ComplexValue


@dataclass(frozen=True)
class Layout:
    """Size, alignment and structured dtype of one complex value."""

    precision: Precision
    size: int  # bytes, 2 * itemsize
    alignment: int  # bytes, 2 * itemsize
    dtype: np.dtype  # {real, imag} at offsets 0 and itemsize


def _make_layout(precision: Precision) -> Layout:
    s = precision.itemsize
    dtype = np.dtype(
        {
            "names": ["real", "imag"],
            "formats": [precision.scalar_type, precision.scalar_type],
            "offsets": [0, s],
            "itemsize": 2 * s,
        }
    )
    return Layout(precision=precision, size=2 * s, alignment=2 * s, dtype=dtype)


_LAYOUTS: dict[Precision, Layout] = {p: _make_layout(p) for p in Precision}


def layout_of(precision: Precision) -> Layout:
    """Return the layout of a complex value at `precision`."""
    return _LAYOUTS[Precision.of(precision)]


def _aligned_bytes(nbytes: int, alignment: int) -> np.ndarray:
    # Over-allocate, then slice to the first aligned address
    raw = np.zeros(nbytes + alignment, dtype=np.uint8)
    offset = -raw.ctypes.data % alignment
    return raw[offset : offset + nbytes]


def aligned_storage(precision: Precision) -> ComponentArrayNP:
    """Allocate zeroed two-slot storage ``[real, imag]`` for one value."""
    layout = layout_of(precision)
    return _aligned_bytes(layout.size, layout.alignment).view(layout.precision.scalar_type)


def aligned_empty(count: int, precision: Precision) -> np.ndarray:
    """Allocate a zeroed, aligned structured array of `count` values.

    Args:
        count: Number of complex values.
        precision: Component precision.

    Returns
    -------
        Array of shape (count,) with the layout's structured dtype whose data
        address is a multiple of the layout alignment.
    """
    if count < 0:
        msg = f"count must be non-negative, got {count}"
        raise ValueError(msg)
    layout = layout_of(precision)
    return _aligned_bytes(count * layout.size, layout.alignment).view(layout.dtype)


def is_aligned(array: np.ndarray, precision: Precision) -> bool:
    """Return True if `array` starts at an address aligned for `precision`."""
    return array.ctypes.data % layout_of(precision).alignment == 0


def _precision_of_packed(array: np.ndarray) -> Precision:
    if array.dtype.names != ("real", "imag"):
        msg = f"Expected a packed {{real, imag}} array, got dtype {array.dtype}"
        raise TypeError(msg)
    return Precision.of(array.dtype["real"])


def pack(values: Iterable["ComplexValue"], precision: Precision | None = None) -> np.ndarray:
    """Copy complex values into an aligned structured array.

    Args:
        values: Complex values of any precision.
        precision: Target precision. Defaults to the widest precision among
            `values` (DOUBLE when empty). Every value must convert implicitly,
            i.e. `precision` may not be narrower than any value.

    Returns
    -------
        Structured array of shape (len(values),).

    Raises
    ------
        TypeError: If packing would narrow a value.
    """
    items = list(values)
    if precision is None:
        precision = Precision.DOUBLE
        if items:
            precision = items[0].precision
            for z in items[1:]:
                precision = promote(precision, z.precision)
    precision = Precision.of(precision)

    out = aligned_empty(len(items), precision)
    for i, z in enumerate(items):
        if not is_implicit(z.precision, precision):
            msg = (
                f"Packing value {i} would narrow {z.precision.name} to {precision.name}; "
                "convert it explicitly with astype() first"
            )
            raise TypeError(msg)
        out[i] = (z.real, z.imag)
    return out


def unpack(array: np.ndarray) -> list["ComplexValue"]:
    """Copy a packed structured array back into complex values."""
    from duplex.complex import ComplexValue

    precision = _precision_of_packed(array)
    return [ComplexValue(item["real"], item["imag"], precision) for item in array]


def as_native(array: np.ndarray) -> ComplexArrayNP:
    """View a packed array as NumPy's native complex type without copying.

    Raises
    ------
        TypeError: For HALF, which has no native NumPy complex type.
    """
    precision = _precision_of_packed(array)
    native = precision.native_complex
    if native is None:
        msg = f"{precision.name} precision has no native NumPy complex type"
        raise TypeError(msg)
    return array.view(native)


def from_native(array: ComplexArrayNP) -> np.ndarray:
    """View a native complex64/complex128 array as a packed array without copying."""
    precision = Precision.of(array.dtype)
    if precision.native_complex is None or array.dtype != precision.native_complex:
        msg = f"Expected a complex64 or complex128 array, got dtype {array.dtype}"
        raise TypeError(msg)
    return array.view(layout_of(precision).dtype)


__all__ = [
    "Layout",
    "aligned_empty",
    "aligned_storage",
    "as_native",
    "from_native",
    "is_aligned",
    "layout_of",
    "pack",
    "unpack",
]
