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

"""Adapter for the host complex representation.

The host representation is Python's built-in ``complex`` together with the
NumPy complex scalars (``np.complex64``, ``np.complex128``).
"""

import numbers
from typing import Any

import numpy as np

from duplex.capabilities import constexpr

HOST_DTYPES: tuple[type, ...] = (complex, np.complex64, np.complex128)


def is_host_complex(x: Any) -> bool:  # noqa: ANN401
    """Return True if `x` is a host complex value (and not a real number)."""
    return isinstance(x, (complex, np.complexfloating)) or (
        isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real)
    )


@constexpr
def components(x: Any) -> tuple[Any, Any]:  # noqa: ANN401
    """Return the ``(real, imag)`` components of a host complex value."""
    return x.real, x.imag


@constexpr
def to_host(real: Any, imag: Any, dtype: type = complex) -> Any:  # noqa: ANN401
    """Build a host complex value from components.

    Args:
        real: Real component.
        imag: Imaginary component.
        dtype: ``complex``, ``np.complex64`` or ``np.complex128``. The
            components are widened or narrowed to the host type's own
            precision.

    Returns
    -------
        A value of type `dtype`.
    """
    if dtype is complex:
        return complex(float(real), float(imag))
    if dtype in (np.complex64, np.complex128):
        out = np.zeros((), dtype=dtype)
        out.real = real
        out.imag = imag
        return out[()]
    msg = f"Unsupported host complex type {dtype!r}; expected one of {HOST_DTYPES}"
    raise TypeError(msg)


__all__ = ["HOST_DTYPES", "components", "is_host_complex", "to_host"]
