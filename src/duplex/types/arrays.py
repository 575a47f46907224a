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

"""
Centralized scalar and array type aliases per precision.

Each precision maps to exactly one scalar type so that values never pick up
an accidental cast:

- NumPy: HalfNP (float16), SingleNP (float32), DoubleNP (float64) and the
  native complex types ComplexSingleNP (complex64), ComplexDoubleNP
  (complex128). There is no NumPy complex type for half precision.
- JAX: SingleJAX, DoubleJAX, ComplexSingleJAX, ComplexDoubleJAX
  (only when JAX is installed; JAX has no half-precision complex type)
"""

import numpy as np
import numpy.typing as npt
from typing import TypeAlias

# NumPy scalar types (always available)
HalfNP = np.float16
"""NumPy half-precision scalar type (float16)."""

SingleNP = np.float32
"""NumPy single-precision scalar type (float32)."""

DoubleNP = np.float64
"""NumPy double-precision scalar type (float64)."""

ComplexSingleNP = np.complex64
"""NumPy native complex type with single-precision components (complex64)."""

ComplexDoubleNP = np.complex128
"""NumPy native complex type with double-precision components (complex128)."""

# NumPy array types for type hinting
HalfArrayNP: TypeAlias = npt.NDArray[HalfNP]
"""NumPy half-precision array type (NDArray[float16])."""

SingleArrayNP: TypeAlias = npt.NDArray[SingleNP]
"""NumPy single-precision array type (NDArray[float32])."""

DoubleArrayNP: TypeAlias = npt.NDArray[DoubleNP]
"""NumPy double-precision array type (NDArray[float64])."""

ComponentArrayNP: TypeAlias = HalfArrayNP | SingleArrayNP | DoubleArrayNP
"""Component storage of any precision (NDArray[float16 | float32 | float64])."""

ComplexArrayNP: TypeAlias = npt.NDArray[ComplexSingleNP] | npt.NDArray[ComplexDoubleNP]
"""NumPy native complex array type (NDArray[complex64 | complex128])."""

# JAX types (only available when JAX is installed)
try:
    import jax.numpy as jnp

    SingleJAX = jnp.float32
    """JAX single-precision scalar type (float32)."""

    DoubleJAX = jnp.float64
    """JAX double-precision scalar type (float64). Needs jax_enable_x64."""

    ComplexSingleJAX = jnp.complex64
    """JAX complex type with single-precision components (complex64)."""

    ComplexDoubleJAX = jnp.complex128
    """JAX complex type with double-precision components. Needs jax_enable_x64."""
except ImportError:
    # JAX not available - accelerator casts disabled
    pass
