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

"""Optional adapter for the accelerator-native complex representation.

The accelerator representation is a 0-d JAX complex array (``complex64`` or
``complex128``). The adapter is present only when JAX is installed and
``DUPLEX_ENABLE_ACCELERATOR`` is not ``OFF``; `accelerator_casts_available`
reports which (also readable as ``ACCELERATOR_CASTS_AVAILABLE``). The switch,
and any ``.env.duplex`` file feeding it, is read when an accelerator cast is
first attempted, never at import. The core value type behaves identically
either way, only the casts below are affected.

Reading components back from an accelerator value may synchronize with the
device, so that direction is tagged device-callable but not constexpr.
"""

import logging
from typing import Any

import numpy as np

from duplex.capabilities import constexpr, host_device
from duplex.config import accelerator_enabled
from duplex.precision import Precision

logger = logging.getLogger(__name__)

try:
    import jax
    import jax.numpy as jnp

    from duplex.types import ComplexDoubleJAX, ComplexSingleJAX, DoubleJAX, SingleJAX

    JAX_AVAILABLE = True
except ImportError:
    # JAX not available - accelerator casts disabled
    JAX_AVAILABLE = False


def accelerator_casts_available() -> bool:
    """Return True if JAX is installed and DUPLEX_ENABLE_ACCELERATOR is not OFF."""
    if not JAX_AVAILABLE:
        return False
    if not accelerator_enabled():
        logger.debug("JAX is installed but DUPLEX_ENABLE_ACCELERATOR=OFF; accelerator casts disabled")
        return False
    return True


def __getattr__(name: str) -> Any:  # noqa: ANN401
    if name == "ACCELERATOR_CASTS_AVAILABLE":
        return accelerator_casts_available()
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


def require_accelerator() -> None:
    """Raise RuntimeError unless the accelerator casts are available."""
    if not accelerator_casts_available():
        msg = (
            "Accelerator casts are not available. Install the 'accelerator' extra "
            "(jax) and make sure DUPLEX_ENABLE_ACCELERATOR is not set to OFF."
        )
        raise RuntimeError(msg)


def is_accelerator_complex(x: Any) -> bool:  # noqa: ANN401
    """Return True if `x` is a 0-d complex JAX array."""
    if not accelerator_casts_available():
        return False
    return isinstance(x, jax.Array) and x.ndim == 0 and jnp.iscomplexobj(x)


def default_dtype(precision: Precision) -> Any:  # noqa: ANN401
    """Accelerator complex type for `precision`; HALF widens to complex64."""
    require_accelerator()
    return ComplexDoubleJAX if precision is Precision.DOUBLE else ComplexSingleJAX


@constexpr
def to_accelerator(
    real: Any,  # noqa: ANN401
    imag: Any,  # noqa: ANN401
    precision: Precision,
    dtype: Any = None,  # noqa: ANN401
) -> Any:  # noqa: ANN401
    """Build a 0-d JAX complex array from components.

    Args:
        real: Real component.
        imag: Imaginary component.
        precision: Precision of the components.
        dtype: ``jnp.complex64`` or ``jnp.complex128``; defaults to the
            smallest accelerator type holding `precision` exactly.

    Returns
    -------
        0-d ``jax.Array`` of the requested complex dtype.

    Raises
    ------
        RuntimeError: If the accelerator adapter is unavailable.
    """
    require_accelerator()
    if dtype is None:
        dtype = default_dtype(precision)
    dtype = jnp.dtype(dtype)
    if dtype == ComplexDoubleJAX and not jax.config.jax_enable_x64:
        logger.warning(
            "complex128 requested but jax_enable_x64 is disabled; "
            "JAX will store the value as complex64"
        )
    component_dtype = DoubleJAX if dtype == ComplexDoubleJAX else SingleJAX
    # Components are widened on the host so HALF never reaches JAX as float16
    re = np.asarray(real).astype(component_dtype)
    im = np.asarray(imag).astype(component_dtype)
    return jax.lax.complex(jnp.asarray(re), jnp.asarray(im))


@host_device
def components(x: Any) -> tuple[np.floating, np.floating]:  # noqa: ANN401
    """Return the ``(real, imag)`` components of an accelerator value as NumPy scalars.

    Raises
    ------
        RuntimeError: If the accelerator adapter is unavailable.
    """
    require_accelerator()
    return np.asarray(jnp.real(x))[()], np.asarray(jnp.imag(x))[()]


__all__ = [
    "ACCELERATOR_CASTS_AVAILABLE",
    "JAX_AVAILABLE",
    "accelerator_casts_available",
    "components",
    "default_dtype",
    "is_accelerator_complex",
    "require_accelerator",
    "to_accelerator",
]
