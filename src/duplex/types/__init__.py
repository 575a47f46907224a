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
Public entry point for canonical scalar and array type aliases.

Exports only the selected dtypes to keep the codebase consistent:
  - NumPy: HalfNP, SingleNP, DoubleNP, ComplexSingleNP, ComplexDoubleNP
           and their array aliases
  - JAX:   SingleJAX, DoubleJAX, ComplexSingleJAX, ComplexDoubleJAX
           (only when JAX is installed)
"""

# NumPy types (always available)
from .arrays import (
    ComplexArrayNP,
    ComplexDoubleNP,
    ComplexSingleNP,
    ComponentArrayNP,
    DoubleArrayNP,
    DoubleNP,
    HalfArrayNP,
    HalfNP,
    SingleArrayNP,
    SingleNP,
)

__all__ = [
    "ComplexArrayNP",
    "ComplexDoubleNP",
    "ComplexSingleNP",
    "ComponentArrayNP",
    "DoubleArrayNP",
    "DoubleNP",
    "HalfArrayNP",
    "HalfNP",
    "SingleArrayNP",
    "SingleNP",
]

# JAX types (only when JAX is installed)
try:
    from .arrays import (  # noqa: F401
        ComplexDoubleJAX,
        ComplexSingleJAX,
        DoubleJAX,
        SingleJAX,
    )

    __all__.extend(["ComplexDoubleJAX", "ComplexSingleJAX", "DoubleJAX", "SingleJAX"])
except ImportError:
    # JAX not available - accelerator casts disabled
    pass
