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

"""Helper for comparing sequences of complex values."""

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from duplex.complex import ComplexValue

logger = logging.getLogger(__name__)


def _as_complex128(x: Any) -> np.ndarray:  # noqa: ANN401
    if isinstance(x, ComplexValue):
        x = [x]
    if isinstance(x, Iterable) and not isinstance(x, np.ndarray):
        x = [complex(v) for v in x]
    return np.asarray(x, dtype=np.complex128).ravel()


def max_abs_diff(
    x: Any,  # noqa: ANN401
    y: Any,  # noqa: ANN401
    eps: float = 1e-12,
) -> tuple[float, float, float, float]:
    """Compare two sequences of complex values and log the differences.

    Args:
        x: First value, sequence of values or complex array to compare.
        y: Second value, sequence of values or complex array (the reference).
        eps: Small value to avoid division by zero.

    Returns
    -------
        max_abs: Maximum absolute difference.
        mean_abs: Mean absolute difference.
        max_rel_pct: Maximum relative percentage difference.
        mean_rel_pct: Mean relative percentage difference.
    """
    x = _as_complex128(x)
    y = _as_complex128(y)

    abs_diff = np.abs(x - y)
    denom = np.maximum(np.abs(y), eps)

    max_abs = float(abs_diff.max(initial=0.0))
    mean_abs = float(abs_diff.mean()) if abs_diff.size else 0.0
    max_rel_pct = float((abs_diff / denom).max(initial=0.0) * 100.0)
    mean_rel_pct = float((abs_diff / denom).mean() * 100.0) if abs_diff.size else 0.0

    logger.info("\t max abs: %s", max_abs)
    logger.info("\t mean abs: %s", mean_abs)
    logger.info("\t max rel: %.4f %%", max_rel_pct)
    logger.info("\t mean rel: %.4f %%", mean_rel_pct)

    return (max_abs, mean_abs, max_rel_pct, mean_rel_pct)
