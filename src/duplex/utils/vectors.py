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

"""Load arithmetic vectors (operands and expected results) from YAML."""

from pathlib import Path
from typing import Any

from duplex.complex import ComplexValue
from duplex.precision import Precision
from duplex.config import load_config


def _to_value(item: Any, precision: Precision) -> ComplexValue | float:  # noqa: ANN401
    """``[re, im]`` becomes a ComplexValue, a bare number stays a real."""
    if isinstance(item, list):
        re, im = item
        return ComplexValue(float(re), float(im), precision)
    return float(item)


def load_vectors(path: Path, precision: Precision = Precision.DOUBLE) -> dict[str, list[dict]]:
    """Load arithmetic vectors grouped by operation.

    The file maps an operation name to a list of cases, each with ``lhs``,
    ``rhs`` and ``expected`` entries. Complex operands are written as
    ``[re, im]`` pairs, real operands as plain numbers. Numbers may be
    strings such as ``"inf"`` or ``"nan"``.

    Args:
        path: YAML file.
        precision: Precision of the complex operands.

    Returns
    -------
        Mapping operation name -> list of cases with ComplexValue/float fields.
    """
    raw = load_config(path)
    vectors: dict[str, list[dict]] = {}
    for op, cases in raw.items():
        vectors[op] = [
            {key: _to_value(value, precision) for key, value in case.items()} for case in cases
        ]
    return vectors


__all__ = ["load_vectors"]
