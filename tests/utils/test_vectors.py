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

"""Arithmetic vectors from tests/vectors, checked at every precision."""

import operator
from pathlib import Path

import pytest

from duplex import ComplexValue, Precision
from duplex.utils import load_vectors

VECTORS_PATH = Path(__file__).parent.parent / "vectors" / "arithmetic.yaml"

OPS = {"add": operator.add, "sub": operator.sub, "mul": operator.mul, "div": operator.truediv}
IN_PLACE = {"add": operator.iadd, "sub": operator.isub, "mul": operator.imul, "div": operator.itruediv}


@pytest.mark.parametrize("precision", list(Precision))
def test_vectors_load_as_values(precision: Precision) -> None:
    """Pairs load as ComplexValue at the requested precision, numbers as floats."""
    vectors = load_vectors(VECTORS_PATH, precision)
    assert set(vectors) == set(OPS)
    case = vectors["add"][1]
    assert isinstance(case["lhs"], ComplexValue)
    assert case["lhs"].precision is precision
    assert isinstance(case["rhs"], float)


@pytest.mark.parametrize("precision", list(Precision))
@pytest.mark.parametrize("op", sorted(OPS))
def test_binary_operators_match_vectors(op: str, precision: Precision) -> None:
    """Every binary form reproduces the expected result exactly."""
    for case in load_vectors(VECTORS_PATH, precision)[op]:
        result = OPS[op](case["lhs"], case["rhs"])
        assert result == case["expected"], case
        assert result.precision is precision


@pytest.mark.parametrize("precision", list(Precision))
@pytest.mark.parametrize("op", sorted(OPS))
def test_compound_operators_match_vectors(op: str, precision: Precision) -> None:
    """Compound forms with a complex receiver reproduce the expected result."""
    for case in load_vectors(VECTORS_PATH, precision)[op]:
        if not isinstance(case["lhs"], ComplexValue):
            continue
        receiver = case["lhs"].copy()
        result = IN_PLACE[op](receiver, case["rhs"])
        assert result is receiver
        assert result == case["expected"], case
