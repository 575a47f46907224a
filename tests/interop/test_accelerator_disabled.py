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

"""Behavior of the accelerator casts when the adapter is disabled."""

import os
from pathlib import Path

import pytest

from duplex import ComplexValue, Precision
from duplex.interop import accelerator


@pytest.fixture
def disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the accelerator adapter is unavailable."""
    monkeypatch.setattr(accelerator, "accelerator_casts_available", lambda: False)


@pytest.mark.usefixtures("disabled")
def test_casts_raise_runtime_error() -> None:
    """Casts to and from the accelerator raise RuntimeError."""
    with pytest.raises(RuntimeError, match="DUPLEX_ENABLE_ACCELERATOR"):
        ComplexValue(1, 2).to_accelerator()
    with pytest.raises(RuntimeError):
        ComplexValue.from_accelerator(object())
    with pytest.raises(RuntimeError):
        ComplexValue(1, 2).assign_accelerator(object())
    with pytest.raises(RuntimeError):
        accelerator.components(object())
    assert accelerator.ACCELERATOR_CASTS_AVAILABLE is False


@pytest.mark.usefixtures("disabled")
def test_core_is_unaffected() -> None:
    """Arithmetic and host casts work the same without the adapter."""
    z = ComplexValue(3, 4, Precision.SINGLE) * ComplexValue(1, 2, Precision.SINGLE)
    assert z == ComplexValue(-5, 10, Precision.SINGLE)
    assert complex(z) == -5 + 10j
    assert not accelerator.is_accelerator_complex(1 + 2j)
    with pytest.raises(TypeError):
        z.assign(object())


@pytest.mark.skipif(not accelerator.JAX_AVAILABLE, reason="JAX not installed")
def test_switch_is_read_on_first_cast(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The env file is only loaded once an accelerator cast is attempted."""
    (tmp_path / ".env.duplex").write_text("DUPLEX_ENABLE_ACCELERATOR=OFF\n")
    monkeypatch.chdir(tmp_path)
    # setenv first so teardown also removes values loaded from the env file
    for name in ("DUPLEX_ENABLE_ACCELERATOR", "DUPLEX_ENV_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    z = ComplexValue(1, 2, Precision.HALF) * 3 + ComplexValue(0.5, 0)
    z.assign(1 - 1j)
    assert z == ComplexValue(1, -1)
    assert "DUPLEX_ENABLE_ACCELERATOR" not in os.environ

    with pytest.raises(RuntimeError):
        z.to_accelerator()
    assert os.environ["DUPLEX_ENABLE_ACCELERATOR"] == "OFF"
    assert not accelerator.accelerator_casts_available()
