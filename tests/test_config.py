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

"""Tests for `duplex.config`."""

from pathlib import Path

import pytest

from duplex.config import accelerator_enabled, load_config, load_env_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test in an empty directory without duplex variables set."""
    # setenv first so teardown also removes values loaded from env files
    for name in ("DUPLEX_ENABLE_ACCELERATOR", "DUPLEX_ENV_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_accelerator_enabled_by_default() -> None:
    """Without configuration the accelerator casts are enabled."""
    assert accelerator_enabled()


@pytest.mark.parametrize(("value", "expected"), [("OFF", False), ("off", False), ("ON", True)])
def test_accelerator_env_var(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    """DUPLEX_ENABLE_ACCELERATOR=OFF disables the casts."""
    monkeypatch.setenv("DUPLEX_ENABLE_ACCELERATOR", value)
    assert accelerator_enabled() is expected


def test_env_file_is_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """An explicit env file feeds the switch."""
    env_file = tmp_path / "custom.env"
    env_file.write_text("DUPLEX_ENABLE_ACCELERATOR=OFF\n")
    monkeypatch.setenv("DUPLEX_ENV_FILE", str(env_file))
    assert load_env_file() == env_file
    assert not accelerator_enabled()


def test_env_file_found_upward(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A .env.duplex file in a parent directory is found."""
    (tmp_path / ".env.duplex").write_text("DUPLEX_ENABLE_ACCELERATOR=OFF\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert load_env_file() == tmp_path.resolve() / ".env.duplex"
    assert not accelerator_enabled()


def test_process_environment_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Variables already set are not overridden by the env file."""
    (tmp_path / ".env.duplex").write_text("DUPLEX_ENABLE_ACCELERATOR=OFF\n")
    monkeypatch.setenv("DUPLEX_ENABLE_ACCELERATOR", "ON")
    assert accelerator_enabled()


def test_load_config(tmp_path: Path) -> None:
    """YAML files load into dictionaries; empty files load as {}."""
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("precision: single\nvalues: [1, 2]\n")
    assert load_config(cfg) == {"precision": "single", "values": [1, 2]}
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_config(empty) == {}
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
