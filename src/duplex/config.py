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

"""Configuration utilities.

Runtime switches come from environment variables. An optional ``.env.duplex``
file is loaded with python-dotenv before they are read; variables already set
in the environment always win.

- DUPLEX_ENABLE_ACCELERATOR: ``ON`` (default) or ``OFF``. ``OFF`` disables
  the accelerator casts even when JAX is installed.
- DUPLEX_ENV_FILE: explicit path of the env file to load.
"""

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE_NAME = ".env.duplex"


def _find_env_file() -> Path | None:
    """Locate the env file.

    Priority 1: Use DUPLEX_ENV_FILE if set
    Priority 2: Search upward from the current working directory
    """
    env_file_path = os.environ.get("DUPLEX_ENV_FILE")
    if env_file_path:
        env_file = Path(env_file_path)
        logger.debug(f"Using DUPLEX_ENV_FILE: {env_file}")
        if env_file.exists():
            return env_file
        logger.warning(
            f"DUPLEX_ENV_FILE points to non-existent file: {env_file}. "
            "Falling back to searching parent directories."
        )

    current_dir = Path.cwd().resolve()
    while current_dir != current_dir.parent:  # Stop at filesystem root
        candidate = current_dir / ENV_FILE_NAME
        if candidate.exists():
            logger.debug(f"Found {ENV_FILE_NAME} at: {candidate}")
            return candidate
        current_dir = current_dir.parent
    return None


def load_env_file() -> Path | None:
    """Load the env file into os.environ without overriding set variables.

    Returns
    -------
        Path of the loaded file, or None if no file was found.
    """
    env_file = _find_env_file()
    if env_file is None:
        logger.debug(f"No {ENV_FILE_NAME} file found, using process environment only")
        return None
    load_dotenv(dotenv_path=env_file, override=False)
    return env_file


def accelerator_enabled() -> bool:
    """Return False only if DUPLEX_ENABLE_ACCELERATOR is set to OFF."""
    load_env_file()
    return os.environ.get("DUPLEX_ENABLE_ACCELERATOR", "ON").upper() != "OFF"


def load_config(cfg_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        cfg_path: Path to config file.

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If `cfg_path` does not exist.
    """
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


__all__ = ["ENV_FILE_NAME", "accelerator_enabled", "load_config", "load_env_file"]
