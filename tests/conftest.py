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

"""Pytest configuration for duplex tests."""

import logging

import pytest

from duplex.interop import accelerator_casts_available

logger = logging.getLogger(__name__)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment before tests run."""
    # Silence noisy JAX debug logs
    logging.getLogger("jax").setLevel(logging.WARNING)
    logging.getLogger("jax._src").setLevel(logging.WARNING)
    logging.getLogger("jax._src.dispatch").setLevel(logging.WARNING)
    logging.getLogger("jax._src.xla_bridge").setLevel(logging.CRITICAL)
    logging.getLogger("jax._src.compiler").setLevel(logging.WARNING)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests marked with @pytest.mark.accelerator when JAX casts are unavailable."""
    if accelerator_casts_available():
        return

    skip_accelerator = pytest.mark.skip(
        reason="Skipping accelerator tests: JAX missing or DUPLEX_ENABLE_ACCELERATOR=OFF"
    )
    skipped_count = 0
    for item in items:
        if "accelerator" in item.keywords:
            item.add_marker(skip_accelerator)
            skipped_count += 1

    if skipped_count > 0:
        logger.info(
            f"Skipping {skipped_count} accelerator tests. "
            "To enable these tests, install the 'accelerator' extra."
        )
