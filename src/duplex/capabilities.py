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

"""Capability tags marking which execution contexts may invoke an operation.

A tag is plain metadata attached to a function; nothing is enforced at run
time. Kernel builders read the tags to decide which operations they may
trace into accelerator code and which may be folded ahead of time.

- HOST: callable from ordinary host code (every public operation).
- DEVICE: callable from accelerator-compiled code.
- CONSTEXPR: evaluable ahead of time when all operands are constants.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_ATTR = "__duplex_capabilities__"


class Capability(Enum):
    """Execution context an operation may be invoked from."""

    HOST = "host"
    DEVICE = "device"
    CONSTEXPR = "constexpr"


def capabilities(*tags: Capability) -> Callable[[F], F]:
    """Attach capability tags to a function (HOST is always implied)."""

    def decorate(fn: F) -> F:
        existing = getattr(fn, _ATTR, frozenset())
        setattr(fn, _ATTR, existing | {Capability.HOST, *tags})
        return fn

    return decorate


def host_device(fn: F) -> F:
    """Mark `fn` as callable from both host and accelerator code."""
    return capabilities(Capability.DEVICE)(fn)


def constexpr(fn: F) -> F:
    """Mark `fn` as dual-context callable and constant-evaluable."""
    return capabilities(Capability.DEVICE, Capability.CONSTEXPR)(fn)


def capabilities_of(obj: Any) -> frozenset[Capability]:  # noqa: ANN401
    """Return the capability tags of a function, method or property.

    Properties report the tags of their getter.
    """
    if isinstance(obj, property):
        obj = obj.fget
    obj = getattr(obj, "__func__", obj)
    return getattr(obj, _ATTR, frozenset())


def has_capability(obj: Any, tag: Capability) -> bool:  # noqa: ANN401
    """Return True if `obj` carries `tag`."""
    return tag in capabilities_of(obj)


__all__ = [
    "Capability",
    "capabilities",
    "capabilities_of",
    "constexpr",
    "has_capability",
    "host_device",
]
