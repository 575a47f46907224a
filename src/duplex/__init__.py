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

"""Portable value-semantic complex numbers at half, single and double precision."""

from . import (
    interop as interop,
    layout as layout,
    stream as stream,
    utils as utils,
)
from .__version__ import __version__ as __version__
from .capabilities import Capability, capabilities_of, has_capability
from .complex import (
    ComplexValue,
    imaginary_double,
    imaginary_half,
    imaginary_single,
    make_imaginary,
)
from .interop import accelerator_casts_available
from .layout import Layout, layout_of
from .precision import Precision, is_implicit, promote

__all__ = [
    "Capability",
    "ComplexValue",
    "Layout",
    "Precision",
    "accelerator_casts_available",
    "capabilities_of",
    "has_capability",
    "imaginary_double",
    "imaginary_half",
    "imaginary_single",
    "is_implicit",
    "layout_of",
    "make_imaginary",
    "promote",
]
