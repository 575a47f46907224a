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

"""Text input/output for complex values, delegated to the host complex type.

Output is whatever the NumPy complex scalar of matching precision prints,
e.g. ``(3+4j)``. Input is whatever Python's ``complex()`` accepts, so every
rendered value parses back to the same components.
"""

from typing import TextIO

from duplex.complex import ComplexValue
from duplex.precision import Precision


def dumps(value: ComplexValue, format_spec: str = "") -> str:
    """Render `value` through the host complex formatter."""
    return format(value, format_spec)


def parse(text: str, precision: Precision = Precision.DOUBLE) -> ComplexValue:
    """Parse `text` with the host complex parser into a value at `precision`.

    Raises
    ------
        ValueError: If the host parser rejects `text`.
    """
    return ComplexValue(0, 0, precision).assign(complex(text.strip()))


def write(value: ComplexValue, fp: TextIO, format_spec: str = "") -> None:
    """Write the rendering of `value` to a text stream."""
    fp.write(dumps(value, format_spec))


def read(fp: TextIO, precision: Precision = Precision.DOUBLE) -> ComplexValue:
    """Read one whitespace-delimited token from a text stream and parse it.

    Leading whitespace is skipped; the whitespace character ending the token
    is consumed.

    Raises
    ------
        ValueError: On end of stream before a token, or on malformed text.
    """
    chars: list[str] = []
    while True:
        ch = fp.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    if not chars:
        msg = "End of stream while reading a complex value"
        raise ValueError(msg)
    return parse("".join(chars), precision)


__all__ = ["dumps", "parse", "read", "write"]
