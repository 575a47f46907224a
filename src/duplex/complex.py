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

"""Value-semantic complex number at half, single or double precision.

A `ComplexValue` holds its two components in one aligned two-slot NumPy
array (real first, see `duplex.layout`). All arithmetic happens on NumPy
scalars of the value's precision, so HALF values round to float16 after
every operation exactly as an accelerator kernel would.

Conversions follow the precision ordering HALF < SINGLE < DOUBLE:

- widening (and same precision) is implicit: ``ComplexValue(z, precision=P)``
  and mixed-precision binary operators;
- narrowing is explicit only: ``z.astype(P)``. Requesting it implicitly
  raises TypeError.

Compound operators (``+= -= *= /=`` and their method forms ``add_``,
``sub_``, ``mul_``, ``div_``, ``assign``) mutate the receiver and return it.
Binary operators are built on top of them by copying one operand first.

Floating-point special cases are never reported: division by zero yields
inf/nan, narrowing may overflow to inf, and no warning is emitted.
"""

import numbers
from typing import Any, Self

import numpy as np

from duplex.capabilities import constexpr, host_device
from duplex.interop import accelerator, host
from duplex.layout import aligned_storage, layout_of
from duplex.precision import Precision, is_implicit, promote

_PRECISION_BY_DTYPE: dict[np.dtype, Precision] = {np.dtype(p.scalar_type): p for p in Precision}


def _quiet() -> np.errstate:
    # Floating-point exceptions follow IEEE semantics silently
    return np.errstate(all="ignore")


def _is_real(x: Any) -> bool:  # noqa: ANN401
    return isinstance(x, numbers.Real)


def _convert(scalar_type: type[np.floating], value: Any) -> np.floating:  # noqa: ANN401
    with _quiet():
        try:
            return scalar_type(value)
        except OverflowError:
            # Integers beyond the float range round to signed infinity
            return scalar_type(np.inf if value > 0 else -np.inf)


def _unsupported(op: str, other: Any) -> TypeError:  # noqa: ANN401
    msg = f"unsupported operand type(s) for {op}: 'ComplexValue' and '{type(other).__name__}'"
    return TypeError(msg)


class ComplexValue:
    """A (real, imag) pair at one of three precisions.

    Args:
        real: Real component, or a value to convert: another `ComplexValue`
            (implicit widening only) or a host complex (``complex``,
            ``np.complex64``, ``np.complex128``).
        imag: Imaginary component. Must be omitted when converting.
        precision: Component precision. Defaults to the source precision when
            converting a `ComplexValue`, DOUBLE otherwise.

    Raises
    ------
        TypeError: If converting a `ComplexValue` would narrow it, or the
            arguments are not numbers.
    """

    __slots__ = ("_storage",)

    # Keep NumPy scalars from swallowing reflected operators
    __array_ufunc__ = None

    # Mutable, therefore unhashable
    __hash__ = None  # type: ignore[assignment]

    @constexpr
    def __init__(
        self,
        real: Any = 0,  # noqa: ANN401
        imag: Any = None,  # noqa: ANN401
        precision: Precision | None = None,
    ) -> None:
        if isinstance(real, ComplexValue):
            if imag is not None:
                msg = "imag must be omitted when converting a ComplexValue"
                raise TypeError(msg)
            src = real.precision
            precision = src if precision is None else Precision.of(precision)
            if not is_implicit(src, precision):
                msg = (
                    f"Narrowing {src.name} to {precision.name} must be explicit; "
                    f"use astype(Precision.{precision.name})"
                )
                raise TypeError(msg)
            re, im = real.real, real.imag
        elif host.is_host_complex(real):
            if imag is not None:
                msg = "imag must be omitted when converting a host complex value"
                raise TypeError(msg)
            re, im = host.components(real)
        elif _is_real(real) and (imag is None or _is_real(imag)):
            re, im = real, (0 if imag is None else imag)
        else:
            msg = (
                f"Cannot construct ComplexValue from ({type(real).__name__}, "
                f"{type(imag).__name__}); use ComplexValue.from_accelerator() for device values"
            )
            raise TypeError(msg)

        precision = Precision.DOUBLE if precision is None else Precision.of(precision)
        self._storage = aligned_storage(precision)
        self._storage[0] = _convert(precision.scalar_type, re)
        self._storage[1] = _convert(precision.scalar_type, im)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    @constexpr
    def real(self) -> np.floating:
        """Real component."""
        return self._storage[0]

    @real.setter
    @constexpr
    def real(self, value: Any) -> None:  # noqa: ANN401
        self._storage[0] = self._scalar(value)

    @property
    @constexpr
    def imag(self) -> np.floating:
        """Imaginary component."""
        return self._storage[1]

    @imag.setter
    @constexpr
    def imag(self, value: Any) -> None:  # noqa: ANN401
        self._storage[1] = self._scalar(value)

    @property
    def precision(self) -> Precision:
        return _PRECISION_BY_DTYPE[self._storage.dtype]

    @property
    def dtype(self) -> np.dtype:
        """Scalar dtype of one component."""
        return self._storage.dtype

    @property
    def nbytes(self) -> int:
        return self._storage.nbytes

    @property
    def address(self) -> int:
        """Address of the real component; a multiple of the layout alignment."""
        return self._storage.ctypes.data

    @property
    def storage(self) -> np.ndarray:
        """Read-only view of the ``[real, imag]`` storage."""
        view = self._storage.view()
        view.flags.writeable = False
        return view

    def to_bytes(self) -> bytes:
        return self._storage.tobytes()

    @classmethod
    def from_bytes(cls, data: bytes, precision: Precision) -> Self:
        """Build a value from its raw layout bytes (real first)."""
        precision = Precision.of(precision)
        size = layout_of(precision).size
        if len(data) != size:
            msg = f"{precision.name} complex values are {size} bytes, got {len(data)}"
            raise ValueError(msg)
        re, im = np.frombuffer(data, dtype=precision.scalar_type, count=2)
        return cls(re, im, precision)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @constexpr
    def astype(self, precision: Precision) -> Self:
        """Explicit conversion to any precision; returns a new value.

        Each component is converted independently with NumPy's own rounding.
        Precision loss and overflow to inf are not reported.
        """
        return type(self)(self.real, self.imag, Precision.of(precision))

    @constexpr
    def copy(self) -> Self:
        return type(self)(self)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def __reduce__(self) -> tuple:
        return (type(self), (self.real, self.imag, self.precision))

    @constexpr
    def to_host(self, dtype: type = complex) -> Any:  # noqa: ANN401
        """Explicit cast to a host complex type (``complex``, ``np.complex64``, ``np.complex128``)."""
        return host.to_host(self.real, self.imag, dtype)

    @constexpr
    def __complex__(self) -> complex:
        return self.to_host(complex)

    @classmethod
    @constexpr
    def from_host(cls, value: Any, precision: Precision = Precision.DOUBLE) -> Self:  # noqa: ANN401
        """Build a value from a host complex, copying its components."""
        if not host.is_host_complex(value):
            msg = f"Expected a host complex value, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(value, precision=precision)

    @constexpr
    def to_accelerator(self, dtype: Any = None) -> Any:  # noqa: ANN401
        """Explicit cast to a 0-d JAX complex array.

        Raises
        ------
            RuntimeError: If the accelerator adapter is unavailable.
        """
        return accelerator.to_accelerator(self.real, self.imag, self.precision, dtype)

    @classmethod
    @host_device
    def from_accelerator(cls, value: Any, precision: Precision | None = None) -> Self:  # noqa: ANN401
        """Build a value from a 0-d JAX complex array.

        Args:
            value: 0-d ``complex64`` or ``complex128`` JAX array.
            precision: Target precision; defaults to the array's own
                (complex64 -> SINGLE, complex128 -> DOUBLE).

        Raises
        ------
            RuntimeError: If the accelerator adapter is unavailable.
            TypeError: If `value` is not a 0-d complex JAX array.
        """
        accelerator.require_accelerator()
        if not accelerator.is_accelerator_complex(value):
            msg = f"Expected a 0-d complex JAX array, got {type(value).__name__}"
            raise TypeError(msg)
        re, im = accelerator.components(value)
        if precision is None:
            precision = Precision.of(value.dtype)
        return cls(re, im, precision)

    # ------------------------------------------------------------------
    # Compound assignment
    # ------------------------------------------------------------------

    def _scalar(self, value: Any) -> np.floating:  # noqa: ANN401
        return _convert(self._storage.dtype.type, value)

    @constexpr
    def assign(self, other: Any) -> Self:  # noqa: ANN401
        """Assign in place and return self.

        A real operand replaces only the real component; the imaginary
        component is left unchanged. A complex operand (any precision, or a
        host complex) replaces both components. Accelerator values go through
        `assign_accelerator`.
        """
        if isinstance(other, ComplexValue):
            re, im = other.real, other.imag
        elif _is_real(other):
            self._storage[0] = self._scalar(other)
            return self
        elif host.is_host_complex(other):
            re, im = host.components(other)
        else:
            raise _unsupported("assign", other)
        self._storage[0] = self._scalar(re)
        self._storage[1] = self._scalar(im)
        return self

    @host_device
    def assign_accelerator(self, value: Any) -> Self:  # noqa: ANN401
        """Assign both components from a 0-d JAX complex array and return self.

        Raises
        ------
            RuntimeError: If the accelerator adapter is unavailable.
            TypeError: If `value` is not a 0-d complex JAX array.
        """
        accelerator.require_accelerator()
        if not accelerator.is_accelerator_complex(value):
            msg = f"Expected a 0-d complex JAX array, got {type(value).__name__}"
            raise TypeError(msg)
        re, im = accelerator.components(value)
        self._storage[0] = self._scalar(re)
        self._storage[1] = self._scalar(im)
        return self

    @constexpr
    def add_(self, other: Any) -> Self:  # noqa: ANN401
        """In-place addition; a real operand only touches the real component."""
        with _quiet():
            if isinstance(other, ComplexValue):
                self._storage[0] += other.real
                self._storage[1] += other.imag
            elif _is_real(other):
                self._storage[0] += self._scalar(other)
            else:
                raise _unsupported("+=", other)
        return self

    @constexpr
    def sub_(self, other: Any) -> Self:  # noqa: ANN401
        """In-place subtraction; a real operand only touches the real component."""
        with _quiet():
            if isinstance(other, ComplexValue):
                self._storage[0] -= other.real
                self._storage[1] -= other.imag
            elif _is_real(other):
                self._storage[0] -= self._scalar(other)
            else:
                raise _unsupported("-=", other)
        return self

    @constexpr
    def mul_(self, other: Any) -> Self:  # noqa: ANN401
        """In-place multiplication.

        A real operand scales both components. For a complex operand,
        (a + bi) * (c + di) = (a*c - b*d) + (a*d + b*c)i, computed from the
        receiver's original components.
        """
        with _quiet():
            if isinstance(other, ComplexValue):
                a, b = self._storage
                c, d = other.real, other.imag
                self._storage[0] = a * c - b * d
                self._storage[1] = a * d + b * c
            elif _is_real(other):
                self._storage *= self._scalar(other)
            else:
                raise _unsupported("*=", other)
        return self

    @constexpr
    def div_(self, other: Any) -> Self:  # noqa: ANN401
        """In-place division.

        A real operand divides both components. For a complex operand,
        (a + bi) / (c + di) = (a*c + b*d)/(c^2 + d^2) + (b*c - a*d)/(c^2 + d^2)i.
        The denominator is not rescaled, so it may overflow or underflow for
        operands of extreme magnitude.
        """
        with _quiet():
            if isinstance(other, ComplexValue):
                a, b = self._storage
                c, d = other.real, other.imag
                denominator = c * c + d * d
                self._storage[0] = (a * c + b * d) / denominator
                self._storage[1] = (b * c - a * d) / denominator
            elif _is_real(other):
                self._storage /= self._scalar(other)
            else:
                raise _unsupported("/=", other)
        return self

    def __iadd__(self, other: Any) -> Self:  # noqa: ANN401
        if not (isinstance(other, ComplexValue) or _is_real(other)):
            return NotImplemented
        return self.add_(other)

    def __isub__(self, other: Any) -> Self:  # noqa: ANN401
        if not (isinstance(other, ComplexValue) or _is_real(other)):
            return NotImplemented
        return self.sub_(other)

    def __imul__(self, other: Any) -> Self:  # noqa: ANN401
        if not (isinstance(other, ComplexValue) or _is_real(other)):
            return NotImplemented
        return self.mul_(other)

    def __itruediv__(self, other: Any) -> Self:  # noqa: ANN401
        if not (isinstance(other, ComplexValue) or _is_real(other)):
            return NotImplemented
        return self.div_(other)

    # ------------------------------------------------------------------
    # Derived operators
    # ------------------------------------------------------------------

    def _copy_for(self, other: Any) -> Self | None:  # noqa: ANN401
        """Copy self as the left operand of a binary operator, or None if unsupported."""
        if isinstance(other, ComplexValue):
            return self.astype(promote(self.precision, other.precision))
        if _is_real(other):
            return self.copy()
        return None

    @constexpr
    def __pos__(self) -> Self:
        return self.copy()

    @constexpr
    def __neg__(self) -> Self:
        with _quiet():
            return type(self)(-self.real, -self.imag, self.precision)

    @constexpr
    def __add__(self, other: Any) -> Self:  # noqa: ANN401
        result = self._copy_for(other)
        return NotImplemented if result is None else result.add_(other)

    @constexpr
    def __sub__(self, other: Any) -> Self:  # noqa: ANN401
        result = self._copy_for(other)
        return NotImplemented if result is None else result.sub_(other)

    @constexpr
    def __mul__(self, other: Any) -> Self:  # noqa: ANN401
        result = self._copy_for(other)
        return NotImplemented if result is None else result.mul_(other)

    @constexpr
    def __truediv__(self, other: Any) -> Self:  # noqa: ANN401
        result = self._copy_for(other)
        return NotImplemented if result is None else result.div_(other)

    @constexpr
    def __radd__(self, other: Any) -> Self:  # noqa: ANN401
        if not _is_real(other):
            return NotImplemented
        return self.copy().add_(other)

    @constexpr
    def __rsub__(self, other: Any) -> Self:  # noqa: ANN401
        if not _is_real(other):
            return NotImplemented
        return (-self).add_(other)

    @constexpr
    def __rmul__(self, other: Any) -> Self:  # noqa: ANN401
        if not _is_real(other):
            return NotImplemented
        return self.copy().mul_(other)

    @constexpr
    def __rtruediv__(self, other: Any) -> Self:  # noqa: ANN401
        if not _is_real(other):
            return NotImplemented
        return type(self)(other, 0, self.precision).div_(self)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @constexpr
    def __eq__(self, other: object) -> bool:
        if isinstance(other, ComplexValue):
            return bool(self.real == other.real and self.imag == other.imag)
        if _is_real(other):
            return bool(self.real == self._scalar(other) and self.imag == 0)
        return NotImplemented

    @constexpr
    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _host_type(self) -> type[np.complexfloating]:
        # Smallest NumPy complex type holding this precision exactly
        return self.precision.native_complex or np.complex64

    def __str__(self) -> str:
        return str(self.to_host(self._host_type()))

    def __format__(self, format_spec: str) -> str:
        return format(self.to_host(self._host_type()), format_spec)

    def __repr__(self) -> str:
        return f"ComplexValue({self.real}, {self.imag}, precision=Precision.{self.precision.name})"


@constexpr
def make_imaginary(value: Any, precision: Precision = Precision.DOUBLE) -> ComplexValue:  # noqa: ANN401
    """Return ``0 + value*i`` at `precision`."""
    return ComplexValue(0, value, precision)


@constexpr
def imaginary_half(value: Any) -> ComplexValue:  # noqa: ANN401
    """Return ``0 + value*i`` at HALF precision."""
    return make_imaginary(value, Precision.HALF)


@constexpr
def imaginary_single(value: Any) -> ComplexValue:  # noqa: ANN401
    """Return ``0 + value*i`` at SINGLE precision."""
    return make_imaginary(value, Precision.SINGLE)


@constexpr
def imaginary_double(value: Any) -> ComplexValue:  # noqa: ANN401
    """Return ``0 + value*i`` at DOUBLE precision."""
    return make_imaginary(value, Precision.DOUBLE)


__all__ = [
    "ComplexValue",
    "imaginary_double",
    "imaginary_half",
    "imaginary_single",
    "make_imaginary",
]
