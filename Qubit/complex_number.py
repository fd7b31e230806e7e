"""
Complex Number Value Type

Minimal immutable complex number used to report probability amplitudes.
"""

import numpy as np

__all__ = ['ComplexNumber']


class ComplexNumber:
    """
    Immutable complex value with real and imaginary parts.

    Attributes:
        real (float): Real part
        imaginary (float): Imaginary part
    """

    __slots__ = ('_real', '_imaginary')

    def __init__(self, real, imaginary=0.0):
        object.__setattr__(self, '_real', float(real))
        object.__setattr__(self, '_imaginary', float(imaginary))

    def __setattr__(self, name, value):
        raise AttributeError("ComplexNumber is immutable")

    def __reduce__(self):
        # Rebuild through __init__; slot restore would hit __setattr__
        return (ComplexNumber, (self._real, self._imaginary))

    @classmethod
    def from_complex(cls, value):
        """Build from a Python or numpy complex (or real) scalar."""
        value = complex(value)
        return cls(value.real, value.imag)

    @property
    def real(self):
        return self._real

    @property
    def imaginary(self):
        return self._imaginary

    def magnitude(self):
        """
        Absolute value sqrt(real² + imaginary²).

        Returns:
            float: Non-negative magnitude, zero only for (0, 0)
        """
        return float(np.hypot(self._real, self._imaginary))

    def phase(self):
        """Argument in (-π, π]."""
        return float(np.arctan2(self._imaginary, self._real))

    def conjugate(self):
        return ComplexNumber(self._real, -self._imaginary)

    def is_close(self, other, tolerance=1e-9):
        """Component-wise comparison within an absolute tolerance."""
        other = _coerce(other)
        return (abs(self._real - other.real) <= tolerance
                and abs(self._imaginary - other.imaginary) <= tolerance)

    def __complex__(self):
        return complex(self._real, self._imaginary)

    def __eq__(self, other):
        if isinstance(other, (ComplexNumber, complex, float, int)):
            other = _coerce(other)
            return self._real == other.real and self._imaginary == other.imaginary
        return NotImplemented

    def __hash__(self):
        # Matches hash() of an equal int, float or complex
        return hash(complex(self._real, self._imaginary))

    def __repr__(self):
        return f"ComplexNumber(real={self._real:.6g}, imaginary={self._imaginary:.6g})"

    def __str__(self):
        sign = '-' if self._imaginary < 0 else '+'
        return f"{self._real:.3f}{sign}{abs(self._imaginary):.3f}i"


def _coerce(value):
    if isinstance(value, ComplexNumber):
        return value
    return ComplexNumber.from_complex(value)
