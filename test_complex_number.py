"""
Tests for the ComplexNumber value type.
"""

import copy
import pickle

import numpy as np
import pytest

from Qubit.complex_number import ComplexNumber

# ============================================================================
# Magnitude
# ============================================================================

def test_magnitude_three_four_five():
    assert ComplexNumber(3, 4).magnitude() == 5.0

def test_magnitude_zero():
    assert ComplexNumber(0, 0).magnitude() == 0.0

def test_magnitude_never_negative():
    for real, imaginary in [(-3, -4), (-1, 0), (0, -2), (1e-200, 1e-200), (1e200, 1e200)]:
        magnitude = ComplexNumber(real, imaginary).magnitude()
        assert magnitude > 0.0
        assert np.isfinite(magnitude)

# ============================================================================
# Value Semantics
# ============================================================================

def test_components_and_default_imaginary():
    value = ComplexNumber(1.5)
    assert value.real == 1.5
    assert value.imaginary == 0.0

def test_immutable():
    value = ComplexNumber(1, 2)
    with pytest.raises(AttributeError):
        value.real = 5
    with pytest.raises(AttributeError):
        value._imaginary = 5

def test_equality_and_hash():
    assert ComplexNumber(1, 2) == ComplexNumber(1.0, 2.0)
    assert ComplexNumber(1, 2) != ComplexNumber(1, -2)
    assert ComplexNumber(1, 2) == complex(1, 2)
    assert ComplexNumber(3, 0) == 3
    assert len({ComplexNumber(1, 2), ComplexNumber(1.0, 2.0)}) == 1

    # Equal values of other numeric types hash alike
    assert hash(ComplexNumber(3, 0)) == hash(3)
    assert hash(ComplexNumber(2.5, 0)) == hash(2.5)
    assert hash(ComplexNumber(1, 2)) == hash(complex(1, 2))
    assert len({ComplexNumber(3, 0), 3, 3.0, 3 + 0j}) == 1
    assert {3: "three"}[ComplexNumber(3, 0)] == "three"

def test_copy_and_pickle():
    value = ComplexNumber(0.6, -0.8)

    assert copy.copy(value) == value
    assert copy.deepcopy(value) == value
    assert copy.deepcopy([value])[0] == value

    restored = pickle.loads(pickle.dumps(value))
    assert restored == value
    assert isinstance(restored, ComplexNumber)
    with pytest.raises(AttributeError):
        restored.real = 1.0

def test_is_close():
    assert ComplexNumber(0.1 + 0.2, 0).is_close(ComplexNumber(0.3, 0))
    assert not ComplexNumber(0.3, 0).is_close(ComplexNumber(0.31, 0))
    assert ComplexNumber(0.3, 0).is_close(0.31, tolerance=0.02)

def test_complex_conversions():
    value = ComplexNumber.from_complex(np.complex128(2 - 3j))
    assert value == ComplexNumber(2, -3)
    assert complex(value) == 2 - 3j
    assert value.conjugate() == ComplexNumber(2, 3)

def test_phase():
    assert np.isclose(ComplexNumber(0, 1).phase(), np.pi / 2)
    assert np.isclose(ComplexNumber(-1, 0).phase(), np.pi)
    assert ComplexNumber(0, 0).phase() == 0.0

def test_string_forms():
    assert str(ComplexNumber(0.5, -0.25)) == "0.500-0.250i"
    assert repr(ComplexNumber(3, 4)) == "ComplexNumber(real=3, imaginary=4)"
