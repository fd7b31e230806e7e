"""
Qubit State Conversions

Pure conversion functions between the three equivalent descriptions of a
single-qubit pure state:

- spherical angles (inclination θ, azimuth φ)
- a unit vector in the Y-up scene frame (pole on +Y, equator in X-Z)
- the complex amplitude pair |ψ⟩ = α|0⟩ + β|1⟩

State parameterization:
    α = cos(θ/2)
    β = e^(iφ) sin(θ/2)

Scene frame mapping:
    x =  sin θ sin φ
    y =  cos θ
    z = -sin θ cos φ
"""

import numpy as np

from .bloch_constants import TWO_PI, validate_azimuth_mode
from .complex_number import ComplexNumber

__all__ = [
    'normalize_azimuth',
    'angles_to_vector',
    'vector_to_angles',
    'angles_to_bloch_vector',
    'angles_to_amplitudes',
    'angles_to_state_vector',
    'amplitudes_to_angles',
    'amplitude_probability',
]

# ============================================================================
# Azimuth Normalization
# ============================================================================

def normalize_azimuth(azimuth):
    """
    Wrap an azimuth into [0, 2π).

    Uses ((φ mod 2π) + 2π) mod 2π so that a tiny negative input which
    rounds to 2π after the first modulo still lands on 0.

    Args:
        azimuth: Any real angle in radians

    Returns:
        float: Equivalent angle in [0, 2π)
    """
    return float(((azimuth % TWO_PI) + TWO_PI) % TWO_PI)

# ============================================================================
# Angles <-> Scene Vector
# ============================================================================

def angles_to_vector(inclination, azimuth):
    """
    Convert spherical angles to a point on the unit sphere (Y-up frame).

    Args:
        inclination: Polar angle θ from +Y
        azimuth: Angle φ around the Y axis

    Returns:
        np.array: [x, y, z]
    """
    sin_incl = np.sin(inclination)

    x = sin_incl * np.sin(azimuth)
    y = np.cos(inclination)
    z = -sin_incl * np.cos(azimuth)

    return np.array([x, y, z], dtype=float)

def vector_to_angles(x, y, z, mode=None):
    """
    Convert a unit vector (Y-up frame) to spherical angles.

    Args:
        x, y, z: Vector components, treated as already normalized
        mode: 'atan2' (default) or 'legacy'
            'atan2':  φ = atan2(x, -z), correct in every quadrant
            'legacy': φ = atan(x / -z), mirrors φ when -z < 0 and yields
                      inf/NaN arithmetic when z == 0

    Returns:
        tuple: (inclination, azimuth); azimuth in [0, 2π) or NaN
    """
    mode = validate_azimuth_mode(mode)

    x = np.float64(x)
    y = np.float64(y)
    z = np.float64(z)

    if mode == 'legacy':
        with np.errstate(divide='ignore', invalid='ignore'):
            inclination = np.arccos(y)
            azimuth = (np.arctan(x / -z) + TWO_PI) % TWO_PI
    else:
        inclination = np.arccos(np.clip(y, -1.0, 1.0))
        # + 0.0 turns -0.0 into +0.0 so the poles report φ = 0, not π
        azimuth = np.arctan2(x + 0.0, -z + 0.0) % TWO_PI

    return float(inclination), normalize_azimuth(azimuth)

def angles_to_bloch_vector(inclination, azimuth):
    """
    Convert spherical angles to the textbook Z-up Bloch vector.

    Returns:
        np.array: [sin θ cos φ, sin θ sin φ, cos θ]
    """
    x = np.sin(inclination) * np.cos(azimuth)
    y = np.sin(inclination) * np.sin(azimuth)
    z = np.cos(inclination)

    return np.array([x, y, z], dtype=float)

# ============================================================================
# Angles <-> Amplitudes
# ============================================================================

def angles_to_amplitudes(inclination, azimuth):
    """
    Convert spherical angles to the amplitudes of outcomes 0 and 1.

    Returns:
        tuple: (ComplexNumber α, ComplexNumber β)
    """
    sin_half = np.sin(inclination / 2)

    amplitude0 = ComplexNumber(np.cos(inclination / 2), 0.0)
    amplitude1 = ComplexNumber(np.cos(azimuth) * sin_half, np.sin(azimuth) * sin_half)

    return amplitude0, amplitude1

def angles_to_state_vector(inclination, azimuth):
    """
    Convert spherical angles to a complex state vector.

    Returns:
        np.array: Complex state vector [α, β]
    """
    amplitude0, amplitude1 = angles_to_amplitudes(inclination, azimuth)
    return np.array([complex(amplitude0), complex(amplitude1)], dtype=complex)

def amplitudes_to_angles(amplitude0, amplitude1):
    """
    Convert an amplitude pair to spherical angles.

    The pair is normalized and its global phase discarded, so any non-zero
    multiple of a state maps to the same point on the sphere.

    Args:
        amplitude0: Amplitude of |0⟩ (ComplexNumber or complex)
        amplitude1: Amplitude of |1⟩ (ComplexNumber or complex)

    Returns:
        tuple: (inclination, azimuth)

    Raises:
        ValueError: If both amplitudes are zero or not finite
    """
    alpha = complex(amplitude0)
    beta = complex(amplitude1)

    norm = np.hypot(abs(alpha), abs(beta))
    if not np.isfinite(norm) or norm == 0.0:
        raise ValueError(f"Cannot normalize amplitudes ({alpha}, {beta})")

    alpha /= norm
    beta /= norm

    inclination = 2 * np.arccos(np.clip(abs(alpha), 0.0, 1.0))
    azimuth = np.angle(beta) - np.angle(alpha)

    return float(inclination), normalize_azimuth(azimuth)

def amplitude_probability(amplitude):
    """Squared magnitude |a|² of an amplitude."""
    return amplitude.magnitude() ** 2
