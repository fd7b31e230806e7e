"""
Qubit State - High-Level Interface

Single-qubit pure state stored as Bloch sphere angles, with conversions
to a scene-frame unit vector, complex amplitudes and outcome probabilities.
"""

import logging

import numpy as np

from .bloch_constants import (
    BLOCH_CARDINAL_STATES,
    LABEL_TOLERANCE,
    POLE_EPSILON,
    TWO_PI,
    resolve_state_name,
    validate_azimuth_mode,
)
from .state_conversions import (
    amplitude_probability,
    amplitudes_to_angles,
    angles_to_amplitudes,
    angles_to_bloch_vector,
    angles_to_state_vector,
    angles_to_vector,
    normalize_azimuth,
    vector_to_angles,
)

__all__ = ['QubitState', 'create_state', 'create_from_vector', 'create_from_amplitudes']

logger = logging.getLogger(__name__)

# ============================================================================
# Main Qubit State Class
# ============================================================================

class QubitState:
    """
    Single-qubit pure state held as (inclination, azimuth).

    The scene vector, amplitudes and probabilities are computed from the
    two stored angles on every query and never cached, so they cannot
    drift apart.

    Attributes:
        inclination (float): Polar angle θ from the |0⟩ pole (conventionally 0 to π)
        azimuth (float): Angle φ around the pole, always in [0, 2π)
        azimuth_mode (str): How set_from_vector recovers φ ('atan2' or 'legacy')
    """

    def __init__(self, inclination=0.0, azimuth=0.0, azimuth_mode=None):
        """
        Initialize qubit state.

        Args:
            inclination: Initial polar angle (default: 0 = |0⟩ state)
            azimuth: Initial azimuthal angle (default: 0)
            azimuth_mode: Vector-to-azimuth mode (default: from constants)
        """
        self.azimuth_mode = validate_azimuth_mode(azimuth_mode)
        self._inclination = 0.0
        self._azimuth = 0.0

        self.set_from_angles(inclination, azimuth)

    @property
    def inclination(self):
        """Polar angle θ."""
        return self.get_inclination()

    @property
    def azimuth(self):
        """Azimuthal angle φ in [0, 2π)."""
        return self.get_azimuth()

    # ========================================================================
    # State Setting Methods
    # ========================================================================

    def set_from_angles(self, inclination, azimuth):
        """
        Set state from spherical angles.

        Inclination is stored as given, even outside [0, π].

        Args:
            inclination: Polar angle in radians
            azimuth: Azimuthal angle in radians, any real value
        """
        self._inclination = float(inclination)
        self._azimuth = normalize_azimuth(azimuth)
        logger.debug("State set from angles: θ=%.6f, φ=%.6f", self._inclination, self._azimuth)

    def set_inclination(self, inclination):
        self._inclination = float(inclination)

    def set_azimuth(self, azimuth):
        self._azimuth = normalize_azimuth(azimuth)

    def set_from_vector(self, x, y, z):
        """
        Set state from a unit vector in the Y-up scene frame.

        Args:
            x, y, z: Vector components; +Y is |0⟩, -Z is |+⟩
        """
        self._inclination, self._azimuth = vector_to_angles(x, y, z, mode=self.azimuth_mode)
        logger.debug(
            "State set from vector (%.6f, %.6f, %.6f): θ=%.6f, φ=%.6f",
            x, y, z, self._inclination, self._azimuth
        )

    def set_from_amplitudes(self, amplitude0, amplitude1):
        """
        Set state from the amplitudes of |0⟩ and |1⟩.

        Args:
            amplitude0: ComplexNumber or complex coefficient of |0⟩
            amplitude1: ComplexNumber or complex coefficient of |1⟩
        """
        self._inclination, self._azimuth = amplitudes_to_angles(amplitude0, amplitude1)
        logger.debug("State set from amplitudes: θ=%.6f, φ=%.6f", self._inclination, self._azimuth)

    def set_cardinal_state(self, state_name):
        """
        Set to a named cardinal state.

        Args:
            state_name: '|0⟩', '|1⟩', '|+⟩', '|-⟩', '|+i⟩', '|-i⟩' (or '|0>' etc.)
        """
        state_info = BLOCH_CARDINAL_STATES[resolve_state_name(state_name)]
        self.set_from_angles(state_info['inclination'], state_info['azimuth'])

    # ========================================================================
    # Angle Access Methods
    # ========================================================================

    def get_inclination(self):
        return self._inclination

    def get_azimuth(self):
        return normalize_azimuth(self._azimuth)

    def get_angles(self):
        """
        Get both angles.

        Returns:
            tuple: (inclination, azimuth)
        """
        return self.get_inclination(), self.get_azimuth()

    def is_at_pole(self, epsilon=POLE_EPSILON):
        """True when θ is within epsilon of 0 or π, where φ carries no meaning."""
        inclination = self.get_inclination()
        return abs(inclination) < epsilon or abs(inclination - np.pi) < epsilon

    # ========================================================================
    # Vector Access Methods
    # ========================================================================

    def get_vector(self):
        """
        Point on the unit sphere in the Y-up scene frame.

        Returns:
            np.array: [sin θ sin φ, cos θ, -sin θ cos φ]
        """
        return angles_to_vector(self.get_inclination(), self.get_azimuth())

    def get_bloch_vector(self):
        """
        Bloch vector in the Z-up physics convention.

        Returns:
            np.array: Bloch vector [x, y, z]
        """
        return angles_to_bloch_vector(self.get_inclination(), self.get_azimuth())

    # ========================================================================
    # Amplitude and Probability Methods
    # ========================================================================

    def get_amplitude0(self):
        """Amplitude of outcome 0: cos(θ/2)."""
        return angles_to_amplitudes(self.get_inclination(), self.get_azimuth())[0]

    def get_amplitude1(self):
        """Amplitude of outcome 1: e^(iφ) sin(θ/2)."""
        return angles_to_amplitudes(self.get_inclination(), self.get_azimuth())[1]

    def get_probability0(self):
        return amplitude_probability(self.get_amplitude0())

    def get_probability1(self):
        return amplitude_probability(self.get_amplitude1())

    def get_state_vector(self):
        """
        Complex state vector.

        Returns:
            np.array: [α, β] where |ψ⟩ = α|0⟩ + β|1⟩
        """
        return angles_to_state_vector(self.get_inclination(), self.get_azimuth())

    # ========================================================================
    # Labels and Copies
    # ========================================================================

    def get_state_label(self):
        """Generate human-readable state label."""
        alpha, beta = self.get_state_vector()

        # Check if close to a basis state
        if np.abs(alpha) > 1 - LABEL_TOLERANCE:
            return "|0⟩"
        elif np.abs(beta) > 1 - LABEL_TOLERANCE:
            return "|1⟩"
        elif np.abs(np.abs(alpha) - np.abs(beta)) < LABEL_TOLERANCE:
            # Relative phase; α is negative when θ lies outside [0, π]
            phase = np.angle(beta) - np.angle(alpha)
            for name in ('|+⟩', '|+i⟩', '|-⟩', '|-i⟩'):
                target = BLOCH_CARDINAL_STATES[name]['azimuth']
                distance = abs((phase - target + np.pi) % TWO_PI - np.pi)
                if distance < 0.1:
                    return name

        return "α|0⟩ + β|1⟩"

    def copy(self):
        clone = QubitState(azimuth_mode=self.azimuth_mode)
        clone._inclination = self._inclination
        clone._azimuth = self._azimuth
        return clone

    # ========================================================================
    # String Representation
    # ========================================================================

    def __eq__(self, other):
        if not isinstance(other, QubitState):
            return NotImplemented
        return self.get_angles() == other.get_angles()

    __hash__ = None

    def __str__(self):
        """String representation of state."""
        amplitude0 = self.get_amplitude0()
        amplitude1 = self.get_amplitude1()

        return (
            f"QubitState(\n"
            f"  State: ({amplitude0})|0⟩ + ({amplitude1})|1⟩\n"
            f"  Angles: θ={self.get_inclination():.3f}, φ={self.get_azimuth():.3f}\n"
            f"  P(0)={self.get_probability0():.3f}, P(1)={self.get_probability1():.3f}\n"
            f")"
        )

    def __repr__(self):
        return (
            f"QubitState(inclination={self.get_inclination():.3f}, "
            f"azimuth={self.get_azimuth():.3f}, azimuth_mode='{self.azimuth_mode}')"
        )

# ============================================================================
# Convenience Functions
# ============================================================================

def create_state(state_name, azimuth_mode=None):
    """
    Create QubitState from a named cardinal state.

    Args:
        state_name: Name of state ('|0⟩', '|1⟩', '|+⟩', '|-⟩', '|+i⟩', '|-i⟩')
        azimuth_mode: Vector-to-azimuth mode

    Returns:
        QubitState: Initialized state
    """
    state = QubitState(azimuth_mode=azimuth_mode)
    state.set_cardinal_state(state_name)
    return state

def create_from_vector(x, y, z, azimuth_mode=None):
    """Create QubitState from a Y-up scene vector."""
    state = QubitState(azimuth_mode=azimuth_mode)
    state.set_from_vector(x, y, z)
    return state

def create_from_amplitudes(amplitude0, amplitude1, azimuth_mode=None):
    """
    Create QubitState from amplitude coefficients.

    Args:
        amplitude0: Coefficient of |0⟩
        amplitude1: Coefficient of |1⟩
        azimuth_mode: Vector-to-azimuth mode

    Returns:
        QubitState: Initialized state
    """
    state = QubitState(azimuth_mode=azimuth_mode)
    state.set_from_amplitudes(amplitude0, amplitude1)
    return state
