"""
Bloch Sphere Constants and Definitions

Angle conventions, numerical tolerances, named cardinal states and
default visualization parameters for single-qubit state handling.
"""

import os

import numpy as np

__all__ = [
    'TWO_PI', 'HALF_PI',
    'DEFAULT_TOLERANCE', 'POLE_EPSILON', 'LABEL_TOLERANCE',
    'AZIMUTH_MODES', 'DEFAULT_AZIMUTH_MODE', 'validate_azimuth_mode',
    'BLOCH_CARDINAL_STATES', 'CARDINAL_STATE_ALIASES', 'resolve_state_name',
    'SPHERE_RADIUS', 'SPHERE_ALPHA', 'EQUATOR_SEGMENTS',
    'AXIS_LINE_COLOR', 'STATE_LINE_COLOR', 'LABEL_COLOR',
    'LABEL_SIZE', 'LABEL_OFFSET',
    'CAP_HEIGHT', 'CAP_DIAMETER', 'CAP_TESSELLATION',
]

# ============================================================================
# Angle Constants
# ============================================================================

TWO_PI = 2.0 * np.pi
HALF_PI = np.pi / 2.0

# ============================================================================
# Numerical Tolerances
# ============================================================================

# Round-trip comparisons (angles -> vector -> angles)
DEFAULT_TOLERANCE = 1e-9

# Inclination distance from 0 or π below which azimuth is undefined
POLE_EPSILON = 1e-6

# Amplitude magnitude used by state labelling
LABEL_TOLERANCE = 0.01

# ============================================================================
# Vector -> Azimuth Recovery
# ============================================================================

# 'atan2':  full two-argument arctangent, correct in all four quadrants
# 'legacy': atan(x / -z), only correct where -z > 0; z == 0 gives inf/NaN
AZIMUTH_MODES = ('atan2', 'legacy')

DEFAULT_AZIMUTH_MODE = os.getenv('QUBIT_AZIMUTH_MODE', 'atan2').lower()


def validate_azimuth_mode(mode):
    """
    Validate a vector-to-azimuth conversion mode.

    Args:
        mode: Mode name, or None for the configured default

    Returns:
        str: Validated mode name

    Raises:
        ValueError: If mode is not one of AZIMUTH_MODES
    """
    if mode is None:
        mode = DEFAULT_AZIMUTH_MODE

    if mode not in AZIMUTH_MODES:
        raise ValueError(f"Unknown azimuth mode: {mode}. Use one of {AZIMUTH_MODES}")

    return mode

# ============================================================================
# Named Cardinal States
# ============================================================================

BLOCH_CARDINAL_STATES = {
    '|0⟩': {'inclination': 0.0, 'azimuth': 0.0},
    '|1⟩': {'inclination': np.pi, 'azimuth': 0.0},
    '|+⟩': {'inclination': HALF_PI, 'azimuth': 0.0},
    '|-⟩': {'inclination': HALF_PI, 'azimuth': np.pi},
    '|+i⟩': {'inclination': HALF_PI, 'azimuth': HALF_PI},
    '|-i⟩': {'inclination': HALF_PI, 'azimuth': 3 * HALF_PI},
}

# ASCII spellings accepted alongside the ket glyphs
CARDINAL_STATE_ALIASES = {
    name.replace('⟩', '>'): name for name in BLOCH_CARDINAL_STATES
}


def resolve_state_name(state_name):
    """
    Map an ASCII or Unicode ket name onto its BLOCH_CARDINAL_STATES key.

    Raises:
        ValueError: If the name is not a known cardinal state
    """
    name = CARDINAL_STATE_ALIASES.get(state_name, state_name)

    if name not in BLOCH_CARDINAL_STATES:
        raise ValueError(f"Unknown state: {state_name}")

    return name

# ============================================================================
# Visualization Parameters
# ============================================================================

SPHERE_RADIUS = 1.0
SPHERE_ALPHA = 0.4

# Equator dashes, one point every π/20
EQUATOR_SEGMENTS = 40

# RGB colors (0-1 floats)
AXIS_LINE_COLOR = (0.3, 0.3, 0.3)
STATE_LINE_COLOR = (0.0, 0.0, 1.0)
LABEL_COLOR = (0.0, 0.0, 0.0)

LABEL_SIZE = 0.2
LABEL_OFFSET = 1.2

# Indicator cone at the tip of the state line
CAP_HEIGHT = 0.1
CAP_DIAMETER = 0.1
CAP_TESSELLATION = 6
