"""
Qubit State Framework

This package keeps a single qubit's pure state consistent across
spherical angles, a 3D unit vector and complex probability amplitudes.
"""

from .bloch_constants import *
from .complex_number import *
from .state_conversions import *
from .qubit_state import *
from .logging_config import setup_logging

__all__ = [
    'bloch_constants',
    'complex_number',
    'state_conversions',
    'qubit_state',
    'logging_config',
    'ComplexNumber',
    'QubitState',
    'create_state',
    'create_from_vector',
    'create_from_amplitudes',
    'setup_logging',
]

__version__ = '1.0.0'
