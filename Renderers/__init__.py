"""
Renderer Package

Presentation adapters that draw a QubitState on a Bloch sphere.
"""

from .scene_layout import *
from .matplotlib_scene import render_bloch_state
from .blender_scene import BLENDER_AVAILABLE, BlenderBlochScene

__all__ = [
    'scene_layout',
    'matplotlib_scene',
    'blender_scene',
    'BlochSceneLayout',
    'render_bloch_state',
    'BlenderBlochScene',
    'BLENDER_AVAILABLE',
]
