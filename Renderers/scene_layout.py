"""
Bloch Sphere Scene Layout

Renderer-independent description of a Bloch sphere scene: axis lines,
dashed equator, text labels and the state indicator arrow. Renderer
adapters draw from this layout and feed pointer drags back through it.

Scene coordinates are Y-up: +Y is |0⟩, -Z is |+⟩, +X is |+i⟩.
"""

import logging
from collections import namedtuple

import numpy as np
from scipy.spatial.transform import Rotation

from Qubit.bloch_constants import (
    AXIS_LINE_COLOR,
    EQUATOR_SEGMENTS,
    LABEL_COLOR,
    LABEL_OFFSET,
    LABEL_SIZE,
    SPHERE_ALPHA,
    SPHERE_RADIUS,
    STATE_LINE_COLOR,
)

__all__ = [
    'LabelStyle',
    'SceneLabel',
    'AxisLine',
    'StateIndicator',
    'DEFAULT_LABEL_STYLE',
    'LABEL_LAYOUT',
    'to_z_up',
    'rotation_from_pole',
    'BlochSceneLayout',
]

logger = logging.getLogger(__name__)

# ============================================================================
# Scene Primitives
# ============================================================================

LabelStyle = namedtuple('LabelStyle', ['color', 'size'])

SceneLabel = namedtuple('SceneLabel', ['text', 'position', 'style'])

AxisLine = namedtuple('AxisLine', ['name', 'points', 'color'])

StateIndicator = namedtuple(
    'StateIndicator',
    ['start', 'end', 'color', 'cap_position', 'cap_rotation', 'cap_euler_hint'],
)

DEFAULT_LABEL_STYLE = LabelStyle(color=LABEL_COLOR, size=LABEL_SIZE)

# Label text and Y-up position, in units of LABEL_OFFSET
LABEL_LAYOUT = (
    ('X', (0.0, 0.1 / LABEL_OFFSET, -1.0)),
    ('Y', (1.0, 0.0, 0.0)),
    ('|0>', (0.0, 1.0, 0.0)),
    ('|1>', (0.0, -1.0, 0.0)),
    ('|+>', (0.0, -0.1 / LABEL_OFFSET, -1.0)),
    ('|->', (0.0, 0.0, 1.0)),
)

# ============================================================================
# Frame Helpers
# ============================================================================

def to_z_up(vector):
    """
    Rotate Y-up scene coordinates into a Z-up frame (Blender, matplotlib).

    (x, y, z) -> (x, -z, y), a +90° rotation about X.

    Args:
        vector: Single [x, y, z] or an Nx3 array

    Returns:
        np.array: Rotated coordinates, same shape as input
    """
    vector = np.asarray(vector, dtype=float)
    return np.stack([vector[..., 0], -vector[..., 2], vector[..., 1]], axis=-1)

def rotation_from_pole(direction):
    """
    Shortest rotation taking the +Y pole onto a direction.

    Args:
        direction: Target vector (normalized internally)

    Returns:
        Rotation: scipy rotation with rotation.apply([0, 1, 0]) ≈ direction
    """
    pole = np.array([0.0, 1.0, 0.0])
    direction = np.asarray(direction, dtype=float)
    length = np.linalg.norm(direction)

    if length == 0.0 or not np.isfinite(length):
        return Rotation.identity()

    direction = direction / length
    axis = np.cross(pole, direction)
    sin_angle = np.linalg.norm(axis)
    cos_angle = np.clip(np.dot(pole, direction), -1.0, 1.0)

    if sin_angle < 1e-12:
        if cos_angle > 0:
            return Rotation.identity()
        # Antiparallel: any perpendicular axis works
        return Rotation.from_rotvec([np.pi, 0.0, 0.0])

    angle = np.arctan2(sin_angle, cos_angle)
    return Rotation.from_rotvec(axis / sin_angle * angle)

# ============================================================================
# Scene Layout
# ============================================================================

class BlochSceneLayout:
    """
    Presentation adapter between a QubitState and a scene renderer.

    Holds no renderer handles. Static geometry (axes, equator, labels) is
    built once; the state indicator is rebuilt from the state on request.
    """

    def __init__(self, state, line_color=AXIS_LINE_COLOR, state_color=STATE_LINE_COLOR,
                 label_style=DEFAULT_LABEL_STYLE, sphere_alpha=SPHERE_ALPHA,
                 equator_segments=EQUATOR_SEGMENTS):
        """
        Args:
            state: QubitState to display and drag
            line_color: RGB for axis lines and equator
            state_color: RGB for the state indicator
            label_style: LabelStyle shared by every axis label
            sphere_alpha: Sphere transparency (0-1)
            equator_segments: Number of dashes around the equator
        """
        self.state = state
        self.line_color = tuple(line_color)
        self.state_color = tuple(state_color)
        self.label_style = label_style
        self.sphere_alpha = sphere_alpha
        self.sphere_radius = SPHERE_RADIUS
        self.equator_segments = int(equator_segments)

        self._axis_lines = self._build_axis_lines()
        self._equator = self._build_equator()
        self._labels = self._build_labels()

    # ========================================================================
    # Static Geometry
    # ========================================================================

    def _build_axis_lines(self):
        r = self.sphere_radius
        return [
            AxisLine('xAxisLine', np.array([[0, 0, -r], [0, 0, r]], dtype=float), self.line_color),
            AxisLine('yAxisLine', np.array([[-r, 0, 0], [r, 0, 0]], dtype=float), self.line_color),
            AxisLine('zAxisLine', np.array([[0, r, 0], [0, -r, 0]], dtype=float), self.line_color),
        ]

    def _build_equator(self):
        theta = np.arange(self.equator_segments + 1) * (2 * np.pi / self.equator_segments)
        r = self.sphere_radius
        return np.column_stack([r * np.cos(theta), np.zeros_like(theta), r * np.sin(theta)])

    def _build_labels(self):
        labels = []
        for text, unit_position in LABEL_LAYOUT:
            position = np.array(unit_position, dtype=float) * LABEL_OFFSET * self.sphere_radius
            labels.append(SceneLabel(text, position, self.label_style))
        return labels

    def axis_lines(self):
        """Bloch X, Y, Z axes as 2x3 point arrays (scene Z, X, Y axes)."""
        return list(self._axis_lines)

    def equator_points(self):
        """Closed polyline around the y = 0 great circle."""
        return self._equator.copy()

    def labels(self):
        return list(self._labels)

    def label_styles(self):
        """Distinct label styles, one material per style for renderers."""
        styles = []
        for label in self._labels:
            if label.style not in styles:
                styles.append(label.style)
        return styles

    # ========================================================================
    # State Indicator
    # ========================================================================

    def indicator(self):
        """
        Line from the sphere center to the current state, with cap data.

        Returns:
            StateIndicator: start/end points, color, cap position, cap
            rotation (scipy Rotation taking +Y onto the state) and the
            Euler hint (-θ, -φ, 0)
        """
        end = self.state.get_vector() * self.sphere_radius
        inclination, azimuth = self.state.get_angles()

        return StateIndicator(
            start=np.zeros(3),
            end=end,
            color=self.state_color,
            cap_position=end.copy(),
            cap_rotation=rotation_from_pole(end),
            cap_euler_hint=(-inclination, -azimuth, 0.0),
        )

    # ========================================================================
    # Pointer Interaction
    # ========================================================================

    def pick(self, ray_origin, ray_direction):
        """
        Intersect a pointer ray with the sphere surface.

        Args:
            ray_origin: Ray start [x, y, z] in scene coordinates
            ray_direction: Ray direction (need not be normalized)

        Returns:
            np.array or None: Unit vector of the nearest hit in front of
            the origin, None on a miss

        Raises:
            ValueError: If ray_direction has zero length
        """
        origin = np.asarray(ray_origin, dtype=float) / self.sphere_radius
        direction = np.asarray(ray_direction, dtype=float)

        length = np.linalg.norm(direction)
        if length == 0.0 or not np.isfinite(length):
            raise ValueError(f"Ray direction must be a non-zero vector, got {ray_direction}")
        direction = direction / length

        # |o + t d|² = 1  ->  t² + 2bt + c = 0
        b = np.dot(origin, direction)
        c = np.dot(origin, origin) - 1.0
        discriminant = b * b - c

        if discriminant < 0:
            return None

        root = np.sqrt(discriminant)
        t = -b - root
        if t < 0:
            t = -b + root
        if t < 0:
            return None

        hit = origin + t * direction
        return hit / np.linalg.norm(hit)

    def drag_to(self, ray_origin, ray_direction):
        """
        Move the state to where a pointer ray meets the sphere.

        Returns:
            bool: True if the ray hit the sphere and the state was updated
        """
        hit = self.pick(ray_origin, ray_direction)
        if hit is None:
            return False

        self.state.set_from_vector(*hit)
        logger.debug("Dragged state to %s", self.state.get_angles())
        return True
