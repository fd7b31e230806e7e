"""
Render a Bloch sphere scene to an image file with matplotlib.

Headless: draws on a bare Figure (Agg canvas), never opens a window.
The Y-up scene layout is rotated to matplotlib's Z-up axes before drawing.
"""

import logging
from pathlib import Path

import numpy as np
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401

from .scene_layout import BlochSceneLayout, to_z_up

logger = logging.getLogger(__name__)

# Axis limits leave room for labels placed outside the sphere
LABEL_MARGIN = 1.2


def draw_sphere(ax, layout):
    u = np.linspace(0, 2 * np.pi, 60)
    v = np.linspace(0, np.pi, 30)
    r = layout.sphere_radius
    xs = r * np.outer(np.cos(u), np.sin(v))
    ys = r * np.outer(np.sin(u), np.sin(v))
    zs = r * np.outer(np.ones_like(u), np.cos(v))
    ax.plot_surface(xs, ys, zs, alpha=layout.sphere_alpha * 0.25, linewidth=0.3, edgecolor='k')

    for line in layout.axis_lines():
        pts = to_z_up(line.points)
        ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], color=line.color, linewidth=0.8)

    equator = to_z_up(layout.equator_points())
    ax.plot(equator[:, 0], equator[:, 1], equator[:, 2], color=layout.line_color,
            linestyle='--', linewidth=0.8)

    for label in layout.labels():
        x, y, z = to_z_up(label.position)
        ax.text(x, y, z, label.text, color=label.style.color,
                fontsize=label.style.size * 50, ha='center', va='center')

    lim = LABEL_MARGIN * r
    ax.set_xlim([-lim, lim]); ax.set_ylim([-lim, lim]); ax.set_zlim([-lim, lim])
    ax.set_box_aspect([1, 1, 1])
    ax.set_axis_off()
    ax.view_init(elev=22, azim=35)


def draw_indicator(ax, layout):
    indicator = layout.indicator()
    start = to_z_up(indicator.start)
    end = to_z_up(indicator.end)
    direction = end - start

    ax.quiver(*start, *direction, length=1.0, arrow_length_ratio=0.12,
              linewidth=2, color=indicator.color)
    ax.scatter([end[0]], [end[1]], [end[2]], s=30, color=indicator.color)


def render_bloch_state(state, out_path, title=None, layout=None, dpi=160):
    """
    Draw a qubit state on a Bloch sphere and save it as an image.

    Args:
        state: QubitState to draw (ignored when layout is given)
        out_path: Destination file; format follows the suffix
        title: Optional figure title (default: state label and angles)
        layout: Existing BlochSceneLayout to reuse
        dpi: Output resolution

    Returns:
        Path: Path of the written image
    """
    if layout is None:
        layout = BlochSceneLayout(state)
    state = layout.state

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if title is None:
        inclination, azimuth = state.get_angles()
        title = f"{state.get_state_label()}  θ={inclination:.3f}, φ={azimuth:.3f}"

    fig = Figure(figsize=(5.2, 5.2), dpi=dpi)
    ax = fig.add_subplot(111, projection='3d')
    draw_sphere(ax, layout)
    draw_indicator(ax, layout)
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out_path)

    logger.info("Rendered %s to %s", state.get_state_label(), out_path)
    return out_path
