"""
Example Blender Script - Draw a Qubit on a Bloch Sphere

This script demonstrates how to use the Qubit State Framework within
Blender to draw a Bloch sphere and move its state indicator.

USAGE:
1. Install this project into Blender's Python:
     /path/to/blender/python/bin/python -m pip install -e /path/to/this/repo
2. Open Blender, switch to the Scripting workspace
3. Load this script and run it (Alt+P)
4. A Bloch sphere with axes, labels and a state arrow appears in the viewport
"""

import logging

import bpy
import numpy as np

from Qubit.logging_config import setup_logging
from Qubit.qubit_state import create_state
from Renderers.blender_scene import BlenderBlochScene, COLLECTION_NAME
from Renderers.scene_layout import BlochSceneLayout

# ============================================================================
# Helpers
# ============================================================================

def clear_bloch_objects():
    """Remove a Bloch sphere collection left over from a previous run."""
    collection = bpy.data.collections.get(COLLECTION_NAME)
    if collection is None:
        return

    for obj in list(collection.objects):
        bpy.data.objects.remove(obj, do_unlink=True)
    bpy.data.collections.remove(collection)

# ============================================================================
# Example 1: Draw |+⟩
# ============================================================================

def example_plus_state():
    """Draw the |+⟩ state on the equator."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Drawing |+⟩")
    print("=" * 70)

    clear_bloch_objects()

    state = create_state('|+⟩')
    print(state)

    scene = BlenderBlochScene(BlochSceneLayout(state))
    objects = scene.build()

    print(f"✓ Created {len(objects)} objects")
    return scene

# ============================================================================
# Example 2: Move the state
# ============================================================================

def example_move_state(scene):
    """Move an existing scene's state by angles, then by a pointer ray."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Moving the State")
    print("=" * 70)

    state = scene.layout.state

    state.set_from_angles(np.pi / 3, np.pi / 4)
    scene.update()
    print(f"  After set_from_angles: {state!r}")
    print(f"  P(0)={state.get_probability0():.3f}, P(1)={state.get_probability1():.3f}")

    # Ray from in front of the sphere straight at the |+i⟩ point
    hit = scene.drag_to(ray_origin=(3.0, 0.0, 0.0), ray_direction=(-1.0, 0.0, 0.0))
    print(f"  Ray hit sphere: {hit}")
    print(f"  After drag: {state!r} -> {state.get_state_label()}")

# ============================================================================
# Main
# ============================================================================

def main():
    setup_logging(logging.INFO)

    print("\n" + "=" * 70)
    print("QUBIT STATE FRAMEWORK - BLENDER EXAMPLES")
    print("=" * 70)

    scene = example_plus_state()
    example_move_state(scene)

    print("\n✓ Done. Tip: Switch to Material Preview (Z key) to see transparency")


if __name__ == "__main__":
    main()
