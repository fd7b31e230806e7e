"""
Bloch Sphere Scene Generation for Blender

Builds a Bloch sphere, its axes, equator, labels and state indicator
as Blender objects using Blender's Python API. Geometry comes from a
BlochSceneLayout; this module only owns the Blender handles.
"""

import logging

import numpy as np

# Try to import Blender, but allow the module to load elsewhere
try:
    import bpy
    BLENDER_AVAILABLE = True
except ImportError:
    BLENDER_AVAILABLE = False

from Qubit.bloch_constants import CAP_DIAMETER, CAP_HEIGHT, CAP_TESSELLATION
from .scene_layout import to_z_up

logger = logging.getLogger(__name__)

COLLECTION_NAME = "BlochSphere"

# ============================================================================
# Geometry Helpers (numpy, Y-up scene frame)
# ============================================================================

def uv_sphere_geometry(radius=1.0, rings=16, segments=32):
    """
    Vertices and quad faces of a UV sphere.

    Returns:
        tuple: (Nx3 vertices, list of face index tuples)
    """
    verts = [(0.0, radius, 0.0)]
    for i in range(1, rings):
        incl = np.pi * i / rings
        for j in range(segments):
            az = 2 * np.pi * j / segments
            verts.append((
                radius * np.sin(incl) * np.sin(az),
                radius * np.cos(incl),
                -radius * np.sin(incl) * np.cos(az),
            ))
    verts.append((0.0, -radius, 0.0))
    bottom = len(verts) - 1

    faces = []
    for j in range(segments):
        faces.append((0, 1 + j, 1 + (j + 1) % segments))
    for i in range(rings - 2):
        row = 1 + i * segments
        nxt = row + segments
        for j in range(segments):
            k = (j + 1) % segments
            faces.append((row + j, nxt + j, nxt + k, row + k))
    last = 1 + (rings - 2) * segments
    for j in range(segments):
        faces.append((last + j, bottom, last + (j + 1) % segments))

    return np.array(verts, dtype=float), faces

def cone_geometry(height=CAP_HEIGHT, diameter=CAP_DIAMETER, tessellation=CAP_TESSELLATION):
    """
    Cone pointing along +Y, centered on the origin.

    Returns:
        tuple: (Nx3 vertices, list of face index tuples)
    """
    radius = diameter / 2
    angles = 2 * np.pi * np.arange(tessellation) / tessellation
    base = np.column_stack([radius * np.cos(angles),
                            np.full(tessellation, -height / 2),
                            radius * np.sin(angles)])
    apex = np.array([[0.0, height / 2, 0.0]])
    verts = np.vstack([base, apex])

    apex_index = tessellation
    faces = [(j, (j + 1) % tessellation, apex_index) for j in range(tessellation)]
    faces.append(tuple(reversed(range(tessellation))))

    return verts, faces

# ============================================================================
# Blender Object Creation
# ============================================================================

def _require_blender():
    if not BLENDER_AVAILABLE:
        raise RuntimeError("Blender not available. Cannot create scene objects.")

def create_blender_object(name, vertices, edges=(), faces=(), material=None, collection=None):
    """
    Create a Blender mesh object from Y-up scene geometry.

    Args:
        name: Name for the object
        vertices: Nx3 array in scene (Y-up) coordinates
        edges: Edge index pairs
        faces: Face index tuples
        material: Optional bpy material
        collection: Collection to link into (default: active collection)

    Returns:
        bpy.types.Object: Created object
    """
    _require_blender()

    mesh = bpy.data.meshes.new(name=f"{name}_mesh")
    mesh.from_pydata(to_z_up(vertices).tolist(), list(edges), list(faces))
    mesh.update()

    obj = bpy.data.objects.new(name, mesh)
    (collection or bpy.context.collection).objects.link(obj)

    if material is not None:
        obj.data.materials.append(material)

    return obj

def create_material(name, color, alpha=1.0):
    """Principled material with optional transparency."""
    _require_blender()

    mat = bpy.data.materials.new(name=name)
    mat.use_nodes = True
    rgba = tuple(color[:3]) + (alpha,)

    bsdf = mat.node_tree.nodes.get("Principled BSDF")
    if bsdf:
        bsdf.inputs['Base Color'].default_value = rgba
        bsdf.inputs['Alpha'].default_value = alpha

    mat.diffuse_color = rgba
    if alpha < 1.0:
        mat.blend_method = 'BLEND'
        mat.show_transparent_back = True

    return mat

def remove_blender_object(obj):
    """Remove an object together with the mesh or font curve it owns."""
    _require_blender()

    data = obj.data
    kind = obj.type
    bpy.data.objects.remove(obj, do_unlink=True)

    if data is None:
        return
    if kind == 'MESH':
        bpy.data.meshes.remove(data)
    elif kind in ('FONT', 'CURVE'):
        bpy.data.curves.remove(data)

# ============================================================================
# Scene Adapter
# ============================================================================

class BlenderBlochScene:
    """
    Blender-side owner of every object drawn for one BlochSceneLayout.

    Static geometry is created by build(); update() replaces only the
    state indicator line and cap.
    """

    def __init__(self, layout):
        _require_blender()

        self.layout = layout
        self.objects = []
        self.collection = None
        self._materials = {}
        self._indicator_objects = []

    def _material(self, key, color, alpha=1.0):
        # Materials are shared per (key, color, alpha) and built once
        cache_key = (key, tuple(color), alpha)
        if cache_key not in self._materials:
            name = f"{key}_material_{len(self._materials)}"
            self._materials[cache_key] = create_material(name, color, alpha)
        return self._materials[cache_key]

    def _link(self, obj):
        self.objects.append(obj)
        return obj

    def build(self):
        """Create sphere, axes, equator, labels and indicator."""
        layout = self.layout

        self.collection = bpy.data.collections.new(COLLECTION_NAME)
        bpy.context.scene.collection.children.link(self.collection)

        verts, faces = uv_sphere_geometry(layout.sphere_radius)
        sphere_mat = self._material("sphere", (0.8, 0.8, 0.8), layout.sphere_alpha)
        self._link(create_blender_object("sphere", verts, faces=faces,
                                         material=sphere_mat, collection=self.collection))

        line_mat = self._material("line", layout.line_color)
        for line in layout.axis_lines():
            self._link(create_blender_object(line.name, line.points, edges=[(0, 1)],
                                             material=line_mat, collection=self.collection))

        equator = layout.equator_points()
        # Every other segment for a dashed look
        dashes = [(i, i + 1) for i in range(0, len(equator) - 1, 2)]
        self._link(create_blender_object("equator", equator, edges=dashes,
                                         material=line_mat, collection=self.collection))

        for label in layout.labels():
            self._link(self._create_label(label))

        self.update()

        logger.info("Built Blender Bloch scene with %d objects", len(self.objects))
        return self.objects

    def _create_label(self, label):
        curve = bpy.data.curves.new(name=f"label_{label.text}", type='FONT')
        curve.body = label.text
        curve.size = label.style.size
        curve.align_x = 'CENTER'
        curve.align_y = 'CENTER'

        obj = bpy.data.objects.new(f"label_{label.text}", curve)
        obj.location = tuple(to_z_up(label.position))
        # Text curves lie in XY; stand them up facing -Y
        obj.rotation_euler = (np.pi / 2, 0.0, 0.0)
        obj.data.materials.append(self._material("label", label.style.color))
        self.collection.objects.link(obj)
        return obj

    def update(self):
        """Dispose the old indicator and draw it at the current state."""
        for obj in self._indicator_objects:
            self.objects.remove(obj)
            remove_blender_object(obj)
        self._indicator_objects = []

        indicator = self.layout.indicator()
        state_mat = self._material("state", indicator.color)

        line_points = np.vstack([indicator.start, indicator.end])
        line = create_blender_object("quantumStateLine", line_points, edges=[(0, 1)],
                                     material=state_mat, collection=self.collection)

        cap_verts, cap_faces = cone_geometry()
        cap_verts = indicator.cap_rotation.apply(cap_verts) + indicator.cap_position
        cap = create_blender_object("quantumStateLineCap", cap_verts, faces=cap_faces,
                                    material=state_mat, collection=self.collection)

        self._indicator_objects = [self._link(line), self._link(cap)]
        return self._indicator_objects

    def drag_to(self, ray_origin, ray_direction):
        """Forward a pointer ray (Y-up scene frame) and redraw on a hit."""
        moved = self.layout.drag_to(ray_origin, ray_direction)
        if moved:
            self.update()
        return moved

    def clear(self):
        """Remove every object, its mesh or curve data, the materials and the collection."""
        for obj in self.objects:
            remove_blender_object(obj)
        self.objects = []
        self._indicator_objects = []

        for mat in self._materials.values():
            bpy.data.materials.remove(mat)
        self._materials = {}

        if self.collection is not None:
            bpy.data.collections.remove(self.collection)
            self.collection = None
