"""OpenGL scene renderer implementing the orrery renderer interface."""

import logging
import math
import numpy as np
from dataclasses import dataclass, field
from typing import Any, List, Optional
from OpenGL.GL import *
from OpenGL.GLU import *
from OpenGL.arrays import vbo

from config import solar as config
from orrery.renderer import Material, PointsGeometry, RingGeometry, SphereGeometry
from orrery.transforms import Transform, compose
from .textures import TextureLoader

logger = logging.getLogger(__name__)


@dataclass
class GLMesh:
    geometry: Any
    material: Material
    texture_id: Optional[int] = None
    parent: Optional[int] = None
    local: Transform = field(default_factory=Transform)
    display_list: Optional[int] = None
    vbo: Any = None


class GLSceneRenderer:
    """
    Keeps a flat list of meshes with parent links and draws them with
    world matrices composed on the CPU.
    """

    def __init__(self, texture_loader: TextureLoader):
        self.textures = texture_loader
        self.meshes: List[GLMesh] = []
        self._callbacks = []
        self._quadric = gluNewQuadric()
        gluQuadricTexture(self._quadric, GL_TRUE)
        gluQuadricNormals(self._quadric, GLU_SMOOTH)

    # Renderer interface -------------------------------------------------

    def create_mesh(self, geometry, material: Material) -> int:
        mesh = GLMesh(geometry, material, self.textures.load(material.texture))
        if isinstance(geometry, PointsGeometry):
            self._init_points(mesh)
        else:
            mesh.display_list = self._compile(mesh)
        self.meshes.append(mesh)
        return len(self.meshes) - 1

    def attach_child(self, parent: int, child: int, local: Transform):
        self.meshes[child].parent = parent
        self.meshes[child].local = local.copy()

    def set_transform(self, handle: int, position, rotation):
        self.meshes[handle].local = Transform(position, rotation)

    def register_frame_callback(self, fn):
        self._callbacks.append(fn)

    # Frame driving ------------------------------------------------------

    def dispatch_frame(self, dt: float):
        """Called once per display refresh by the application loop."""
        for fn in self._callbacks:
            fn(dt)

    def world_matrix(self, handle: int) -> np.ndarray:
        mesh = self.meshes[handle]
        parent = np.eye(4) if mesh.parent is None else self.world_matrix(mesh.parent)
        return compose(parent, mesh.local)

    # Drawing ------------------------------------------------------------

    def setup_lighting(self):
        """Ambient light plus a point light at the Sun and a dim fill light."""
        glEnable(GL_LIGHTING)
        glLightModelfv(GL_LIGHT_MODEL_AMBIENT, config.LIGHTING["ambient"])
        glEnable(GL_LIGHT0)
        glLightfv(GL_LIGHT0, GL_DIFFUSE, config.LIGHTING["sun_light"])
        glEnable(GL_LIGHT1)
        glLightfv(GL_LIGHT1, GL_DIFFUSE, config.LIGHTING["fill_light"])
        glEnable(GL_COLOR_MATERIAL)
        glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)

    def draw(self):
        # Lights are positioned in world space, after the camera is applied
        glLightfv(GL_LIGHT0, GL_POSITION, config.LIGHTING["sun_position"])
        glLightfv(GL_LIGHT1, GL_POSITION, config.LIGHTING["fill_direction"])

        # Opaque first, translucent (ring) last
        order = sorted(range(len(self.meshes)), key=lambda i: self.meshes[i].material.opacity < 1.0)
        for handle in order:
            mesh = self.meshes[handle]
            if isinstance(mesh.geometry, PointsGeometry):
                self._draw_points(mesh)
            else:
                self._draw_mesh(handle, mesh)

    def _draw_mesh(self, handle: int, mesh: GLMesh):
        material = mesh.material
        glPushMatrix()
        # OpenGL expects column-major
        glMultMatrixf(np.ascontiguousarray(self.world_matrix(handle).T, dtype=np.float32))

        if material.unlit:
            glDisable(GL_LIGHTING)
        if material.double_sided:
            glDisable(GL_CULL_FACE)
        if material.opacity < 1.0:
            glEnable(GL_BLEND)
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
            glDepthMask(GL_FALSE)
        if mesh.texture_id is not None:
            glEnable(GL_TEXTURE_2D)
            glBindTexture(GL_TEXTURE_2D, mesh.texture_id)
            glColor4f(1.0, 1.0, 1.0, material.opacity)
        else:
            glColor4f(*material.color, material.opacity)

        glCallList(mesh.display_list)

        if mesh.texture_id is not None:
            glBindTexture(GL_TEXTURE_2D, 0)
            glDisable(GL_TEXTURE_2D)
        if material.opacity < 1.0:
            glDepthMask(GL_TRUE)
            glDisable(GL_BLEND)
        if material.double_sided:
            glEnable(GL_CULL_FACE)
        if material.unlit:
            glEnable(GL_LIGHTING)
        glPopMatrix()

    def _compile(self, mesh: GLMesh) -> int:
        """Bake the static geometry into a display list."""
        geometry = mesh.geometry
        display_list = glGenLists(1)
        glNewList(display_list, GL_COMPILE)
        if isinstance(geometry, SphereGeometry):
            # GLU spheres have their poles on Z; textures expect poles on Y
            glPushMatrix()
            glRotatef(-90.0, 1.0, 0.0, 0.0)
            gluSphere(self._quadric, geometry.radius, geometry.segments, geometry.segments)
            glPopMatrix()
        elif isinstance(geometry, RingGeometry):
            self._emit_ring(geometry)
        else:
            raise TypeError(f"Unsupported geometry {geometry!r}")
        glEndList()
        return display_list

    @staticmethod
    def _emit_ring(geometry: RingGeometry):
        """Annulus in the local XY plane."""
        glNormal3f(0.0, 0.0, 1.0)
        glBegin(GL_TRIANGLE_STRIP)
        for i in range(geometry.segments + 1):
            a = 2.0 * math.pi * i / geometry.segments
            c, s = math.cos(a), math.sin(a)
            glTexCoord2f(0.0, i / geometry.segments)
            glVertex3f(geometry.inner_radius * c, geometry.inner_radius * s, 0.0)
            glTexCoord2f(1.0, i / geometry.segments)
            glVertex3f(geometry.outer_radius * c, geometry.outer_radius * s, 0.0)
        glEnd()

    def _init_points(self, mesh: GLMesh):
        positions = np.ascontiguousarray(mesh.geometry.positions, dtype=np.float32)
        try:
            mesh.vbo = vbo.VBO(positions, usage=GL_STATIC_DRAW)
        except Exception as e:
            logger.warning("Starfield VBO init failed, using client arrays: %s", e)
            mesh.vbo = None

    def _draw_points(self, mesh: GLMesh):
        positions = mesh.geometry.positions
        if len(positions) == 0:
            return

        glDisable(GL_LIGHTING)
        glEnable(GL_POINT_SMOOTH)
        glPointSize(mesh.material.point_size)
        glColor3f(*mesh.material.color)

        glEnableClientState(GL_VERTEX_ARRAY)
        if mesh.vbo is not None:
            mesh.vbo.bind()
            glVertexPointer(3, GL_FLOAT, 0, None)
            glDrawArrays(GL_POINTS, 0, len(positions))
            mesh.vbo.unbind()
        else:
            glVertexPointer(3, GL_FLOAT, 0, np.ascontiguousarray(positions, dtype=np.float32))
            glDrawArrays(GL_POINTS, 0, len(positions))
        glDisableClientState(GL_VERTEX_ARRAY)

        glDisable(GL_POINT_SMOOTH)
        glEnable(GL_LIGHTING)
