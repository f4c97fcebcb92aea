"""
Visualization utilities.

- Hexagonal mesh triangulation
- Orbit/zoom/pan camera
- Heightmap heatmaps, 3D surfaces and kernel profiles
- Interactive viewer
"""

from islands.viz.mesh import heightmap_mesh, triangulate, vertex_positions
from islands.viz.camera import Camera
from islands.viz.heightmap import (
    HeightmapViewer,
    apply_camera,
    plot_heightmap,
    plot_heightmap_3d,
    plot_kernel_profile,
    save_figure,
)

__all__ = [
    "heightmap_mesh",
    "triangulate",
    "vertex_positions",
    "Camera",
    "HeightmapViewer",
    "apply_camera",
    "plot_heightmap",
    "plot_heightmap_3d",
    "plot_kernel_profile",
    "save_figure",
]
