"""
Matplotlib rendering of island heightmaps.

- plot_heightmap: flat heatmap, one pixel per cell
- plot_heightmap_3d: triangulated surface seen through a Camera
- plot_kernel_profile: kernel value against distance
- HeightmapViewer: interactive 3D window driven by mouse and wheel
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.tri import Triangulation

from islands.core.population import HEIGHT_SCALE
from islands.viz.camera import WHEEL_NOTCH, Camera
from islands.viz.mesh import heightmap_mesh

if TYPE_CHECKING:
    from islands.core.kernel import KernelCache

CMAP_ISLANDS = "terrain"

# Camera azimuth that puts map X to the right and map Y upwards
VIEW_AZIMUTH = -90.0


def _as_grid(heights: np.ndarray, width: int, height: int) -> np.ndarray:
    grid = np.asarray(heights, dtype=np.float64)
    if grid.size != width * height:
        raise ValueError(f"Heightmap has {grid.size} cells, expected {width * height}")
    return grid.reshape(width, height)


def plot_heightmap(
    heights: np.ndarray,
    width: int,
    height: int,
    title: str = "Heightmap",
    cmap=CMAP_ISLANDS,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Figure, Axes]:
    """
    Plot a heightmap as a flat heatmap.

    Rows are drawn top to bottom, like the 3D mesh.

    Args:
        heights: Flat exported heightmap or its (width, height) reshape
        width, height: Grid dimensions
        title: Plot title
        cmap: Colormap name
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    grid = _as_grid(heights, width, height)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        grid.T,
        origin="upper",
        cmap=cmap,
        vmin=0.0,
        vmax=HEIGHT_SCALE,
        aspect="equal",
        interpolation="nearest",
    )

    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_heightmap_3d(
    heights: np.ndarray,
    width: int,
    height: int,
    camera: Camera | None = None,
    title: str = "",
    cmap=CMAP_ISLANDS,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 8),
) -> tuple[Figure, Axes]:
    """
    Plot a heightmap as a triangulated 3D surface.

    Args:
        heights: Flat exported heightmap or its (width, height) reshape
        width, height: Grid dimensions
        camera: View to apply (defaults to one centred on the map)
        title: Plot title
        cmap: Colormap name
        ax: Existing 3D axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    X, Y, Z, triangles = heightmap_mesh(heights, width, height)

    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(projection="3d")
    else:
        fig = ax.figure

    if triangles.shape[0]:
        ax.plot_trisurf(
            Triangulation(X, Y, triangles),
            Z,
            cmap=cmap,
            vmin=0.0,
            vmax=HEIGHT_SCALE,
            linewidth=0,
            antialiased=False,
        )

    apply_camera(ax, camera or Camera.for_grid(width, height))
    ax.set_title(title)
    return fig, ax


def apply_camera(ax: Axes, camera: Camera) -> None:
    """Point 3D axes through a camera."""
    (xmin, xmax), (ymin, ymax) = camera.limits()
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.set_zlim(0.0, HEIGHT_SCALE)
    ax.view_init(elev=camera.elevation, azim=VIEW_AZIMUTH)


def plot_kernel_profile(
    kernels: Sequence["KernelCache"],
    ax: Axes | None = None,
    log_scale: bool = True,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """Plot kernel value against distance, one curve per kernel."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    for kernel in kernels:
        dists, values = kernel.radial_profile()
        ax.plot(
            dists,
            values,
            "o-",
            markersize=3,
            label=f"period={kernel.period:g}, amplitude={kernel.amplitude:g}, δ={kernel.delta}",
        )

    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("Distance")
    ax.set_ylabel("Kernel value")
    ax.set_title("Particle influence against distance")
    ax.grid(True, alpha=0.3)
    ax.legend()

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)


class HeightmapViewer:
    """
    Interactive 3D window for a heightmap.

    Controls:
    - left drag: pan
    - scroll: zoom
    - ctrl + scroll: rotate
    """

    def __init__(
        self,
        heights: np.ndarray,
        width: int,
        height: int,
        title: str = "Islands",
        figsize: tuple[float, float] = (10, 8),
    ):
        self.camera = Camera.for_grid(width, height)
        self.fig, self.ax = plot_heightmap_3d(
            heights, width, height, camera=self.camera, title=title, figsize=figsize
        )
        # Mouse drags pan instead of matplotlib's own rotation
        self.ax.disable_mouse_rotation()
        self._mouse: tuple[float, float] | None = None

        canvas = self.fig.canvas
        canvas.mpl_connect("button_press_event", self.on_press)
        canvas.mpl_connect("button_release_event", self.on_release)
        canvas.mpl_connect("motion_notify_event", self.on_motion)
        canvas.mpl_connect("scroll_event", self.on_scroll)

    def on_press(self, event) -> None:
        self._mouse = (event.x, event.y)

    def on_release(self, event) -> None:
        self._mouse = None

    def on_motion(self, event) -> None:
        if self._mouse is None or event.button != 1:
            return
        # Display y grows upwards, screen y downwards
        dx = event.x - self._mouse[0]
        dy = self._mouse[1] - event.y
        self.camera.pan(dx, dy)
        self._mouse = (event.x, event.y)
        self.refresh()

    def on_scroll(self, event) -> None:
        rotate = event.key is not None and "control" in event.key
        self.camera.scroll(event.step * WHEEL_NOTCH, rotate=rotate)
        self.refresh()

    def refresh(self) -> None:
        apply_camera(self.ax, self.camera)
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()
