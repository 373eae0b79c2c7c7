'''
Plotting utilities for the Bessel standing wave: a persistent shaded 3D
surface whose heights are swapped frame by frame.
'''

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import cm
from matplotlib.colors import LightSource, Normalize
from mpl_toolkits.mplot3d import Axes3D


cmap_field = "jet"
face_alpha = 0.9
box_aspect = (1, 1, 0.8)

# infinite lights as (azimuth, elevation, rgb tint, weight)
# from (1, 1, 1) and (-1, -1, 1), the second slightly blue
lights = [
    (45.0, 35.26, (1.0, 1.0, 1.0), 0.6),
    (225.0, 35.26, (0.8, 0.8, 1.0), 0.4),
]


def shade_surface(Z: np.ndarray, norm: Normalize, cmap,
                  dx: float = 1.0, dy: float = 1.0,
                  alpha: float = face_alpha) -> np.ndarray:
    '''Colour-map the heights and shade them with the two lights.'''

    rgb = cmap(norm(Z))[..., :3]
    shaded = np.zeros_like(rgb)
    for azdeg, altdeg, tint, weight in lights:
        ls = LightSource(azdeg=azdeg, altdeg=altdeg)
        lit = ls.shade_rgb(rgb, Z, blend_mode="soft", dx=dx, dy=dy)
        shaded += weight * lit * np.asarray(tint)

    rgba = np.empty(Z.shape + (4,))
    rgba[..., :3] = np.clip(shaded, 0.0, 1.0)
    rgba[..., 3] = alpha
    return rgba


class SurfaceRenderer:
    '''Fixed 3D view of a height field; draw() only replaces the surface.'''

    def __init__(self, X: np.ndarray, Y: np.ndarray, z_range: tuple,
                 figsize: tuple = (9.5, 7.0), dpi: int = 100,
                 cmap_name: str = cmap_field):
        self.X = X
        self.Y = Y
        self.z_min, self.z_max = z_range
        self.x_lim = (float(X.min()), float(X.max()))
        self.y_lim = (float(Y.min()), float(Y.max()))
        self.dx = (self.x_lim[1] - self.x_lim[0]) / max(X.shape[1] - 1, 1)
        self.dy = (self.y_lim[1] - self.y_lim[0]) / max(Y.shape[0] - 1, 1)

        self.norm = Normalize(vmin=self.z_min, vmax=self.z_max)
        self.cmap = plt.get_cmap(cmap_name)

        self.fig = plt.figure(figsize=figsize, dpi=dpi, facecolor="white")
        self.ax = self.fig.add_axes([0.15, 0.15, 0.7, 0.75], projection="3d")
        self.ax.set_xlabel("$x$", fontsize=16, fontweight="bold")
        self.ax.set_ylabel("$y$", fontsize=16, fontweight="bold")
        self.ax.set_zlabel(r"$\phi$", fontsize=16, fontweight="bold")
        self.ax.view_init(elev=30, azim=-37.5)
        self.ax.set_box_aspect(box_aspect)
        self.ax.set_autoscale_on(False)
        self.apply_limits()

        cax = self.fig.add_axes([0.86, 0.15, 0.03, 0.75])
        mappable = cm.ScalarMappable(norm=self.norm, cmap=self.cmap)
        self.cbar = self.fig.colorbar(mappable, cax=cax)
        self.cbar.set_label("Amplitude", fontsize=12, fontweight="bold")
        self.cbar.ax.tick_params(labelsize=10)

        self.surf = None

    def apply_limits(self) -> None:
        '''Re-apply the fixed x, y and z limits.'''

        self.ax.set_xlim(*self.x_lim)
        self.ax.set_ylim(*self.y_lim)
        self.ax.set_zlim(self.z_min, self.z_max)

    def draw(self, Z: np.ndarray, t: float) -> None:
        '''Show heights Z for time t, replacing the previous surface.'''

        if self.surf is not None:
            self.surf.remove()

        facecolors = shade_surface(Z, self.norm, self.cmap, dx=self.dx, dy=self.dy)
        self.surf = self.ax.plot_surface(
            self.X, self.Y, Z,
            facecolors=facecolors,
            linewidth=0,
            antialiased=True,
            shade=False,
        )
        self.ax.set_title(f"t = {t:.2f}")
        self.apply_limits()

    def close(self) -> None:
        plt.close(self.fig)
