'''
Animate the analytical Bessel standing wave of the 2D wave equation and save
a still at a chosen time.
'''

import numpy as np
from bessel_field import *
from plotting_utils import SurfaceRenderer
from export_utils import ExportState, frame_plan, run_export

# wave and grid
c = 1.0
Lx = 2.0
Ly = 2.0
Nx = 100
Ny = 100
Nt = 100
tmax = 4.0
snapshot_time = 2.0
amplitude = 1.0
k = 2.0 * np.pi * 1.5

# fixed z/colour range, set either to None for 1.1x the field range
z_min = -0.6
z_max = 0.95

# output
out_dir = "bessel_plots/"
gif_filename = "wave_bessel_solution.gif"
delay_time = 0.2
pause_time = 0.1
snapshot_dpi = 300
figsize = (9.5, 7.0)
dpi = 100


def main() -> ExportState:
    '''Compute the field, render every time sample and export.'''

    check_params(c=c, Lx=Lx, Ly=Ly, Nx=Nx, Ny=Ny, Nt=Nt, tmax=tmax,
                 amplitude=amplitude, k=k, z_min=z_min, z_max=z_max,
                 delay_time=delay_time, pause_time=pause_time,
                 snapshot_dpi=snapshot_dpi)

    x, y, X, Y = make_grid(Lx, Ly, Nx, Ny)
    r = radial_distance(X, Y)
    t = make_times(tmax, Nt)
    field = compute_field(r, t, c=c, k=k, amplitude=amplitude)
    z_range = field_range(field, z_min, z_max)

    half_step = nominal_time_step(tmax, Nt) / 2
    n_gif = sum(to_gif for to_gif, _ in frame_plan(t, snapshot_time, half_step))
    print(f"Grid {Ny}x{Nx}, {Nt} samples ({n_gif} animated), "
          f"z range [{z_range[0]:.3f}, {z_range[1]:.3f}]")

    state = ExportState(out_dir=out_dir, gif_filename=gif_filename,
                        delay_time=delay_time, snapshot_time=snapshot_time,
                        half_step=half_step, snapshot_dpi=snapshot_dpi)
    renderer = SurfaceRenderer(X, Y, z_range, figsize=figsize, dpi=dpi)
    try:
        run_export(renderer, field, t, state, pause_time=pause_time)
    finally:
        renderer.close()

    return state


if __name__ == "__main__":
    main()
