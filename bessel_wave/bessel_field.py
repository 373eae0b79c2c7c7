'''
Closed-form Bessel standing wave on a rectangular grid.
'''

import numbers
import numpy as np
from scipy.special import j0


def check_params(c: float = 1.0, Lx: float = 2.0, Ly: float = 2.0,
                 Nx: int = 100, Ny: int = 100, Nt: int = 100,
                 tmax: float = 4.0, amplitude: float = 1.0,
                 k: float = 2.0 * np.pi * 1.5,
                 z_min: float | None = None, z_max: float | None = None,
                 delay_time: float = 0.2, pause_time: float = 0.0,
                 snapshot_dpi: int = 300) -> None:
    '''Fail fast on parameters the wave or its export cannot be built from.'''

    for name, value, lowest in (("Nx", Nx, 2), ("Ny", Ny, 2), ("Nt", Nt, 1)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < lowest:
            raise ValueError(f"{name} must be at least {lowest}, got {value}")

    for name, value in (("Lx", Lx), ("Ly", Ly), ("tmax", tmax),
                        ("delay_time", delay_time), ("snapshot_dpi", snapshot_dpi)):
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")

    for name, value in (("c", c), ("amplitude", amplitude), ("k", k)):
        if not isinstance(value, numbers.Real):
            raise ValueError(f"{name} must be a real number, got {value!r}")

    if z_min is not None and z_max is not None and not z_min < z_max:
        raise ValueError(f"z_min must be below z_max, got ({z_min}, {z_max})")

    if not pause_time >= 0:
        raise ValueError(f"pause_time must be non-negative, got {pause_time}")


def make_grid(Lx: float, Ly: float, Nx: int, Ny: int) -> tuple:
    '''Grid over [-Lx/2, Lx/2] x [-Ly/2, Ly/2], endpoints included.'''

    x = np.linspace(-Lx / 2, Lx / 2, Nx)
    y = np.linspace(-Ly / 2, Ly / 2, Ny)
    X, Y = np.meshgrid(x, y, indexing="xy")
    return x, y, X, Y


def radial_distance(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    '''Distance of every grid point from the origin.'''
    return np.sqrt(X**2 + Y**2)


def make_times(tmax: float, Nt: int) -> np.ndarray:
    '''Nt samples over [0, tmax], endpoints included.'''
    return np.linspace(0.0, tmax, Nt)


def nominal_time_step(tmax: float, Nt: int) -> float:
    # samples are tmax/(Nt-1) apart, this is the shorter nominal frame length
    return tmax / Nt


def compute_field(r: np.ndarray, t: np.ndarray, c: float = 1.0,
                  k: float = 2.0 * np.pi * 1.5,
                  amplitude: float = 1.0) -> np.ndarray:
    '''Field tensor of shape (Ny, Nx, Nt), one slice per time sample.'''

    envelope = amplitude * j0(k * r)
    phase = np.cos(c * k * np.asarray(t, dtype=float))
    return envelope[:, :, np.newaxis] * phase[np.newaxis, np.newaxis, :]


def iter_field_slices(r: np.ndarray, t: np.ndarray, c: float = 1.0,
                      k: float = 2.0 * np.pi * 1.5, amplitude: float = 1.0):
    '''Yield (t_n, field slice) pairs lazily, in time order.'''

    envelope = amplitude * j0(k * r)
    phase = np.cos(c * k * np.asarray(t, dtype=float))
    for t_n, p in zip(t, phase):
        yield float(t_n), envelope * p


def field_range(field: np.ndarray, z_min: float | None = None,
                z_max: float | None = None) -> tuple:
    '''
    Colour/height range shared by every frame.

    The manual (z_min, z_max) is used as is when both are given, otherwise
    the range is the field's global min/max with a 10% buffer.
    '''

    if z_min is not None and z_max is not None:
        return float(z_min), float(z_max)

    # plain min/max so non-finite values are not hidden
    return 1.1 * float(field.min()), 1.1 * float(field.max())


def build_wave(c: float = 1.0, Lx: float = 2.0, Ly: float = 2.0,
               Nx: int = 100, Ny: int = 100, Nt: int = 100,
               tmax: float = 4.0, amplitude: float = 1.0,
               k: float = 2.0 * np.pi * 1.5) -> tuple:
    '''Validate parameters and compute grid, radius, times and the full field.'''

    check_params(c=c, Lx=Lx, Ly=Ly, Nx=Nx, Ny=Ny, Nt=Nt, tmax=tmax,
                 amplitude=amplitude, k=k)

    x, y, X, Y = make_grid(Lx, Ly, Nx, Ny)
    r = radial_distance(X, Y)
    t = make_times(tmax, Nt)
    field = compute_field(r, t, c=c, k=k, amplitude=amplitude)

    return x, y, X, Y, r, t, field
