"""Pytest configuration: headless matplotlib and small wave fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def small_params():
    """Parameters for a quick, small wave."""
    return dict(c=1.0, Lx=2.0, Ly=2.0, Nx=12, Ny=10, Nt=5, tmax=0.4,
                amplitude=1.0, k=2.0 * np.pi * 1.5)
