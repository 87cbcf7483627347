"""Visualisation helpers for diskweave."""

from .backend import setup_matplotlib_backend

# Pick the backend before pyplot is imported by the plotting module.
setup_matplotlib_backend()

from .plot import plot_points

__all__ = ["plot_points", "setup_matplotlib_backend"]
