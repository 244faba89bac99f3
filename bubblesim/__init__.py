"""Dimensionless N-body gravity simulation with a Runge-Kutta integrator."""

__version__ = "0.1.0"

__all__ = ["vector", "bubble", "calculus", "filework", "cli"]