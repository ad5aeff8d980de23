"""Shallow water scenarios and edge Riemann solvers."""

__version__ = "0.1.0"
__all__ = ["scenarios", "updates", "fwave", "middle_state", "decomposition", "augrie"]