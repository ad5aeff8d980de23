"""Initial conditions and domain setup for shallow water simulations.

A :class:`Scenario` describes the initial water height, velocities and
bathymetry of a simulation, together with its end time and the type and
position of the domain boundaries. The base class is a usable, trivial
scenario: constant water height on a flat bottom in the unit square with
wall boundaries. Subclasses override what they need.
"""

from __future__ import annotations

import math
from enum import Enum


class BoundaryEdge(Enum):
    """One of the four edges of the rectangular simulation domain."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"


class BoundaryType(Enum):
    """Boundary condition applied at a domain edge."""

    OUTFLOW = "outflow"
    WALL = "wall"


def _distance(x: float, y: float, cx: float, cy: float) -> float:
    return math.sqrt((x - cx) * (x - cx) + (y - cy) * (y - cy))


def _square_boundary_pos(edge: BoundaryEdge, size: float) -> float:
    """Edge position of the square domain ``[0, size] x [0, size]``."""
    if edge in (BoundaryEdge.LEFT, BoundaryEdge.BOTTOM):
        return 0.0
    return size


class Scenario:
    """Basic scenario: water at rest with depth 10 in the unit square."""

    #: Uniform initial flow velocity ``(u, v)`` of the scenario.
    initial_velocity: tuple[float, float] = (0.0, 0.0)

    def water_height(self, x: float, y: float) -> float:
        """Initial water height at ``(x, y)``."""
        return 10.0

    def velocity_u(self, x: float, y: float) -> float:
        """Initial velocity in x direction at ``(x, y)``."""
        u, _ = self.initial_velocity
        return float(u)

    def velocity_v(self, x: float, y: float) -> float:
        """Initial velocity in y direction at ``(x, y)``."""
        _, v = self.initial_velocity
        return float(v)

    def bathymetry(self, x: float, y: float) -> float:
        """Bathymetry (bottom elevation) at ``(x, y)``."""
        return 0.0

    def water_height_at_rest(self) -> float:
        """Water height of the undisturbed sea."""
        return 10.0

    def end_simulation_time(self) -> float:
        """Time at which the simulation ends."""
        return 0.1

    def boundary_type(self, edge: BoundaryEdge) -> BoundaryType:
        """Boundary condition at ``edge``."""
        return BoundaryType.WALL

    def boundary_pos(self, edge: BoundaryEdge) -> float:
        """Coordinate of ``edge`` along its normal axis."""
        return _square_boundary_pos(edge, 1.0)


class RadialDamBreakScenario(Scenario):
    """Elevated water column in the centre of a 1000 x 1000 domain."""

    def water_height(self, x: float, y: float) -> float:
        return 15.0 if _distance(x, y, 500.0, 500.0) < 100.0 else 10.0

    def bathymetry(self, x: float, y: float) -> float:
        return 0.0

    def end_simulation_time(self) -> float:
        return 15.0

    def boundary_type(self, edge: BoundaryEdge) -> BoundaryType:
        return BoundaryType.OUTFLOW

    def boundary_pos(self, edge: BoundaryEdge) -> float:
        return _square_boundary_pos(edge, 1000.0)


class BathymetryDamBreakScenario(Scenario):
    """Uniform water depth over a raised bottom in the centre of the domain."""

    def water_height(self, x: float, y: float) -> float:
        return 260.0

    def bathymetry(self, x: float, y: float) -> float:
        return -255.0 if _distance(x, y, 500.0, 500.0) < 50.0 else -260.0

    def end_simulation_time(self) -> float:
        return 15.0

    def boundary_type(self, edge: BoundaryEdge) -> BoundaryType:
        return BoundaryType.OUTFLOW

    def boundary_pos(self, edge: BoundaryEdge) -> float:
        return _square_boundary_pos(edge, 1000.0)


class SeaAtRestScenario(Scenario):
    """Flat water surface over a non-uniform bottom; should stay at rest."""

    def water_height(self, x: float, y: float) -> float:
        return 9.9 if _distance(x, y, 0.5, 0.5) < 0.1 else 10.0

    def bathymetry(self, x: float, y: float) -> float:
        return 0.1 if _distance(x, y, 0.5, 0.5) < 0.1 else 0.0


class SplashingConeScenario(Scenario):
    """Conical bottom with a sea at rest, plus a raised water region in the centre."""

    def water_height_at_rest(self) -> float:
        return 4.0

    def water_height(self, x: float, y: float) -> float:
        r = _distance(x, y, 0.5, 0.5)
        h = 4.0 - 4.5 * (r / 0.5)
        if r < 0.1:
            h += 1.0
        return h if h > 0.0 else 0.0

    def bathymetry(self, x: float, y: float) -> float:
        r = _distance(x, y, 0.5, 0.5)
        return 1.0 + 9.0 * (r if r < 0.5 else 0.5)

    def end_simulation_time(self) -> float:
        return 0.5

    def boundary_type(self, edge: BoundaryEdge) -> BoundaryType:
        return BoundaryType.OUTFLOW


class SplashingPoolScenario(Scenario):
    """Water surface with a fixed diagonal slope in a 1000 x 1000 pool."""

    def water_height(self, x: float, y: float) -> float:
        return 250.0 + (5.0 - (x + y) / 200)

    def bathymetry(self, x: float, y: float) -> float:
        return -250.0

    def end_simulation_time(self) -> float:
        return 15.0

    def boundary_pos(self, edge: BoundaryEdge) -> float:
        return _square_boundary_pos(edge, 1000.0)