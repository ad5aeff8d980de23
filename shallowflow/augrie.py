"""Approximate augmented Riemann solver for the shallow water equations.

The solver handles wet/dry interfaces: a dry cell lying lower than its wet
neighbour is inundated, while a dry cell lying higher acts as a reflecting
wall unless the momentum of the wet cell is large enough to overcome the
step in the bottom.
"""

from __future__ import annotations

from shallowflow.decomposition import EdgeState, augmented_decomposition
from shallowflow.middle_state import MiddleState, compute_middle_state
from shallowflow.updates import NetUpdates, WetDryState, accumulate_waves

_WALLS = (WetDryState.WET_DRY_WALL, WetDryState.DRY_WET_WALL)


class AugRieSolver:
    """Augmented Riemann solver with steady state and corrector waves."""

    def __init__(
        self,
        dry_tolerance: float = 0.01,
        gravity: float = 9.81,
        newton_tolerance: float = 0.000001,
        max_newton_iterations: int = 10,
        zero_tolerance: float = 0.00001,
    ) -> None:
        self.dry_tolerance = dry_tolerance
        self.gravity = gravity
        self.newton_tolerance = newton_tolerance
        self.max_newton_iterations = max_newton_iterations
        self.zero_tolerance = zero_tolerance

    def compute_net_updates(
        self,
        h_left: float,
        h_right: float,
        hu_left: float,
        hu_right: float,
        b_left: float,
        b_right: float,
    ) -> NetUpdates:
        """Net updates for the cells on both sides of an edge.

        The returned maximum wave speed is meant for the CFL condition.
        """
        edge = EdgeState(
            h_left,
            h_right,
            hu_left,
            hu_right,
            b_left,
            b_right,
            root_h_left=h_left,
            root_h_right=h_right,
        )
        wall_middle = self._determine_wet_dry_state(edge)
        if edge.state is WetDryState.DRY_DRY:
            return NetUpdates()

        if edge.state in _WALLS and wall_middle is not None:
            middle = wall_middle
        else:
            middle = compute_middle_state(
                edge.h_left,
                edge.h_right,
                edge.u_left,
                edge.u_right,
                self.gravity,
                self.dry_tolerance,
                self.newton_tolerance,
            )

        waves, speeds = augmented_decomposition(
            edge, middle, self.gravity, self.dry_tolerance, self.zero_tolerance
        )
        return accumulate_waves(waves, speeds, self.zero_tolerance)

    def _wall_middle_state(self, h: float, u_toward: float, u_away: float) -> MiddleState:
        return compute_middle_state(
            h,
            h,
            u_toward,
            u_away,
            self.gravity,
            self.dry_tolerance,
            self.newton_tolerance,
            self.max_newton_iterations,
        )

    def _determine_wet_dry_state(self, edge: EdgeState) -> MiddleState | None:
        """Classify the edge and adjust its quantities in place.

        Returns the middle state computed for a wall check, if any.
        """
        dry = self.dry_tolerance

        if edge.h_left > dry:
            edge.u_left = edge.hu_left / edge.h_left
        else:
            edge.b_left += edge.h_left
            edge.h_left = edge.hu_left = edge.u_left = 0.0

        if edge.h_right > dry:
            edge.u_right = edge.hu_right / edge.h_right
        else:
            edge.b_right += edge.h_right
            edge.h_right = edge.hu_right = edge.u_right = 0.0

        middle: MiddleState | None = None

        if edge.h_left >= dry and edge.h_right >= dry:
            edge.state = WetDryState.WET_WET
        elif edge.h_left < dry and edge.h_right < dry:
            edge.state = WetDryState.DRY_DRY
        elif edge.h_left < dry and edge.h_right + edge.b_right > edge.b_left:
            edge.state = WetDryState.DRY_WET_INUNDATION
        elif edge.h_right < dry and edge.h_left + edge.b_left > edge.b_right:
            edge.state = WetDryState.WET_DRY_INUNDATION
        elif edge.h_left < dry:
            # Can the momentum of the wet cell overcome the higher dry cell?
            middle = self._wall_middle_state(edge.h_right, -edge.u_right, edge.u_right)
            if middle.h_middle + edge.b_right > edge.b_left:
                edge.state = WetDryState.DRY_WET_WALL_INUNDATION
            else:
                edge.h_left = edge.h_right
                edge.u_left = -edge.u_right
                edge.hu_left = -edge.hu_right
                edge.b_left = edge.b_right = 0.0
                edge.state = WetDryState.DRY_WET_WALL
        elif edge.h_right < dry:
            middle = self._wall_middle_state(edge.h_left, edge.u_left, -edge.u_left)
            if middle.h_middle + edge.b_left > edge.b_right:
                edge.state = WetDryState.WET_DRY_WALL_INUNDATION
            else:
                edge.h_right = edge.h_left
                edge.u_right = -edge.u_left
                edge.hu_right = -edge.hu_left
                edge.b_right = edge.b_left = 0.0
                edge.state = WetDryState.WET_DRY_WALL
        else:
            raise ValueError("cannot classify the wet/dry state of the edge")

        # limit the effect of the source term at a wall
        if edge.state is WetDryState.DRY_WET_WALL_INUNDATION:
            edge.b_left = edge.h_right + edge.b_right
        elif edge.state is WetDryState.WET_DRY_WALL_INUNDATION:
            edge.b_right = edge.h_left + edge.b_left

        return middle