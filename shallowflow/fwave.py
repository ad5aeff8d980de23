"""F-wave Riemann solver for the one-dimensional shallow water equations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from shallowflow.updates import NetUpdates, WetDryState, accumulate_waves


@dataclass
class _Edge:
    h_left: float
    h_right: float
    hu_left: float
    hu_right: float
    b_left: float
    b_right: float
    u_left: float = 0.0
    u_right: float = 0.0


class FWaveSolver:
    """F-wave solver with Einfeldt wave speeds and wall treatment of dry cells.

    A dry cell next to a wet one is replaced by a reflecting wall; this is not
    correct for inundation problems.
    """

    def __init__(
        self,
        dry_tolerance: float = 0.01,
        gravity: float = 9.81,
        zero_tolerance: float = 0.000000001,
    ) -> None:
        self.dry_tolerance = dry_tolerance
        self.gravity = gravity
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
        """Net updates for the cells on both sides of an edge."""
        edge = _Edge(h_left, h_right, hu_left, hu_right, b_left, b_right)
        state = self._determine_wet_dry_state(edge)
        if state is WetDryState.DRY_DRY:
            return NetUpdates()

        speeds = self._wave_speeds(edge)
        waves = self._wave_decomposition(edge, speeds)
        updates = accumulate_waves(waves, speeds, self.zero_tolerance)

        if state is WetDryState.WET_DRY_WALL:
            return updates.without_right()
        if state is WetDryState.DRY_WET_WALL:
            return updates.without_left()
        return updates

    def _determine_wet_dry_state(self, edge: _Edge) -> WetDryState:
        dry = self.dry_tolerance
        if edge.h_left < dry and edge.h_right < dry:
            return WetDryState.DRY_DRY
        if edge.h_left < dry:
            edge.u_right = edge.hu_right / edge.h_right
            edge.h_left = edge.h_right
            edge.b_left = edge.b_right
            edge.hu_left = -edge.hu_right
            edge.u_left = -edge.u_right
            return WetDryState.DRY_WET_WALL
        if edge.h_right < dry:
            edge.u_left = edge.hu_left / edge.h_left
            edge.h_right = edge.h_left
            edge.b_right = edge.b_left
            edge.hu_right = -edge.hu_left
            # The left velocity mirrors the (still zero) right one here.
            edge.u_left = -edge.u_right
            return WetDryState.WET_DRY_WALL
        edge.u_left = edge.hu_left / edge.h_left
        edge.u_right = edge.hu_right / edge.h_right
        return WetDryState.WET_WET

    def _wave_speeds(self, edge: _Edge) -> tuple[float, float]:
        g = self.gravity
        characteristic = (
            edge.u_left - math.sqrt(g * edge.h_left),
            edge.u_right + math.sqrt(g * edge.h_right),
        )
        sqrt_h_left = math.sqrt(edge.h_left)
        sqrt_h_right = math.sqrt(edge.h_right)
        h_roe = 0.5 * (edge.h_right + edge.h_left)
        u_roe = (edge.u_left * sqrt_h_left + edge.u_right * sqrt_h_right) / (
            sqrt_h_left + sqrt_h_right
        )
        sqrt_g_h_roe = math.sqrt(g * h_roe)
        roe = (u_roe - sqrt_g_h_roe, u_roe + sqrt_g_h_roe)
        return min(characteristic[0], roe[0]), max(characteristic[1], roe[1])

    def _wave_decomposition(
        self, edge: _Edge, speeds: tuple[float, float]
    ) -> list[tuple[float, float]]:
        g = self.gravity
        lambda_1, lambda_2 = speeds
        lambda_dif = lambda_2 - lambda_1
        if not lambda_1 < lambda_2 or abs(lambda_dif) <= self.zero_tolerance:
            raise ValueError(f"degenerate wave speeds {lambda_1!r} and {lambda_2!r}")

        flux_h = edge.hu_right - edge.hu_left
        flux_hu = (
            edge.hu_right * edge.u_right
            + 0.5 * g * edge.h_right * edge.h_right
            - (edge.hu_left * edge.u_left + 0.5 * g * edge.h_left * edge.h_left)
        )
        psi = -g * 0.5 * (edge.h_right + edge.h_left) * (edge.b_right - edge.b_left)
        flux_hu -= psi

        inv = 1.0 / lambda_dif
        beta_1 = inv * lambda_2 * flux_h - inv * flux_hu
        beta_2 = inv * -lambda_1 * flux_h + inv * flux_hu
        return [(beta_1, beta_1 * lambda_1), (beta_2, beta_2 * lambda_2)]