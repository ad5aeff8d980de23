"""Augmented wave decomposition of the shallow water equations at an edge.

The jump in state across an edge is split into three f-waves: two waves
travelling with the extended Einfeldt speeds and a corrector wave in between.
A steady state wave accounts for the bathymetry source term.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from shallowflow.middle_state import MiddleState
from shallowflow.updates import WetDryState

Wave = tuple[float, float]

_WALL_LIKE = (
    WetDryState.WET_WET,
    WetDryState.WET_DRY_WALL,
    WetDryState.DRY_WET_WALL,
)


@dataclass
class EdgeState:
    """Quantities on both sides of an edge after the wet/dry treatment.

    ``root_h_left`` and ``root_h_right`` are the depths whose square roots
    enter the characteristic speeds and the Roe average; they default to
    ``h_left`` and ``h_right``.
    """

    h_left: float
    h_right: float
    hu_left: float
    hu_right: float
    b_left: float
    b_right: float
    u_left: float = 0.0
    u_right: float = 0.0
    state: WetDryState = WetDryState.WET_WET
    root_h_left: float | None = None
    root_h_right: float | None = None

    @property
    def sqrt_h_left(self) -> float:
        return math.sqrt(self.h_left if self.root_h_left is None else self.root_h_left)

    @property
    def sqrt_h_right(self) -> float:
        return math.sqrt(
            self.h_right if self.root_h_right is None else self.root_h_right
        )


def solve_linear_equation(
    matrix: Sequence[Sequence[float]], b: Sequence[float]
) -> tuple[float, float, float]:
    """Solve ``matrix * x = b`` for a 3x3 matrix using its adjugate.

    Raises ValueError if the matrix is singular.
    """
    (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = matrix
    m = (
        (
            a11 * a22 - a12 * a21,
            -(a01 * a22 - a02 * a21),
            a01 * a12 - a02 * a11,
        ),
        (
            -(a10 * a22 - a12 * a20),
            a00 * a22 - a02 * a20,
            -(a00 * a12 - a02 * a10),
        ),
        (
            a10 * a21 - a11 * a20,
            -(a00 * a21 - a01 * a20),
            a00 * a11 - a01 * a10,
        ),
    )
    d = a00 * m[0][0] + a01 * m[1][0] + a02 * m[2][0]
    if d == 0.0:
        raise ValueError("singular matrix")
    s = 1.0 / d
    b0, b1, b2 = b
    return (
        (m[0][0] * b0 + m[0][1] * b1 + m[0][2] * b2) * s,
        (m[1][0] * b0 + m[1][1] * b1 + m[1][2] * b2) * s,
        (m[2][0] * b0 + m[2][1] * b1 + m[2][2] * b2) * s,
    )


def _extended_einfeldt_speeds(
    edge: EdgeState,
    characteristic: tuple[float, float],
    roe: tuple[float, float],
    middle: MiddleState,
    dry_tolerance: float,
) -> tuple[float, float]:
    mid_0, mid_1 = middle.speeds
    if edge.state in _WALL_LIKE:
        return (
            min(characteristic[0], roe[0], mid_1),
            max(characteristic[1], roe[1], mid_0),
        )
    if edge.h_left < dry_tolerance:
        # the speeds of the dry side are undefined
        return min(roe[0], mid_1), max(characteristic[1], roe[1])
    if edge.h_right < dry_tolerance:
        return min(characteristic[0], roe[0]), max(roe[1], mid_0)
    raise ValueError(f"edge state {edge.state.name} does not match its depths")


def augmented_decomposition(
    edge: EdgeState,
    middle: MiddleState,
    gravity: float,
    dry_tolerance: float,
    zero_tolerance: float,
) -> tuple[list[Wave], tuple[float, float, float]]:
    """Decompose the jump at ``edge`` into three f-waves and their speeds.

    ``middle`` is the middle state of the homogeneous Riemann problem for the
    edge. For wall states only the wave moving away from the wall is kept.
    Returns the waves as ``(h_part, hu_part)`` pairs and their speeds.
    """
    g = gravity
    h_l, h_r = edge.h_left, edge.h_right
    hu_l, hu_r = edge.hu_left, edge.hu_right
    u_l, u_r = edge.u_left, edge.u_right
    b_l, b_r = edge.b_left, edge.b_right

    sqrt_g = math.sqrt(g)
    sqrt_h_l = edge.sqrt_h_left
    sqrt_h_r = edge.sqrt_h_right

    characteristic = (u_l - sqrt_g * sqrt_h_l, u_r + sqrt_g * sqrt_h_r)

    h_roe = 0.5 * (h_r + h_l)
    u_roe = (u_l * sqrt_h_l + u_r * sqrt_h_r) / (sqrt_h_l + sqrt_h_r)
    sqrt_g_h_roe = math.sqrt(g * h_roe)
    roe = (u_roe - sqrt_g_h_roe, u_roe + sqrt_g_h_roe)

    s0, s2 = _extended_einfeldt_speeds(edge, characteristic, roe, middle, dry_tolerance)

    h_hll = (hu_l - hu_r + s2 * h_r - s0 * h_l) / (s2 - s0)
    h_hll = max(h_hll, 0.0)

    s1 = 0.5 * (s0 + s2)
    eigen_vectors = (
        (1.0, 0.0, 1.0),
        (s0, 0.0, s2),
        (s0 * s0, 1.0, s2 * s2),
    )

    jump_h = h_r - h_l
    jump_hu = hu_r - hu_l
    jump_flux = hu_r * u_r + 0.5 * g * h_r * h_r - (hu_l * u_l + 0.5 * g * h_l * h_l)

    db = b_r - b_l
    h_bar = (h_l + h_r) * 0.5
    steady_h = -db
    steady_hu = -g * h_bar * db

    # preserve depth positivity
    if s0 < -zero_tolerance and s2 > zero_tolerance:
        steady_h = max(steady_h, h_hll * (s2 - s0) / s0)
        steady_h = min(steady_h, h_hll * (s2 - s0) / s2)
    elif s0 > zero_tolerance:
        steady_h = max(steady_h, -h_l)
        steady_h = min(steady_h, h_hll * (s2 - s0) / s0)
    elif s2 < -zero_tolerance:
        steady_h = max(steady_h, h_hll * (s2 - s0) / s2)
        steady_h = min(steady_h, h_r)

    # limit the effect of the source term
    steady_hu = min(steady_hu, g * max(-h_l * db, -h_r * db))
    steady_hu = max(steady_hu, g * min(-h_l * db, -h_r * db))

    beta = solve_linear_equation(
        eigen_vectors, (jump_h - steady_h, jump_hu, jump_flux - steady_hu)
    )

    zero: Wave = (0.0, 0.0)
    if edge.state is WetDryState.WET_DRY_WALL:
        left = (beta[0] * eigen_vectors[1][0], beta[0] * eigen_vectors[2][0])
        return [left, zero, zero], (s0, 0.0, 0.0)
    if edge.state is WetDryState.DRY_WET_WALL:
        right = (beta[2] * eigen_vectors[1][2], beta[2] * eigen_vectors[2][2])
        return [zero, zero, right], (0.0, 0.0, s2)

    waves = [
        (coefficient * eigen_vectors[1][i], coefficient * eigen_vectors[2][i])
        for i, coefficient in enumerate(beta)
    ]
    return waves, (s0, s1, s2)