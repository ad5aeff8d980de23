# shallowflow

Building blocks for finite-volume simulations of the shallow water equations:

- **Scenarios**: initial water height, velocity and bathymetry fields on a
  rectangular domain, together with boundary types, boundary positions and end
  times.
- **Riemann solvers**: net updates across a single cell edge, computed from the
  states on its left and right.

## Installation

```
pip install .
```

For the test dependencies, install with `pip install .[test]` and then run `pytest`.

## Scenarios

`shallowflow.scenarios` provides the `Scenario` base class, the enums
`BoundaryEdge` (`LEFT`, `RIGHT`, `BOTTOM`, `TOP`) and `BoundaryType`
(`OUTFLOW`, `WALL`), and these ready-made setups:

| Class | Description |
|-------|-------------|
| `Scenario` | Depth 10 on a flat bottom in the unit square, wall boundaries, end time 0.1 |
| `RadialDamBreakScenario` | Depth 15 within radius 100 of the centre of a 1000 x 1000 domain, 10 elsewhere; outflow boundaries |
| `BathymetryDamBreakScenario` | Depth 260 over a bottom at -260, raised to -255 within radius 50 of the centre; outflow boundaries |
| `SeaAtRestScenario` | Flat surface at 10 over a bottom raised by 0.1 near the centre of the unit square |
| `SplashingConeScenario` | Cone-shaped bottom with a raised water region in the centre; outflow boundaries |
| `SplashingPoolScenario` | Surface with a diagonal slope in a 1000 x 1000 pool |

Every scenario has the methods `water_height(x, y)`, `velocity_u(x, y)`,
`velocity_v(x, y)`, `bathymetry(x, y)`, `water_height_at_rest()`,
`end_simulation_time()`, `boundary_type(edge)` and `boundary_pos(edge)`.

```python
from shallowflow.scenarios import BoundaryEdge, RadialDamBreakScenario

scenario = RadialDamBreakScenario()
scenario.water_height(500.0, 500.0)         # 15.0
scenario.bathymetry(10.0, 10.0)             # 0.0
scenario.boundary_pos(BoundaryEdge.RIGHT)   # 1000.0
scenario.end_simulation_time()              # 15.0
```

To define your own scenario, subclass `Scenario` and override only the methods
you need. A uniform initial velocity can be set through the class attribute
`initial_velocity`, a `(u, v)` pair that `velocity_u` and `velocity_v` read.

## Solvers

Both edge solvers are called the same way: `compute_net_updates(h_left,
h_right, hu_left, hu_right, b_left, b_right)` takes the water heights, momenta
and bathymetry on both sides of an edge and returns a frozen `NetUpdates`
record with the fields `h_left`, `h_right`, `hu_left`, `hu_right` and
`max_wave_speed`. The last one is the largest absolute wave speed at the edge,
for use in the CFL condition. If both cells are dry, all fields are zero.

```python
from shallowflow.fwave import FWaveSolver
from shallowflow.augrie import AugRieSolver

fwave = FWaveSolver()
updates = fwave.compute_net_updates(10.0, 8.0, 0.0, 0.0, 0.0, 0.0)
updates.h_left, updates.h_right, updates.max_wave_speed

augrie = AugRieSolver()
updates = augrie.compute_net_updates(10.0, 0.0, 5.0, 0.0, 0.0, 2.0)
```

- `FWaveSolver(dry_tolerance=0.01, gravity=9.81, zero_tolerance=1e-9)` is the
  f-wave solver with Einfeldt wave speeds. It treats a dry cell next to a wet
  one as a reflecting wall, which is not correct for inundation, and sets the
  updates of the wall side to zero. It raises `ValueError` if the two wave
  speeds are degenerate.
- `AugRieSolver(dry_tolerance=0.01, gravity=9.81, newton_tolerance=1e-6,
  max_newton_iterations=10, zero_tolerance=1e-5)` is the augmented Riemann
  solver. It splits the jump into three f-waves plus a steady state wave for the
  bathymetry source term. A dry cell lying lower than its wet neighbour is
  inundated; a dry cell lying higher acts as a wall unless the momentum of the
  wet cell is large enough to climb the step.

Lower-level pieces can be used on their own:

- `shallowflow.middle_state`: `determine_riemann_structure`,
  `compute_middle_state`, the `RiemannStructure` enum and the `MiddleState`
  record.
- `shallowflow.decomposition`: `EdgeState`, `augmented_decomposition` and
  `solve_linear_equation`, a 3x3 solve that raises `ValueError` for a singular
  matrix.
- `shallowflow.updates`: the `WetDryState` enum, `NetUpdates` and
  `accumulate_waves`, which sums waves into net updates by the sign of their
  speeds and splits near-zero-speed waves equally between both cells.

## What this package does not do

There is no simulation driver: no grid of cells, no time stepping, no
application of boundary conditions, no output files and no command-line
program. The scenarios and solvers are meant to be combined by your own code.