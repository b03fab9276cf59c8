# caesar

Numerical building blocks for physical simulations: basic math helpers,
interpolation, polynomial and nonlinear equation solvers, small linear
algebra routines, physical properties of water, ice and air, and a few
utilities for time lines, timers and string parsing.

## Installation

```
pip install .
```

Install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Interpolation over a table (the arguments must lie inside the table,
otherwise `ValueError` is raised):

```python
from caesar.interpolate import linear_interpolation

linear_interpolation([0.0, 1.0, 2.0], [0.0, 10.0, 40.0], 1.5)  # 25.0
```

Real roots of a cubic by Cardano's formula; the last two arguments are the
tolerances for pairing cube roots and for discarding imaginary parts:

```python
from caesar.poly_eqn import find_real_roots_eq3

find_real_roots_eq3(1.0, 0.0, 0.0, -8.0, 1.0e-12, 1.0e-12)  # approximately [2.0]
```

Root finding on a segment. The result is a `NonlinearEqnResult` holding a
`NonlinearEqnStatus` and the root:

```python
from caesar.nonlinear_eqn import NonlinearEqn

eqn = NonlinearEqn(x_eps=1.0e-10, f_eps=1.0e-10, max_iters_count=100)
status, root = eqn.solve_combined(lambda x: x * x - 2.0, [0.0, 2.0])
status.solved  # True
```

`solve_bisection` and `solve_chords` work the same way; an initial guess
may be passed as the last argument.

Physical properties, with temperatures in degrees Celsius:

```python
from caesar.physics import rho_a, air_dynamic_viscosity
from caesar.heat_capacity import cp_w
from caesar.phase_transition_heat import l_ev

rho_a(15.0, 101325.0)   # air density, kg / m^3
cp_w(20.0)              # water heat capacity, J / (kg * degree)
l_ev(100.0)             # specific vaporization heat, J / kg
```

Tabulated properties accept temperatures from -273.15 C to 1000 C and are
constant beyond the ends of their tables.

Stepping through simulated time:

```python
from caesar.time_line import TimeLine

line = TimeLine(0.0, 1.0, 0.1)
while not line.is_finished():
    line.next_iteration()
line.iteration()  # 10
```

Writing a matplotlib script that plots a function:

```python
import math
from caesar.python_generator import simple_function_chart_of

with open("chart.py", "w") as out:
    simple_function_chart_of(math.sin, [0.0, math.pi], 100, out)
```

## Modules

- `caesar.basics`: comparisons with tolerance, sign, cube, bounds, angle conversion, `randint`, the `Order` enumeration.
- `caesar.bits`: lowest set and clear bit of a 32-bit value.
- `caesar.stats`: `total` and `mean`.
- `caesar.interpolate`: stair, segment, three-point and table interpolation.
- `caesar.poly_eqn`: real roots of quadratic and cubic equations, nearest and directed nearest root.
- `caesar.linear_algebra`: transpose, products, row operations, 3x3 determinant and real eigenvalues.
- `caesar.eigenvalues`: eigenvalues in ascending order with their eigenvectors for a 3x3 matrix.
- `caesar.sle`: 2x2 systems and the tridiagonal algorithm; `SingularSystemError` on a zero divisor.
- `caesar.segment_function`, `caesar.nonlinear_eqn`: bisection, chords and combined root finding.
- `caesar.physics`, `caesar.heat_capacity`, `caesar.phase_transition_heat`: physical constants and properties.
- `caesar.strings`: word splitting, quoted substrings, integer and `[lo-hi]` parsing.
- `caesar.system`: `double_hash`, the bit pattern of a float.
- `caesar.colorable`, `caesar.holders`, `caesar.mapper`: color masks, small holder objects, enum-to-name mapping.
- `caesar.timeutil`, `caesar.time_line`, `caesar.timer`: time values, simulation time lines, a wall-clock timer.
- `caesar.python_generator`: writes plotting scripts for function charts.

## What it does not do

The package has no command-line program and does no parallel or
interprocess data exchange; every routine runs in a single process.
`caesar.python_generator` only writes scripts as text; it does not run
them and does not draw graphs of vertices and edges.