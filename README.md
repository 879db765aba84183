# cardiomech

Quadrature-point building blocks for simulating cardiac tissue: hyperelastic
material laws with their linearisations, fibre/sheet/normal frames,
electrophysiological conductivity tensors, a two-step Newmark-type time
integrator and a strain energy density for post-processing.

Everything works on plain `numpy` arrays. Tensors are always 3×3; in 2-D
problems the third row and column are zero.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Material laws

Every law derives from `cardiomech.elastic.ElasticMaterial`. Calling
`compute(grad_disp, pressure=None, **kwargs)` builds the kinematics
(displacement gradient `U`, deformation gradient `F`, its determinant `J` and
the inverse transpose of `F`) in a `MaterialPoint`, lets the law fill in the
first Piola–Kirchhoff stress `P` and its extra quantities (`point.props`),
adds `p J F^{-T}` when a pressure is given, and computes the Cauchy stress
`point.stress`. Extra keyword arguments are passed to the law in
`point.inputs`. `compute` works in two and three dimensions; the helpers
`identity(dim)` and `kinematics(grad_disp, dim)` are available on their own.

`stress_lin(point, H)` returns the directional derivative of `P` in the
direction `H`, as used to build a Newton Jacobian.

| Module | Laws |
| --- | --- |
| `cardiomech.compressible` | `NeoHookean`, `MooneyRivlin`, `DeSaintVenant`, `LinearElastic` |
| `cardiomech.growth` | `GrowthMaterial` (neo-Hookean with isotropic growth `Fg = theta I`) |

```python
import numpy as np
from cardiomech.compressible import NeoHookean

law = NeoHookean(mu=1.0, lam=10.0, dim=3)
grad_u = np.array([[0.1, 0.0, 0.0],
                   [0.0, 0.0, 0.0],
                   [0.0, 0.0, 0.0]])
point = law.compute(grad_u, None)
print(point.P)                             # first Piola–Kirchhoff stress
print(law.stress_lin(point, np.eye(3)))    # its derivative in direction H
```

`GrowthMaterial` takes its growth factor as a keyword argument:
`law.compute(grad_u, None, theta=1.1)`. A missing or zero `theta` raises
`ValueError`. `DeSaintVenant` raises its bulk modulus to `epsilon` when it is
smaller; `LinearElastic` clamps a negative bulk modulus to zero. Laws that
take a logarithm of `J` raise `ValueError` when `J` is not positive.

## Fibres

`cardiomech.fibers` turns a fibre and a sheet direction into an orthonormal
frame (`orthonormal_frame`, `FixedRotation`, `fixed_rotation_from_angles`).
A `FiberFrame` gives the outer-product tensors (`tensors()`, a
`FiberTensors` with `fXf`, `gXg`, `sXs`, the symmetrised `fXs` and `nXn`) and
the rotation matrix whose columns are fibre, sheet and normal (`rotation()`).
`check_orthonormal` raises `ValueError` when a rotation is not orthonormal.

`cardiomech.fiber_geometry` builds rule-based frames from a transmural
thickness parameter, its gradient and the point position:
`ventricle_fibers` for the ventricular wall (cubic helix angle through the
wall) and `leaflet_fibers` for two fibre families at `±angle` degrees in
valve leaflets.

```python
from cardiomech.fibers import fixed_rotation_from_angles

frame = fixed_rotation_from_angles(30.0, 60.0).frame()
tensors = frame.tensors()
```

## Electrophysiology

`cardiomech.electrophysiology` provides conductivity tensors built from the
fibre tensors:

- `eikonal_conductivity(sigma_i, tensors)` — the eikonal diffusion tensor;
- `MonodomainConductivity(intra, extra)` — `tensors(fiber_tensors)` returns
  the monodomain tensor (harmonic combination of intra- and extracellular
  values) and the intracellular tensor;
- `MonodomainEllipsoid(sigma_i, sigma_e, c_m, chi)` — `conductivity(...)`
  returns the monodomain tensor and `time_coefficient()` returns `c_m * chi`.

Conductivities must hold exactly three values, and a direction in which both
conductivities vanish is rejected with `ValueError`.

## Time integration

`cardiomech.time_integration.NewmarkTwoSteps` is a second-order scheme for the
inertial term `(rho_s - rho_f) u_tt`. `time_derivatives` returns the scaled
second difference of the solution and `du_dot_du()` its derivative with
respect to the unknown. `init` stores the initial non-time residual,
`post_residual` adds the stored residuals to the current one, and
`post_step` shifts them by one step.

```python
import numpy as np
from cardiomech.time_integration import NewmarkTwoSteps

scheme = NewmarkTwoSteps(rho_s=1.2, rho_f=1.0, dt=0.01)
scheme.init(np.zeros(4))
u_tt = scheme.time_derivatives(np.ones(4), np.zeros(4), np.zeros(4))
```

## Energy

`cardiomech.energy.neo_hookean_energy_density` evaluates the strain energy
density of the nearly incompressible neo-Hookean model with a pressure
multiplier at one point; integrate it over the elements for the total energy.

## What the package does not do

- It has no nearly incompressible laws built on an isochoric/volumetric split
  and no fibre-reinforced anisotropic laws. The fibre tensors are provided so
  that such laws can be written on top of `ElasticMaterial`.
- It has no mesh, no finite-element assembly and no solver: it evaluates
  quantities at a single point, and the caller supplies displacement
  gradients, residual vectors and solutions.
- It has no command-line interface.