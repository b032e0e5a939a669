# kinetica

A compact particle physics engine. It simulates point masses that are pushed
by force generators, joined by cables and rods, and kept apart by contacts.
It is plain Python with no third-party dependencies.

## What is in it

- `kinetica.vectors`: `Vector2`, `Vector3`, `Vector4` and `Quaternion`, plus
  the helpers `dot`, `cross`, `normalize` and `distance`. `Vector3` supports
  `+`, `-`, `*` (by a scalar or component-wise by another vector), unary `-`
  and the in-place forms, along with `magnitude`, `normalise`, `trim` and
  `add_scaled_vector`.
- `kinetica.matrices`: `Matrix3` and `Matrix4`, plus `transpose`,
  `look_at_rh`, `perspective_fov_rh`, `translate`, `scale`, `rotate`,
  `rotate_matrix` and `yaw_pitch_roll`. Vectors are transformed as row
  vectors, and `a @ b` is the matrix product, so
  `(a @ b).transform(v) == b.transform(a.transform(v))`.
  `Matrix3.set_inverse` leaves the matrix unchanged when given a singular
  matrix, so `Matrix3.inverse` of a singular matrix is the identity.
- `kinetica.rng`: `Random`, a seedable and repeatable random stream, with
  `random_bits`, `random_real`, `random_scaled`, `random_int`,
  `random_binomial`, `random_vector`, `random_vector_between`,
  `random_xz_vector` and `random_quaternion`. A seed of zero (the default)
  seeds the stream from the process clock. `random_int` raises `ValueError`
  for a maximum that is not positive. The module also has the 32-bit helpers
  `rotl` and `rotr`.
- `kinetica.utility`: `split_string`, `strings_to_floats`, `strings_to_ints`,
  `string_to_floats` and `string_to_ints`. The parsers read the leading
  number of each piece and give zero when there is none. There are also
  `lerp`, `degrees`, `radians`, `format_matrix`, `float_to_string` and
  `int_to_string`, and the `AppFlag` and `FlagSet` bit flags.
- `kinetica.particle`: `Particle`, which holds position, velocity,
  acceleration, damping, inverse mass and a force accumulator, and is moved
  forward by Newton–Euler integration. Setting `mass` to zero raises
  `ValueError`. An inverse mass of zero makes the particle immovable.
- `kinetica.force_generators`: `ParticleGravity`, `ParticleDrag`,
  `ParticleSpring`, `ParticleAnchoredSpring`, `ParticleFakeSpring`,
  `ParticleAnchoredBungee`, `ParticleBungee` and `ParticleBuoyancy`, all
  subclasses of `ParticleForceGenerator`. The module also has the
  `ParticleForceRegistry` that applies them (`add`, `remove`, `clear`,
  `update_forces`).
- `kinetica.contacts`: `ParticleContact`, `ParticleContactResolver` and the
  `ParticleContactGenerator` interface. A generator's `add_contact(limit)`
  returns a list of at most `limit` contacts.
- `kinetica.links`: `ParticleCable` and `ParticleRod` join two particles.
  `ParticleCableConstraint` and `ParticleRodConstraint` join a particle to a
  fixed anchor.
- `kinetica.world`: `ParticleWorld` runs one step: forces, integration,
  contact generation and resolution. `GroundContacts` keeps a list of
  particles above the plane y = 0.

## Installing

```
pip install .
```

## A short example

```python
from kinetica.vectors import Vector3
from kinetica.particle import Particle
from kinetica.force_generators import ParticleGravity
from kinetica.world import ParticleWorld, GroundContacts

world = ParticleWorld(max_contacts=10)

ball = Particle()
ball.mass = 2.0
ball.damping = 0.99
ball.position = Vector3(0.0, 5.0, 0.0)
world.particles.append(ball)

world.registry.add(ball, ParticleGravity(Vector3(0.0, -9.81, 0.0)))

world.contact_generators.append(GroundContacts(world.particles))

for _ in range(120):
    world.start_frame()
    world.run_physics(1 / 60)

print(ball.position)
```

If a world is created without an iteration count, or with zero, the contact
resolver is given twice the number of contacts found in each step.

## What it does not do

This is a library only. It has no command-line program, no window, no
rendering and no input handling. The matrices and projection helpers build
transforms but do not draw anything. The simulation covers particles only:
there are no rigid bodies, orientations of bodies, joints or collision
detection between shapes.

## Running the tests

```
pip install ".[test]"
pytest
```