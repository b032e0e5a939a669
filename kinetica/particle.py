"""The point mass: the simplest simulated object."""

from __future__ import annotations

from dataclasses import dataclass, field

from kinetica.vectors import Vector3

FLT_MAX = 3.4028234663852886e38


@dataclass
class Particle:
    """A point mass with position and velocity, integrated with Newton-Euler.

    The inverse mass is stored: zero means immovable (infinite mass).
    """

    inverse_mass: float = 1.0
    damping: float = 1.0
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    forces: Vector3 = field(default_factory=Vector3)
    acceleration: Vector3 = field(default_factory=Vector3)

    @property
    def mass(self) -> float:
        """Mass of the particle; the largest float when immovable."""
        if self.inverse_mass == 0:
            return FLT_MAX
        return 1.0 / self.inverse_mass

    @mass.setter
    def mass(self, value: float) -> None:
        if value == 0:
            raise ValueError("mass must not be zero")
        self.inverse_mass = 1.0 / value

    def integrate(self, duration: float) -> None:
        """Advance the particle by ``duration``; immovable particles are skipped."""
        if self.inverse_mass <= 0.0:
            return
        self.position.add_scaled_vector(self.velocity, duration)

        resulting = self.acceleration.copy()
        resulting.add_scaled_vector(self.forces, self.inverse_mass)

        self.velocity.add_scaled_vector(resulting, duration)
        self.velocity *= self.damping**duration

        self.clear_accumulator()

    def has_finite_mass(self) -> bool:
        """True unless the inverse mass is negative."""
        return self.inverse_mass >= 0.0

    def clear_accumulator(self) -> None:
        """Drop the forces gathered for the next step."""
        self.forces.clear()

    def add_force(self, force: Vector3) -> None:
        """Accumulate a force to be applied at the next step only."""
        self.forces += force