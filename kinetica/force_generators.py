"""Force generators that act on particles, and the registry that drives them."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass, field
from typing import Iterator

from kinetica.particle import Particle
from kinetica.vectors import Vector3


class ParticleForceGenerator(abc.ABC):
    """Something that can add a force to one or more particles."""

    @abc.abstractmethod
    def update_force(self, particle: Particle, duration: float) -> None:
        """Add this generator's force to ``particle`` for a step of ``duration``."""


@dataclass(eq=False)
class ParticleGravity(ParticleForceGenerator):
    """Applies a mass-scaled gravitational force; one instance serves many particles."""

    gravity: Vector3

    def update_force(self, particle: Particle, duration: float) -> None:
        if not particle.has_finite_mass():
            return
        particle.add_force(self.gravity * particle.mass)


@dataclass(eq=False)
class ParticleDrag(ParticleForceGenerator):
    """Drag with a linear (``k1``) and a quadratic (``k2``) velocity coefficient."""

    k1: float
    k2: float

    def update_force(self, particle: Particle, duration: float) -> None:
        force = particle.velocity.copy()
        speed = force.magnitude()
        drag_coeff = self.k1 * speed + self.k2 * speed * speed
        force.normalise()
        force *= -drag_coeff
        particle.add_force(force)


@dataclass(eq=False)
class ParticleSpring(ParticleForceGenerator):
    """A spring between the driven particle and ``other``."""

    other: Particle
    spring_constant: float
    rest_length: float

    def update_force(self, particle: Particle, duration: float) -> None:
        force = particle.position - self.other.position
        magnitude = abs(force.magnitude() - self.rest_length) * self.spring_constant
        force.normalise()
        force *= -magnitude
        particle.add_force(force)


@dataclass(eq=False)
class ParticleAnchoredSpring(ParticleForceGenerator):
    """A spring whose far end is held at the ``anchor`` point.

    The anchor vector is shared, not copied, so moving it moves the spring.
    """

    anchor: Vector3 = field(default_factory=Vector3)
    spring_constant: float = 0.0
    rest_length: float = 0.0

    def init(self, anchor: Vector3, spring_constant: float, rest_length: float) -> None:
        """Set all the spring's properties at once."""
        self.anchor = anchor
        self.spring_constant = spring_constant
        self.rest_length = rest_length

    def update_force(self, particle: Particle, duration: float) -> None:
        force = particle.position - self.anchor
        magnitude = (self.rest_length - force.magnitude()) * self.spring_constant
        force.normalise()
        force *= magnitude
        particle.add_force(force)


@dataclass(eq=False)
class ParticleFakeSpring(ParticleForceGenerator):
    """Fakes a stiff damped spring to a fixed ``anchor`` by predicting its motion."""

    anchor: Vector3
    spring_constant: float
    damping: float

    def update_force(self, particle: Particle, duration: float) -> None:
        if not particle.has_finite_mass():
            return

        position = particle.position - self.anchor

        radicand = 4 * self.spring_constant - self.damping * self.damping
        gamma = 0.5 * math.sqrt(radicand) if radicand >= 0 else math.nan
        if gamma == 0.0:
            return
        c = position * (self.damping / (2.0 * gamma)) + particle.velocity * (1.0 / gamma)

        target = position * math.cos(gamma * duration) + c * math.sin(gamma * duration)
        target *= math.exp(-0.5 * duration * self.damping)

        accel = (target - position) * (1.0 / (duration * duration)) - particle.velocity * (
            1.0 / duration
        )
        particle.add_force(accel * particle.mass)


@dataclass(eq=False)
class ParticleAnchoredBungee(ParticleAnchoredSpring):
    """An anchored spring that only pulls when stretched beyond its rest length."""

    def update_force(self, particle: Particle, duration: float) -> None:
        force = particle.position - self.anchor
        length = force.magnitude()
        if length < self.rest_length:
            return
        magnitude = (length - self.rest_length) * self.spring_constant
        force.normalise()
        force *= -magnitude
        particle.add_force(force)


@dataclass(eq=False)
class ParticleBungee(ParticleForceGenerator):
    """A spring to ``other`` that acts only when extended past its rest length."""

    other: Particle
    spring_constant: float
    rest_length: float

    def update_force(self, particle: Particle, duration: float) -> None:
        force = particle.position - self.other.position
        length = force.magnitude()
        if length <= self.rest_length:
            return
        magnitude = self.spring_constant * (self.rest_length - length)
        force.normalise()
        force *= -magnitude
        particle.add_force(force)


@dataclass(eq=False)
class ParticleBuoyancy(ParticleForceGenerator):
    """Buoyancy from a liquid plane parallel to xz at ``water_height``."""

    max_depth: float
    volume: float
    water_height: float
    liquid_density: float = 1000.0

    def update_force(self, particle: Particle, duration: float) -> None:
        depth = particle.position.y

        if depth >= self.water_height + self.max_depth:
            return

        force = Vector3(0.0, 0.0, 0.0)
        if depth <= self.water_height - self.max_depth:
            force.y = self.liquid_density * self.volume
            particle.add_force(force)
            return

        force.y = (
            self.liquid_density
            * self.volume
            * (depth - self.max_depth - self.water_height)
            / (2 * self.max_depth)
        )
        particle.add_force(force)


class ParticleForceRegistry:
    """Pairs of particles and the force generators that act on them."""

    def __init__(self) -> None:
        self.registrations: list[tuple[Particle, ParticleForceGenerator]] = []

    def __len__(self) -> int:
        return len(self.registrations)

    def __iter__(self) -> Iterator[tuple[Particle, ParticleForceGenerator]]:
        return iter(self.registrations)

    def add(self, particle: Particle, generator: ParticleForceGenerator) -> None:
        """Register ``generator`` to act on ``particle``."""
        self.registrations.append((particle, generator))

    def remove(self, particle: Particle, generator: ParticleForceGenerator) -> None:
        """Remove the given pair; does nothing if the pair is not registered."""
        for index, (p, g) in enumerate(self.registrations):
            if p is particle and g is generator:
                del self.registrations[index]
                return

    def clear(self) -> None:
        """Forget every registration; particles and generators are untouched."""
        self.registrations.clear()

    def update_forces(self, duration: float) -> None:
        """Ask every generator to add its force to its particle."""
        for particle, generator in self.registrations:
            generator.update_force(particle, duration)