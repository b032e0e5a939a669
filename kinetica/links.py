"""Cables and rods that keep particles together by generating contacts."""

from __future__ import annotations

from dataclasses import dataclass

from kinetica.contacts import ParticleContact, ParticleContactGenerator
from kinetica.particle import Particle
from kinetica.vectors import Vector3


@dataclass(eq=False)
class ParticleLink(ParticleContactGenerator):
    """Connects two particles; a contact is produced when the link is violated."""

    first: Particle
    second: Particle

    def current_length(self) -> float:
        """Distance between the two linked particles."""
        return (self.first.position - self.second.position).magnitude()

    def _normal(self) -> Vector3:
        normal = self.second.position - self.first.position
        normal.normalise()
        return normal


@dataclass(eq=False)
class ParticleCable(ParticleLink):
    """Stops two particles from moving further apart than ``max_length``."""

    max_length: float
    restitution: float

    def add_contact(self, limit: int) -> list[ParticleContact]:
        if limit < 1:
            return []
        length = self.current_length()
        if length < self.max_length:
            return []
        return [
            ParticleContact(
                self.first,
                self.second,
                self._normal(),
                restitution=self.restitution,
                penetration=length - self.max_length,
            )
        ]


@dataclass(eq=False)
class ParticleRod(ParticleLink):
    """Keeps two particles exactly ``length`` apart."""

    length: float

    def add_contact(self, limit: int) -> list[ParticleContact]:
        if limit < 1:
            return []
        current = self.current_length()
        if current == self.length:
            return []
        normal = self._normal()
        if current > self.length:
            penetration = current - self.length
        else:
            normal = normal * -1
            penetration = self.length - current
        return [
            ParticleContact(
                self.first,
                self.second,
                normal,
                restitution=0.0,
                penetration=penetration,
            )
        ]


@dataclass(eq=False)
class ParticleConstraint(ParticleContactGenerator):
    """Connects a particle to an immovable ``anchor`` point."""

    particle: Particle
    anchor: Vector3

    def current_length(self) -> float:
        """Distance from the particle to the anchor."""
        return (self.particle.position - self.anchor).magnitude()

    def _normal(self) -> Vector3:
        normal = self.anchor - self.particle.position
        normal.normalise()
        return normal


@dataclass(eq=False)
class ParticleCableConstraint(ParticleConstraint):
    """Stops a particle straying further than ``max_length`` from its anchor."""

    max_length: float
    restitution: float

    def add_contact(self, limit: int) -> list[ParticleContact]:
        if limit < 1:
            return []
        length = self.current_length()
        if length < self.max_length:
            return []
        return [
            ParticleContact(
                self.particle,
                None,
                self._normal(),
                restitution=self.restitution,
                penetration=length - self.max_length,
            )
        ]


@dataclass(eq=False)
class ParticleRodConstraint(ParticleConstraint):
    """Keeps a particle exactly ``length`` from its anchor."""

    length: float

    def add_contact(self, limit: int) -> list[ParticleContact]:
        if limit < 1:
            return []
        current = self.current_length()
        if current == self.length:
            return []
        normal = self._normal()
        if current > self.length:
            penetration = current - self.length
        else:
            normal = normal * -1
            penetration = self.length - current
        return [
            ParticleContact(
                self.particle,
                None,
                normal,
                restitution=0.0,
                penetration=penetration,
            )
        ]