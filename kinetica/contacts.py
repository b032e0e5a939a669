"""Contacts between particles and the iterative resolver that settles them."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Optional, Sequence

from kinetica.particle import FLT_MAX, Particle
from kinetica.vectors import Vector3, dot


def _movements() -> list[Vector3]:
    return [Vector3(), Vector3()]


@dataclass(eq=False)
class ParticleContact:
    """Two particles in contact; ``second`` is None for contact with scenery.

    Resolving a contact removes the interpenetration and applies enough
    impulse to keep the particles apart.
    """

    first: Particle
    second: Optional[Particle] = None
    contact_normal: Vector3 = field(default_factory=Vector3)
    restitution: float = 0.0
    penetration: float = 0.0
    particle_movement: list[Vector3] = field(default_factory=_movements)

    def resolve(self, duration: float) -> None:
        """Resolve both velocity and interpenetration."""
        self.resolve_velocity(duration)
        self.resolve_interpenetration(duration)

    def separating_velocity(self) -> float:
        """Relative velocity of the particles along the contact normal."""
        relative = self.first.velocity.copy()
        if self.second is not None:
            relative -= self.second.velocity
        return dot(relative, self.contact_normal)

    def _total_inverse_mass(self) -> float:
        total = self.first.inverse_mass
        if self.second is not None:
            total += self.second.inverse_mass
        return total

    def resolve_velocity(self, duration: float) -> None:
        """Apply the impulse that this collision calls for."""
        separating = self.separating_velocity()
        if separating > 0:
            return

        new_separating = -separating * self.restitution

        acc_caused = self.first.acceleration.copy()
        if self.second is not None:
            acc_caused -= self.second.acceleration
        acc_caused_separating = dot(acc_caused, self.contact_normal) * duration

        if acc_caused_separating < 0:
            new_separating += self.restitution * acc_caused_separating
            if new_separating < 0:
                new_separating = 0.0

        delta_velocity = new_separating - separating

        total_inverse_mass = self._total_inverse_mass()
        if total_inverse_mass <= 0:
            return

        impulse = delta_velocity / total_inverse_mass
        impulse_per_imass = self.contact_normal * impulse

        self.first.velocity = (
            self.first.velocity + impulse_per_imass * self.first.inverse_mass
        )
        if self.second is not None:
            self.second.velocity = (
                self.second.velocity + impulse_per_imass * -self.second.inverse_mass
            )

    def resolve_interpenetration(self, duration: float) -> None:
        """Move the particles apart in proportion to their inverse masses."""
        if self.penetration <= 0:
            return

        total_inverse_mass = self._total_inverse_mass()
        if total_inverse_mass <= 0:
            return

        move_per_imass = self.contact_normal * (self.penetration / total_inverse_mass)

        self.particle_movement[0] = move_per_imass * self.first.inverse_mass
        if self.second is not None:
            self.particle_movement[1] = move_per_imass * -self.second.inverse_mass
        else:
            self.particle_movement[1] = Vector3()

        self.first.position = self.first.position + self.particle_movement[0]
        if self.second is not None:
            self.second.position = self.second.position + self.particle_movement[1]


class ParticleContactResolver:
    """Resolves particle contacts, worst first, up to a number of iterations."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.iterations_used = 0

    def resolve_contacts(
        self, contacts: Sequence[ParticleContact], duration: float
    ) -> None:
        """Resolve ``contacts`` for both velocity and interpenetration."""
        self.iterations_used = 0
        while self.iterations_used < self.iterations:
            worst: Optional[ParticleContact] = None
            lowest = FLT_MAX
            for contact in contacts:
                separating = contact.separating_velocity()
                if separating < lowest and (separating < 0 or contact.penetration > 0):
                    lowest = separating
                    worst = contact

            if worst is None:
                break

            worst.resolve(duration)

            move = worst.particle_movement
            for contact in contacts:
                if contact.first is worst.first:
                    contact.penetration -= dot(move[0], contact.contact_normal)
                elif contact.first is worst.second:
                    contact.penetration -= dot(move[1], contact.contact_normal)
                if contact.second is not None:
                    if contact.second is worst.first:
                        contact.penetration += dot(move[0], contact.contact_normal)
                    elif contact.second is worst.second:
                        contact.penetration += dot(move[1], contact.contact_normal)

            self.iterations_used += 1


class ParticleContactGenerator(abc.ABC):
    """Something that reports contacts between particles."""

    @abc.abstractmethod
    def add_contact(self, limit: int) -> list[ParticleContact]:
        """Return the contacts generated now, at most ``limit`` of them."""