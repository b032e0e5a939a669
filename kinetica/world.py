"""A world of particles with forces, contact generators and a resolver."""

from __future__ import annotations

from kinetica.contacts import (
    ParticleContact,
    ParticleContactGenerator,
    ParticleContactResolver,
)
from kinetica.force_generators import ParticleForceRegistry
from kinetica.particle import Particle
from kinetica.vectors import Vector3


class ParticleWorld:
    """Keeps a set of particles and advances them all together.

    With ``iterations`` of zero the resolver is given twice the number of
    contacts found in each frame.
    """

    def __init__(self, max_contacts: int, iterations: int = 0) -> None:
        self.particles: list[Particle] = []
        self.registry = ParticleForceRegistry()
        self.resolver = ParticleContactResolver(iterations)
        self.contact_generators: list[ParticleContactGenerator] = []
        self.contacts: list[ParticleContact] = []
        self.max_contacts = max_contacts
        self.calculate_iterations = iterations == 0

    def start_frame(self) -> None:
        """Clear the force accumulators of every particle."""
        for particle in self.particles:
            particle.clear_accumulator()

    def generate_contacts(self) -> list[ParticleContact]:
        """Ask each generator for contacts, up to ``max_contacts`` in total."""
        limit = self.max_contacts
        contacts: list[ParticleContact] = []
        for generator in self.contact_generators:
            found = generator.add_contact(limit)
            contacts.extend(found)
            limit -= len(found)
            if limit <= 0:
                break
        self.contacts = contacts
        return contacts

    def integrate(self, duration: float) -> None:
        """Advance every particle by ``duration``."""
        for particle in self.particles:
            particle.integrate(duration)

    def run_physics(self, duration: float) -> None:
        """Apply forces, integrate, then generate and resolve contacts."""
        self.registry.update_forces(duration)
        self.integrate(duration)
        contacts = self.generate_contacts()
        if contacts:
            if self.calculate_iterations:
                self.resolver.iterations = len(contacts) * 2
            self.resolver.resolve_contacts(contacts, duration)


class GroundContacts(ParticleContactGenerator):
    """Collides a shared list of particles with the ground plane y = 0."""

    def __init__(self, particles: list[Particle]) -> None:
        self.particles = particles

    def add_contact(self, limit: int) -> list[ParticleContact]:
        contacts: list[ParticleContact] = []
        for particle in self.particles:
            y = particle.position.y
            if y < 0.0:
                contacts.append(
                    ParticleContact(
                        particle,
                        None,
                        Vector3(0.0, 1.0, 0.0),
                        restitution=0.2,
                        penetration=-y,
                    )
                )
            if len(contacts) >= limit:
                break
        return contacts