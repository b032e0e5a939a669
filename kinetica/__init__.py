"""Particle physics: vectors, matrices, random streams, forces, links and contact resolution."""

__version__ = "0.1.0"

__all__ = [
    "vectors",
    "matrices",
    "rng",
    "utility",
    "particle",
    "force_generators",
    "contacts",
    "links",
    "world",
]