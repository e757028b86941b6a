"""Particle swarm optimisation with sub-swarms, benchmark functions and a command line."""

__version__ = "0.1.0"
__all__ = ["functions", "particle", "swarm", "cli"]