"""A threaded simulation of the dining philosophers problem: argument parsing, the simulation and a command-line entry point."""

__version__ = "1.0.0"
__all__ = ["parsing", "simulation", "cli"]