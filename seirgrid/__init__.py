"""SEIR epidemic simulation as a cellular automaton on a grid, with CSV statistics."""

__version__ = "0.1.0"
__all__ = ["cell", "grid", "dim", "terminal", "seir", "render", "simulation"]