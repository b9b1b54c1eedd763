"""Two-stack sorting puzzle: a solver that produces operations and a checker that verifies them."""

__version__ = "1.0.0"