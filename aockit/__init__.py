"""Solvers for cave routes, binary diagnostics, octopus grids, paper folding and snailfish numbers."""

__version__ = "0.1.0"