"""Classic dynamic-programming, backtracking, grid, graph and tree algorithms."""

__version__ = "0.1.0"

__all__ = ["backtracking", "dynamic", "graphs", "grids", "trees"]