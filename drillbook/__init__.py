"""Worked solutions to classic graph, grid, sliding-window, subarray and concurrency exercises."""

__version__ = "0.1.0"