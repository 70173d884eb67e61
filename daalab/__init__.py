"""Textbook algorithms: sorting, knapsack, backtracking, spanning trees, shortest paths and graph ordering, with a command-line front end."""

__version__ = "0.1.0"