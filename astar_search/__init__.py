"""
A* Search.

A generic, step-wise A* pathfinder over any directed graph that can
enumerate a node's neighbours and estimate the distance between two nodes.
"""

__version__ = "0.1.0"
