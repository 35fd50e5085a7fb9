"""
Global constants used throughout the project
"""
import math


# Distance reported by dijkstra for nodes unreachable from the start
INFINITY = math.inf

# Additive identity contributed by disjoint range-tree nodes
SUM_IDENTITY = 0

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
DEBUG = False
