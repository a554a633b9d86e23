"""
Course planner: loads a course catalog, validates prerequisites and
answers lookups and sorted listings from an in-memory ordered index.
"""

__version__ = "0.1.0"
