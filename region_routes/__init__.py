"""
Region Routes.

Loads a fixed graph of named, grouped and costed regions and answers
two queries over it: region info and minimum-hop routes with a
per-group cost breakdown.
"""

__version__ = "0.1.0"
