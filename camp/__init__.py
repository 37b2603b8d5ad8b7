"""
Camp Olympics service.

Children, groups, Olympic disciplines and per-child results, with a ranking
engine that aggregates recorded attempts per discipline.
"""

__version__ = "1.0.0"
