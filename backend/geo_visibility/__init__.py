"""
GEO visibility engine
Turns AI engine answers into brand visibility metrics
"""

__version__ = "1.0.0"
