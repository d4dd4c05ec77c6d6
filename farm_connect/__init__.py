"""
Farm Connect: backend for a farmer information dashboard.
"""

__version__ = "1.0.0"
