"""
Employee API and its Backend-for-Frontend.
"""

__version__ = "1.0.0"
