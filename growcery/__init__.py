"""
GrowCery - grocery store backend
"""
__version__ = "1.0.0"
