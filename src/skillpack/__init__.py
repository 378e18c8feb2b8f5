"""
skillpack - parse, discover and render skill packages.
"""

__version__ = "0.1.0"
