"""
Bug Crossing: dodge the bugs and reach the water.
"""

__version__ = "0.1.0"
