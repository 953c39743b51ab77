"""
nmskeys - No Man's Sky key binding viewer
"""

__version__ = "0.3.0"
