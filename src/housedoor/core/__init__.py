"""
Scene state for the house door toggle.
"""

from .scene import DoorState, HouseGeometry, HouseScene, RGB

__all__ = ["DoorState", "HouseGeometry", "HouseScene", "RGB"]
