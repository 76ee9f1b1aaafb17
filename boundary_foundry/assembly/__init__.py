"""Boundary assembly from accepted ways and click boxes.

- BoundaryAssembler: Ten-phase trim-and-chain calculation
- find_nearest_pair / NodePairDistance: Closest in-box node pair of two ways
"""

from boundary_foundry.assembly.boundary_assembler import BoundaryAssembler
from boundary_foundry.assembly.nearest_pair import NodePairDistance, find_nearest_pair

__all__ = [
    "BoundaryAssembler",
    "NodePairDistance",
    "find_nearest_pair",
]
