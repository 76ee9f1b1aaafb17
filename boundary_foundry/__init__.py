"""Boundary Foundry - Stitch map ways into a closed boundary.

Takes ways the user picked from map clicks plus the small boxes around those
clicks, trims the ways so their ends meet, and orders them into one loop.

Modules:
    core: Foundation classes (antimeridian-aware geo math, directional spans)
    model: Data structures (Point, Node, BoundingBox, Way, Endpoint, registry)
    assembly: The ten-phase boundary calculation

Example:
    from boundary_foundry.model import BoundaryRegistry
    from boundary_foundry.assembly import BoundaryAssembler

    boundary = BoundaryAssembler(registry=registry).calculate()
"""
