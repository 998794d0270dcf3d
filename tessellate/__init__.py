"""Tessellate — diamond and hexagon tessellation commands for vector documents."""

__version__ = "0.1.0"
