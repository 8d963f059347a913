"""
VoxBuilder Formats Module
=========================

File format writers for voxel projects.
"""

from voxbuilder.formats.vox import VoxFormat, VoxScene, VoxShape

__all__ = ['VoxFormat', 'VoxScene', 'VoxShape']
