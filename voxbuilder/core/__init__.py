"""
VoxBuilder Core Module
======================

Core data structures for sparse voxel projects.
"""

from voxbuilder.core.voxel_model import VoxelModel, VoxelEntry, VoxGrid
from voxbuilder.core.palette import VoxelPalette, PaletteColor
from voxbuilder.core.registry import ModelRegistry

__all__ = ['VoxelModel', 'VoxelEntry', 'VoxGrid', 'VoxelPalette',
           'PaletteColor', 'ModelRegistry']
