"""
VoxBuilder - Voxel Model Building over MCP
==========================================

An in-memory voxel editing server for MCP tool callers:
- Named voxel projects held in a process-wide registry
- Sparse, coordinate-keyed voxel storage with RGBA colors
- Export to MagicaVoxel .vox files (SIZE / XYZI / RGBA chunks)

Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"

from voxbuilder.core.voxel_model import VoxelModel, VoxelEntry, VoxGrid
from voxbuilder.core.palette import VoxelPalette, PaletteColor
from voxbuilder.core.registry import ModelRegistry

__all__ = [
    'VoxelModel', 'VoxelEntry', 'VoxGrid', 'VoxelPalette', 'PaletteColor',
    'ModelRegistry', '__version__'
]
