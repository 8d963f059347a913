"""
VoxelModel - Core Voxel Data Structure
======================================

Sparse voxel storage for a single project. Voxels live in a dict keyed by
(x, y, z) tuples; a missing key means the cell is empty. The model can be
listed back as voxel entries or flattened into a palette-indexed grid
ready for .vox encoding.
"""

import logging
import numpy as np
from typing import Optional, Tuple, List, Dict, Any, Iterable
from dataclasses import dataclass, field

from voxbuilder.core.palette import VoxelPalette, PaletteColor


logger = logging.getLogger(__name__)

Position = Tuple[int, int, int]


@dataclass(frozen=True)
class VoxelEntry:
    """A voxel write: a position and a color, or None to clear the cell."""
    pos: Position
    color: Optional[PaletteColor] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as {"pos": {x, y, z}, "color": {r, g, b, a}}."""
        x, y, z = self.pos
        return {
            'pos': {'x': x, 'y': y, 'z': z},
            'color': self.color.to_dict() if self.color is not None else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VoxelEntry':
        """Deserialize from the {"pos": ..., "color": ...} form."""
        pos = data['pos']
        color = data.get('color')
        return cls(
            pos=(int(pos['x']), int(pos['y']), int(pos['z'])),
            color=PaletteColor.from_dict(color) if color is not None else None
        )


@dataclass
class VoxGrid:
    """
    Export-ready grid for a single .vox model.

    Attributes:
        size: Declared grid dimensions in .vox axis order (x, z, y of the model)
        voxels: List of (x, y, z, palette_index) in .vox axis order
        palette: Exactly 256 colors; voxel index i refers to palette[i - 1]
    """
    size: Tuple[int, int, int]
    voxels: List[Tuple[int, int, int, int]]
    palette: List[PaletteColor]

    @property
    def num_voxels(self) -> int:
        return len(self.voxels)


@dataclass
class VoxelModel:
    """
    Sparse voxel model.

    Attributes:
        name: Project name for identification
    """

    name: str = "Untitled"
    _voxels: Dict[Position, PaletteColor] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self._voxels)

    def __contains__(self, pos: Position) -> bool:
        return tuple(pos) in self._voxels

    def get_voxel(self, x: int, y: int, z: int) -> Optional[PaletteColor]:
        """Get the color at a position, or None if the cell is empty."""
        return self._voxels.get((x, y, z))

    def set_voxel(self, x: int, y: int, z: int, color: Optional[PaletteColor]):
        """
        Set or clear a single voxel.

        Args:
            x, y, z: Voxel coordinates
            color: New color, or None to clear the cell
        """
        if color is None:
            self._voxels.pop((x, y, z), None)
        else:
            self._voxels[(x, y, z)] = color

    def set_voxels(self, entries: Iterable[VoxelEntry]):
        """
        Apply a batch of voxel writes in order.

        Later entries for the same position win. Clearing an empty cell
        is a no-op.
        """
        written = cleared = 0
        for entry in entries:
            self.set_voxel(*entry.pos, entry.color)
            if entry.color is None:
                cleared += 1
            else:
                written += 1
        logger.debug("Model %r: %d set, %d cleared, %d total",
                     self.name, written, cleared, len(self._voxels))

    def get_voxels(self) -> List[VoxelEntry]:
        """Get all non-empty voxels in storage order."""
        return [VoxelEntry(pos=pos, color=color)
                for pos, color in self._voxels.items()]

    def to_records(self) -> List[Dict[str, Any]]:
        """Get all non-empty voxels as JSON-ready dicts."""
        return [entry.to_dict() for entry in self.get_voxels()]

    def gen_vox(self) -> VoxGrid:
        """
        Flatten the model into a palette-indexed .vox grid.

        The .vox format is Z-up, so the model's Y and Z axes are swapped
        in both the declared size and every voxel record. Each size
        component is one more than the largest coordinate on that axis.

        Returns:
            VoxGrid with size, voxel records and a 256-color palette

        Raises:
            PaletteOverflowError: If the model uses more than 255 colors
        """
        palette = VoxelPalette()
        voxels = []
        for (x, y, z), color in self._voxels.items():
            voxels.append((x, z, y, palette.index_of(color)))

        if voxels:
            extent = np.array(voxels, dtype=np.int64)[:, :3].max(axis=0) + 1
            size = (int(extent[0]), int(extent[1]), int(extent[2]))
        else:
            size = (0, 0, 0)

        return VoxGrid(size=size, voxels=voxels, palette=palette.padded())
