"""
MagicaVoxel .vox File Format Handler
====================================

Writes VoxGrid exports as MagicaVoxel .vox files and reads them back.

VOX File Format:
- VOX files use little-endian byte order
- File starts with 'VOX ' magic number and version
- MAIN chunk wraps SIZE, XYZI and RGBA child chunks
- Every chunk is: id (4 bytes), content size, children size, content, children
"""

import logging
import struct
import numpy as np
from typing import Tuple, List, BinaryIO
from dataclasses import dataclass, field

from voxbuilder.core.voxel_model import VoxelModel, VoxGrid
from voxbuilder.core.palette import PALETTE_SIZE
from voxbuilder.errors import VoxEncodeError


logger = logging.getLogger(__name__)


@dataclass
class VoxChunk:
    """Represents a chunk in the VOX file."""
    id: str
    content: bytes
    children: List['VoxChunk'] = field(default_factory=list)


@dataclass
class VoxShape:
    """A single model read back from a VOX file."""
    size: Tuple[int, int, int]
    voxels: List[Tuple[int, int, int, int]]  # x, y, z, color_index


@dataclass
class VoxScene:
    """Models and palette read from a VOX file."""
    version: int
    models: List[VoxShape]
    palette: List[Tuple[int, int, int, int]]  # RGBA, palette[i] is index i + 1


def _to_bytes(values: list, width: int, what: str) -> bytes:
    """Pack rows of small integers as unsigned bytes, rejecting out-of-range values."""
    if not values:
        return b''
    array = np.array(values, dtype=np.int64).reshape(-1, width)
    if array.min() < 0 or array.max() > 255:
        bad = array[((array < 0) | (array > 255)).any(axis=1)][0]
        raise VoxEncodeError(
            f"{what} {tuple(int(v) for v in bad)} does not fit the .vox byte range 0-255"
        )
    return array.astype(np.uint8).tobytes()


class VoxFormat:
    """
    MagicaVoxel .vox file format reader/writer.

    Supports:
    - Writing a single model with a full 256-color palette
    - Reading SIZE, XYZI and RGBA chunks back for inspection
    """

    MAGIC = b'VOX '
    VERSION = 150  # MagicaVoxel version 0.99

    @classmethod
    def encode(cls, grid: VoxGrid) -> bytes:
        """
        Encode a grid as the bytes of a .vox file.

        Args:
            grid: Export grid from VoxelModel.gen_vox()

        Returns:
            Complete file contents

        Raises:
            VoxEncodeError: If a coordinate, size or color is out of range
        """
        if len(grid.palette) != PALETTE_SIZE:
            raise VoxEncodeError(
                f"Palette must have {PALETTE_SIZE} colors, got {len(grid.palette)}"
            )
        if any(s < 0 for s in grid.size):
            raise VoxEncodeError(f"Invalid model size {grid.size}")

        chunks = [
            VoxChunk(id='SIZE', content=struct.pack('<III', *grid.size)),
            VoxChunk(
                id='XYZI',
                content=struct.pack('<I', grid.num_voxels)
                + _to_bytes(grid.voxels, 4, "Voxel")
            ),
            VoxChunk(
                id='RGBA',
                content=_to_bytes([c.to_tuple() for c in grid.palette], 4, "Color")
            ),
        ]

        main = VoxChunk(id='MAIN', content=b'', children=chunks)
        return cls.MAGIC + struct.pack('<I', cls.VERSION) + cls._write_chunk(main)

    @classmethod
    def save(cls, filepath: str, model: VoxelModel) -> VoxGrid:
        """
        Export a VoxelModel to a VOX file.

        The file is only opened once encoding has succeeded.

        Args:
            filepath: Output file path
            model: VoxelModel to export

        Returns:
            The grid that was written
        """
        grid = model.gen_vox()
        data = cls.encode(grid)

        with open(filepath, 'wb') as f:
            f.write(data)

        logger.info("Wrote %s: %d voxels, size %s, %d bytes",
                    filepath, grid.num_voxels, grid.size, len(data))
        return grid

    @classmethod
    def _write_chunk(cls, chunk: VoxChunk) -> bytes:
        """Write a chunk to bytes."""
        children_data = b''.join(cls._write_chunk(child) for child in chunk.children)

        result = chunk.id.encode('ascii')
        result += struct.pack('<I', len(chunk.content))
        result += struct.pack('<I', len(children_data))
        result += chunk.content
        result += children_data

        return result

    @classmethod
    def read(cls, filepath: str) -> VoxScene:
        """
        Read a VOX file.

        Args:
            filepath: Path to the VOX file

        Returns:
            VoxScene with every model and the palette
        """
        with open(filepath, 'rb') as f:
            magic = f.read(4)
            if magic != cls.MAGIC:
                raise ValueError(f"Invalid VOX file: expected 'VOX ', got {magic!r}")

            version = struct.unpack('<I', f.read(4))[0]

            main_chunk = cls._read_chunk(f)
            if main_chunk.id != 'MAIN':
                raise ValueError(f"Expected MAIN chunk, got '{main_chunk.id}'")

            return cls._parse_chunks(version, main_chunk.children)

    @classmethod
    def _read_chunk(cls, f: BinaryIO) -> VoxChunk:
        """Read a single chunk from the file."""
        chunk_id = f.read(4).decode('ascii')
        content_size, children_size = struct.unpack('<II', f.read(8))

        content = f.read(content_size)

        children = []
        children_end = f.tell() + children_size
        while f.tell() < children_end:
            children.append(cls._read_chunk(f))

        return VoxChunk(id=chunk_id, content=content, children=children)

    @staticmethod
    def _parse_chunks(version: int, chunks: List[VoxChunk]) -> VoxScene:
        """Parse chunk list into a VoxScene."""
        models = []
        palette = []
        current_size = (0, 0, 0)

        for chunk in chunks:
            if chunk.id == 'SIZE':
                current_size = struct.unpack('<III', chunk.content[:12])

            elif chunk.id == 'XYZI':
                num_voxels = struct.unpack('<I', chunk.content[:4])[0]
                raw = np.frombuffer(chunk.content, dtype=np.uint8, count=num_voxels * 4,
                                    offset=4).reshape(-1, 4)
                voxels = [tuple(int(v) for v in row) for row in raw]
                models.append(VoxShape(size=current_size, voxels=voxels))

            elif chunk.id == 'RGBA':
                raw = np.frombuffer(chunk.content, dtype=np.uint8).reshape(-1, 4)
                palette = [tuple(int(v) for v in row) for row in raw]

            else:
                logger.debug("Skipping unsupported chunk %r", chunk.id)

        return VoxScene(version=version, models=models, palette=palette)
