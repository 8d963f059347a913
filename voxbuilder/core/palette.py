"""
VoxelPalette - Color Palette Management
=======================================

Builds MagicaVoxel-compatible palettes from the colors a model uses.
Colors are assigned 1-based indices in the order they are first seen;
index 0 is reserved for empty space by the .vox format.
"""

import numpy as np
from typing import List, Tuple, Dict, Any, Mapping
from dataclasses import dataclass

from voxbuilder.errors import PaletteOverflowError


PALETTE_SIZE = 256

# Highest index a voxel can reference (stored as an unsigned byte)
MAX_COLORS = 255


@dataclass(frozen=True)
class PaletteColor:
    """A single RGBA color. Hashable, so it can key a palette table."""
    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> Dict[str, int]:
        """Return color as an {r, g, b, a} mapping."""
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}

    def to_hex(self) -> str:
        """Return color as hex string (#rrggbbaa)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PaletteColor':
        """Create a color from an {r, g, b, a} mapping (alpha defaults to 255)."""
        return cls(r=int(data['r']), g=int(data['g']), b=int(data['b']),
                   a=int(data.get('a', 255)))

    @classmethod
    def from_hex(cls, hex_color: str) -> 'PaletteColor':
        """Create a color from a hex string."""
        hex_color = hex_color.lstrip('#')
        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)
        a = int(hex_color[6:8], 16) if len(hex_color) >= 8 else 255
        return cls(r=r, g=g, b=b, a=a)


FILLER_COLOR = PaletteColor(255, 255, 255, 255)


class VoxelPalette:
    """
    First-seen-wins palette for a single export.

    Colors get consecutive indices starting at 1 in discovery order.
    No quantization is done: once 255 distinct colors are in use,
    any further new color is rejected.
    """

    def __init__(self):
        self.colors: List[PaletteColor] = []
        self._indices: Dict[PaletteColor, int] = {}

    def __len__(self) -> int:
        return len(self.colors)

    def __contains__(self, color: PaletteColor) -> bool:
        return color in self._indices

    def index_of(self, color: PaletteColor) -> int:
        """
        Get the palette index for a color, adding it if unseen.

        Args:
            color: Color to look up

        Returns:
            1-based palette index

        Raises:
            PaletteOverflowError: If the color is new and the palette is full
        """
        index = self._indices.get(color)
        if index is None:
            if len(self.colors) >= MAX_COLORS:
                raise PaletteOverflowError(
                    f"Palette is full: more than {MAX_COLORS} distinct colors "
                    f"(first rejected color {color.to_hex()})"
                )
            self.colors.append(color)
            index = len(self.colors)
            self._indices[color] = index
        return index

    def get_color(self, index: int) -> PaletteColor:
        """Get a discovered color by its 1-based index."""
        if 1 <= index <= len(self.colors):
            return self.colors[index - 1]
        raise IndexError(f"Palette index out of range: {index}")

    def padded(self) -> List[PaletteColor]:
        """Return exactly PALETTE_SIZE colors, filling unused slots with white."""
        return self.colors + [FILLER_COLOR] * (PALETTE_SIZE - len(self.colors))

    def to_array(self) -> np.ndarray:
        """Get the padded palette as a (256, 4) uint8 RGBA array."""
        return np.array([c.to_tuple() for c in self.padded()], dtype=np.uint8)
