"""
Exception types raised by the VoxBuilder core and format layers.

The server layer turns these into tool errors; nothing below it
knows about the RPC transport.
"""


class VoxBuilderError(Exception):
    """Base class for all VoxBuilder errors."""


class ProjectNotFoundError(VoxBuilderError, KeyError):
    """Raised when a project name has not been created."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Project not found: {self.name} (call create first)"


class PaletteOverflowError(VoxBuilderError):
    """Raised when a model uses more distinct colors than a palette holds."""


class VoxEncodeError(VoxBuilderError, ValueError):
    """Raised when a voxel grid cannot be represented in the .vox format."""
