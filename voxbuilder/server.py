"""
VoxBuilder MCP Server
=====================

Exposes voxel projects as MCP tools:

    create     - create (or reset) a named project
    setVoxels  - set or clear voxels by position and RGBA color
    getVoxels  - list the voxels of a project as JSON
    exportVox  - write a project to a MagicaVoxel .vox file

Argument shapes are declared as pydantic models, so FastMCP validates
them before any handler runs. Handler failures are raised as ToolError
and reported to the caller as error results.
"""

import json
import logging
from typing import Annotated, Optional, List

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from voxbuilder.core.registry import ModelRegistry
from voxbuilder.core.voxel_model import VoxelEntry
from voxbuilder.errors import VoxBuilderError
from voxbuilder.formats.vox import VoxFormat


logger = logging.getLogger(__name__)

SERVER_NAME = "VoxBuilder"

ProjectName = Annotated[
    str,
    Field(description="the name of the model project, without extension (should be created first)")
]
Coordinate = Annotated[int, Field(ge=0, le=255)]
Channel = Annotated[int, Field(ge=0, le=255)]


class PositionArg(BaseModel):
    """Voxel position; integers in 0-255."""
    x: Coordinate
    y: Coordinate
    z: Coordinate


class ColorArg(BaseModel):
    """RGBA color; each channel in 0-255."""
    r: Channel
    g: Channel
    b: Channel
    a: Channel = 255


class VoxelArg(BaseModel):
    pos: PositionArg = Field(
        description="the position of the voxel block, non-negative integers"
    )
    color: Optional[ColorArg] = Field(
        default=None,
        description="the color of the voxel block, omit or set to null to remove the voxel block"
    )


class VoxTools:
    """
    Tool handlers bound to a registry.

    Each method returns the text sent back to the caller.
    """

    def __init__(self, registry: ModelRegistry):
        self.registry = registry

    def create(self, name: str) -> str:
        self.registry.create(name)
        return f"Created project: {name}"

    def set_voxels(self, name: str, voxels: List[VoxelArg]) -> str:
        model = self._get_model(name)
        entries = [VoxelEntry.from_dict(v.model_dump()) for v in voxels]
        model.set_voxels(entries)
        return f"Set voxels to project: {name}"

    def get_voxels(self, name: str) -> str:
        model = self._get_model(name)
        return json.dumps(model.to_records())

    def export_vox(self, name: str, path: str) -> str:
        model = self._get_model(name)
        try:
            VoxFormat.save(path, model)
        except VoxBuilderError as e:
            logger.warning("Export of %r failed: %s", name, e)
            raise ToolError(f"Cannot export project {name}: {e}") from e
        except OSError as e:
            logger.warning("Writing %s failed: %s", path, e)
            raise ToolError(f"Cannot write {path}: {e.strerror or e}") from e
        return f"Exported project: {name} to {path}"

    def _get_model(self, name: str):
        try:
            return self.registry.get(name)
        except VoxBuilderError as e:
            logger.warning("%s", e)
            raise ToolError(str(e)) from e


def create_server(registry: Optional[ModelRegistry] = None,
                  server_name: str = SERVER_NAME) -> FastMCP:
    """
    Build the MCP server and register the voxel tools.

    Args:
        registry: Project registry to serve; a fresh one if not given
        server_name: Server name announced to clients

    Returns:
        Configured FastMCP instance
    """
    tools = VoxTools(registry if registry is not None else ModelRegistry())
    mcp = FastMCP(server_name)

    @mcp.tool(name="create", description="create a .vox model project")
    def create(
        name: Annotated[str, Field(description="the name of the model project, without extension")],
    ) -> str:
        return tools.create(name)

    @mcp.tool(
        name="setVoxels",
        description="set voxel blocks to a model project by pos and rgba color"
    )
    def set_voxels(
        name: ProjectName,
        voxels: Annotated[List[VoxelArg], Field(description="the voxel blocks to set")],
    ) -> str:
        return tools.set_voxels(name, voxels)

    @mcp.tool(
        name="getVoxels",
        description="get voxel blocks from a model project, use this to know what you have done"
    )
    def get_voxels(name: ProjectName) -> str:
        return tools.get_voxels(name)

    @mcp.tool(name="exportVox", description="export a .vox model project to a local file path")
    def export_vox(
        name: ProjectName,
        path: Annotated[
            str,
            Field(description="the local path to export the model project to (file fullpath & full name)")
        ],
    ) -> str:
        return tools.export_vox(name, path)

    return mcp
