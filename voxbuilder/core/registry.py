"""
ModelRegistry - Named Project Storage
=====================================

Maps project names to VoxelModel instances for the lifetime of the process.
"""

import logging
from typing import Dict, List, Iterator

from voxbuilder.core.voxel_model import VoxelModel
from voxbuilder.errors import ProjectNotFoundError


logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    In-memory project registry.

    One instance is constructed at startup and handed to the server.
    Requests are handled one at a time, so no locking is done here.
    """

    def __init__(self):
        self._models: Dict[str, VoxelModel] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def create(self, name: str) -> VoxelModel:
        """
        Create an empty project, replacing any project with the same name.

        Args:
            name: Project name

        Returns:
            The new VoxelModel
        """
        if name in self._models:
            logger.info("Replacing existing project %r", name)
        else:
            logger.info("Created project %r", name)
        model = VoxelModel(name=name)
        self._models[name] = model
        return model

    def get(self, name: str) -> VoxelModel:
        """
        Look up a project by name.

        Raises:
            ProjectNotFoundError: If no project with that name was created
        """
        try:
            return self._models[name]
        except KeyError:
            raise ProjectNotFoundError(name) from None

    def names(self) -> List[str]:
        """Get all project names in creation order."""
        return list(self._models)
