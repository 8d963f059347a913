import pytest

from voxbuilder import ModelRegistry, PaletteColor, VoxelEntry, VoxelModel

RED = PaletteColor(255, 0, 0)
GREEN = PaletteColor(0, 255, 0)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry():
    return ModelRegistry()


@pytest.fixture
def model():
    model = VoxelModel(name="test")
    model.set_voxels([
        VoxelEntry((0, 0, 0), RED),
        VoxelEntry((1, 2, 3), GREEN),
    ])
    return model
