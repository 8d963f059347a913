import pytest
from voxbuilder import PaletteColor, VoxelEntry, VoxelModel
from voxbuilder.core.palette import FILLER_COLOR
from voxbuilder.errors import PaletteOverflowError

RED = PaletteColor(255, 0, 0)
GREEN = PaletteColor(0, 255, 0)
BLUE = PaletteColor(0, 0, 255)


def test_new_model_is_empty():
    model = VoxelModel(name="a")
    assert model.get_voxels() == []
    assert model.to_records() == []
    assert len(model) == 0


def test_set_and_get_round_trip():
    model = VoxelModel(name="a")
    model.set_voxels([VoxelEntry((0, 0, 0), PaletteColor(10, 20, 30, 255))])

    assert model.to_records() == [
        {"pos": {"x": 0, "y": 0, "z": 0}, "color": {"r": 10, "g": 20, "b": 30, "a": 255}}
    ]


def test_last_write_wins_and_clear():
    model = VoxelModel()
    model.set_voxels([
        VoxelEntry((1, 1, 1), RED),
        VoxelEntry((2, 2, 2), GREEN),
        VoxelEntry((1, 1, 1), BLUE),
        VoxelEntry((2, 2, 2), None),
    ])

    assert model.get_voxels() == [VoxelEntry((1, 1, 1), BLUE)]
    assert model.get_voxel(2, 2, 2) is None
    assert (1, 1, 1) in model


def test_clearing_absent_voxel_is_noop(model):
    before = model.get_voxels()
    model.set_voxels([VoxelEntry((9, 9, 9), None)])
    assert model.get_voxels() == before


def test_set_voxels_is_idempotent():
    entries = [VoxelEntry((0, 1, 2), RED), VoxelEntry((3, 4, 5), GREEN),
               VoxelEntry((0, 1, 2), None)]
    once = VoxelModel()
    once.set_voxels(entries)
    twice = VoxelModel()
    twice.set_voxels(entries)
    twice.set_voxels(entries)
    assert once.get_voxels() == twice.get_voxels()


def test_gen_vox_empty_model():
    grid = VoxelModel().gen_vox()
    assert grid.size == (0, 0, 0)
    assert grid.num_voxels == 0
    assert grid.palette == [FILLER_COLOR] * 256


def test_gen_vox_swaps_y_and_z():
    model = VoxelModel()
    model.set_voxels([VoxelEntry((1, 2, 3), RED)])

    grid = model.gen_vox()

    assert grid.voxels == [(1, 3, 2, 1)]
    assert grid.size == (2, 4, 3)


def test_gen_vox_size_is_max_plus_one(model):
    grid = model.gen_vox()
    assert grid.size == (2, 4, 3)
    assert grid.voxels == [(0, 0, 0, 1), (1, 3, 2, 2)]


def test_gen_vox_shares_palette_entries():
    model = VoxelModel()
    model.set_voxels([VoxelEntry((0, 0, 0), RED), VoxelEntry((5, 0, 0), RED)])

    grid = model.gen_vox()

    assert [v[3] for v in grid.voxels] == [1, 1]
    assert grid.palette[0] == RED
    assert grid.palette[1:] == [FILLER_COLOR] * 255


def test_gen_vox_palette_in_discovery_order():
    model = VoxelModel()
    model.set_voxels([
        VoxelEntry((0, 0, 0), BLUE),
        VoxelEntry((1, 0, 0), RED),
        VoxelEntry((2, 0, 0), BLUE),
        VoxelEntry((3, 0, 0), GREEN),
    ])

    grid = model.gen_vox()

    assert len(grid.palette) == 256
    assert grid.palette[:3] == [BLUE, RED, GREEN]
    assert [v[3] for v in grid.voxels] == [1, 2, 1, 3]


def test_gen_vox_does_not_mutate(model):
    before = model.get_voxels()
    model.gen_vox()
    assert model.get_voxels() == before


def test_gen_vox_rejects_too_many_colors():
    model = VoxelModel()
    model.set_voxels([VoxelEntry((i, 0, 0), PaletteColor(i, 0, 0)) for i in range(256)])

    with pytest.raises(PaletteOverflowError):
        model.gen_vox()


def test_gen_vox_accepts_255_colors():
    model = VoxelModel()
    model.set_voxels([VoxelEntry((i, 0, 0), PaletteColor(i, 0, 0)) for i in range(255)])

    grid = model.gen_vox()

    assert grid.palette[254] == PaletteColor(254, 0, 0)
    assert grid.palette[255] == FILLER_COLOR
    assert grid.voxels[-1] == (254, 0, 0, 255)


def test_entry_from_dict_defaults():
    entry = VoxelEntry.from_dict({"pos": {"x": 1, "y": 2, "z": 3}, "color": None})
    assert entry == VoxelEntry((1, 2, 3), None)
