import numpy as np
import pytest

from neocolor.conversions.packing import (
    pack, unpack, pack_rgb, pack_rgbo, mask_value, opacity_to_alpha,
    is_opaque, is_transparent, is_visible,
    np_pack, np_unpack, np_pack_rgbo, np_opacity_to_alpha,
)
from tests.samples import samples_argb


def test_unpack_channels():
    for value, channels in samples_argb.items():
        assert unpack(value) == channels


def test_pack_channels():
    for value, channels in samples_argb.items():
        assert pack(*channels) == value


def test_pack_unpack_round_trip():
    rng = np.random.default_rng(1234)
    for value in rng.integers(0, 2**32, size=500, dtype=np.uint64):
        value = int(value)
        assert pack(*unpack(value)) == value
        assert unpack(pack(*unpack(value))) == unpack(value)


def test_pack_keeps_low_8_bits():
    assert pack(0xAAA, 0xBBB, 0xCCC, 0xDDD) == pack(0xAA, 0xBB, 0xCC, 0xDD)
    assert pack(0x1FF, 0x100, 0x2AB, 0xF00) == 0xFF00AB00


def test_pack_negative_channels_wrap():
    # Two's complement low byte: -1 & 0xFF == 0xFF
    assert pack(-1, -1, -256, -2) == 0xFFFF00FE


def test_unpack_ignores_bits_above_32():
    assert unpack(0xFFAABBCCDD) == (0xAA, 0xBB, 0xCC, 0xDD)
    assert mask_value(0xFFAABBCCDD) == 0xAABBCCDD


def test_pack_rgb_is_opaque():
    assert pack_rgb(0xAA, 0xBB, 0xCC) == 0xFFAABBCC
    assert pack_rgb(0xAAA, 0xBBB, 0xCCC) == 0xFFAABBCC


def test_pack_rejects_floats():
    with pytest.raises(TypeError):
        pack(255, 1.5, 0, 0)


@pytest.mark.parametrize("opacity, alpha", [
    (0.0, 0x00),
    (0.5, 0x7F),
    (1.0, 0xFF),
    (1.5, 0x7E),   # floor(382.5) = 382, 382 & 0xFF = 0x7E
    (2.0, 0xFE),   # 510 & 0xFF
    (-0.5, 0x80),  # floor(-127.5) = -128
])
def test_opacity_to_alpha_wraps_instead_of_clamping(opacity, alpha):
    assert opacity_to_alpha(opacity) == alpha


def test_pack_rgbo():
    assert pack_rgbo(0xBB, 0xCC, 0xDD, 1.0) == 0xFFBBCCDD
    assert pack_rgbo(0xBBB, 0xCCC, 0xDDD, 1.5) == 0x7EBBCCDD


def test_alpha_predicates():
    assert is_opaque(0xFF) and not is_transparent(0xFF) and is_visible(0xFF)
    assert not is_opaque(0xCC) and is_transparent(0xCC) and is_visible(0xCC)
    assert not is_opaque(0x00) and is_transparent(0x00) and not is_visible(0x00)


def test_np_pack_matches_scalar():
    rng = np.random.default_rng(7)
    channels = rng.integers(-1000, 1000, size=(200, 4))
    packed = np_pack(channels[:, 0], channels[:, 1], channels[:, 2], channels[:, 3])
    assert packed.dtype == np.uint32
    expected = [pack(*(int(c) for c in row)) for row in channels]
    assert packed.tolist() == expected


def test_np_unpack_matches_scalar():
    values = np.array(list(samples_argb.keys()), dtype=np.uint64)
    result = np_unpack(values)
    assert result.shape == (len(samples_argb), 4)
    assert [tuple(row) for row in result.tolist()] == list(samples_argb.values())


def test_np_pack_broadcasts_scalar_alpha():
    red = np.array([0x10, 0x20, 0x30])
    packed = np_pack(0xFF, red, 0, 0)
    assert packed.tolist() == [0xFF100000, 0xFF200000, 0xFF300000]


def test_np_opacity_to_alpha_matches_scalar():
    opacities = np.array([0.0, 0.25, 0.5, 1.0, 1.5, 2.0, -0.5])
    expected = [opacity_to_alpha(float(o)) for o in opacities]
    assert np_opacity_to_alpha(opacities).tolist() == expected


def test_np_pack_rgbo_matches_scalar():
    result = np_pack_rgbo(np.array([0xBBB, 0xBB]), 0xCC, 0xDD, np.array([1.5, 1.0]))
    assert result.tolist() == [0x7EBBCCDD, 0xFFBBCCDD]


def test_np_pack_accepts_large_python_ints():
    big = 2**70
    packed = np_pack(big + 0xAA, big + 0xBB, -big + 0xCC, 0xDDD)
    assert int(packed) == pack(big + 0xAA, big + 0xBB, -big + 0xCC, 0xDDD) == 0xAABBCCDD


def test_np_unpack_accepts_large_python_int():
    value = 2**80 + 0xAABBCCDD
    assert tuple(np_unpack(value).tolist()) == unpack(value) == (0xAA, 0xBB, 0xCC, 0xDD)
