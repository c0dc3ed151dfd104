"""Tests for the closed resolution enumeration."""

import pytest

from runware_client.config.image.resolutions import (
    RESOLUTION_PIXELS,
    RESOLUTION_PRESETS,
    Resolution,
    coerce_resolution,
    resolve_dimension,
    resolve_preset,
)
from runware_client.core.exceptions import ConfigurationError


def test_every_member_has_a_pixel_value():
    assert set(RESOLUTION_PIXELS) == set(Resolution)


@pytest.mark.parametrize(
    ("member", "pixels"),
    [
        (Resolution.SD_WIDTH, 512),
        (Resolution.SD_LANDSCAPE_16_9_WIDTH, 1152),
        (Resolution.SD_LANDSCAPE_16_9_HEIGHT, 640),
        (Resolution.HD_PORTRAIT_3_4_HEIGHT, 1536),
        (Resolution.HD_LANDSCAPE_16_9_WIDTH, 1728),
    ],
)
def test_resolve_dimension_returns_pixels(member, pixels):
    assert resolve_dimension(member) == pixels
    assert member.pixels == pixels


def test_tags_resolve_case_insensitively():
    assert coerce_resolution("HD_Landscape_4_3_Width") is Resolution.HD_LANDSCAPE_4_3_WIDTH
    assert resolve_dimension("sd_portrait_9_16_height") == 1152


@pytest.mark.parametrize("value", [512, "512", None, "xl_width", True])
def test_values_outside_enumeration_fail(value):
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_dimension(value, key="height")

    assert exc_info.value.key == "height"


def test_presets_pair_width_with_height():
    for name, (width, height) in RESOLUTION_PRESETS.items():
        assert width.name.endswith("_WIDTH"), name
        assert height.name.endswith("_HEIGHT"), name
        assert width.name[: -len("_WIDTH")] == height.name[: -len("_HEIGHT")]


def test_resolve_preset():
    assert resolve_preset("SD_Landscape_16_9") == (
        Resolution.SD_LANDSCAPE_16_9_WIDTH,
        Resolution.SD_LANDSCAPE_16_9_HEIGHT,
    )
    with pytest.raises(ConfigurationError):
        resolve_preset("panorama")


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        RESOLUTION_PIXELS[Resolution.SD_WIDTH] = 1  # type: ignore[index]
