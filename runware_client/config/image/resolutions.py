"""Resolution presets supported by Runware image inference.

Width and height are never sent as free integers. Callers pick a named
``Resolution`` member and the payload builder swaps it for the pixel value
from ``RESOLUTION_PIXELS`` right before serialization.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from runware_client.core.exceptions import ConfigurationError


class Resolution(str, Enum):
    """Named width/height presets (SD and HD grids)."""

    SD_WIDTH = "sd_width"
    SD_HEIGHT = "sd_height"
    SD_PORTRAIT_3_4_WIDTH = "sd_portrait_3_4_width"
    SD_PORTRAIT_3_4_HEIGHT = "sd_portrait_3_4_height"
    SD_PORTRAIT_9_16_WIDTH = "sd_portrait_9_16_width"
    SD_PORTRAIT_9_16_HEIGHT = "sd_portrait_9_16_height"
    SD_LANDSCAPE_4_3_WIDTH = "sd_landscape_4_3_width"
    SD_LANDSCAPE_4_3_HEIGHT = "sd_landscape_4_3_height"
    SD_LANDSCAPE_16_9_WIDTH = "sd_landscape_16_9_width"
    SD_LANDSCAPE_16_9_HEIGHT = "sd_landscape_16_9_height"

    HD_WIDTH = "hd_width"
    HD_HEIGHT = "hd_height"
    HD_PORTRAIT_3_4_WIDTH = "hd_portrait_3_4_width"
    HD_PORTRAIT_3_4_HEIGHT = "hd_portrait_3_4_height"
    HD_PORTRAIT_9_16_WIDTH = "hd_portrait_9_16_width"
    HD_PORTRAIT_9_16_HEIGHT = "hd_portrait_9_16_height"
    HD_LANDSCAPE_4_3_WIDTH = "hd_landscape_4_3_width"
    HD_LANDSCAPE_4_3_HEIGHT = "hd_landscape_4_3_height"
    HD_LANDSCAPE_16_9_WIDTH = "hd_landscape_16_9_width"
    HD_LANDSCAPE_16_9_HEIGHT = "hd_landscape_16_9_height"

    @classmethod
    def _missing_(cls, value: object) -> "Resolution | None":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @property
    def pixels(self) -> int:
        return RESOLUTION_PIXELS[self]


RESOLUTION_PIXELS: Mapping[Resolution, int] = MappingProxyType(
    {
        Resolution.SD_WIDTH: 512,
        Resolution.SD_HEIGHT: 512,
        Resolution.SD_PORTRAIT_3_4_WIDTH: 768,
        Resolution.SD_PORTRAIT_3_4_HEIGHT: 1024,
        Resolution.SD_PORTRAIT_9_16_WIDTH: 640,
        Resolution.SD_PORTRAIT_9_16_HEIGHT: 1152,
        Resolution.SD_LANDSCAPE_4_3_WIDTH: 1024,
        Resolution.SD_LANDSCAPE_4_3_HEIGHT: 768,
        Resolution.SD_LANDSCAPE_16_9_WIDTH: 1152,
        Resolution.SD_LANDSCAPE_16_9_HEIGHT: 640,
        Resolution.HD_WIDTH: 1024,
        Resolution.HD_HEIGHT: 1024,
        Resolution.HD_PORTRAIT_3_4_WIDTH: 1152,
        Resolution.HD_PORTRAIT_3_4_HEIGHT: 1536,
        Resolution.HD_PORTRAIT_9_16_WIDTH: 960,
        Resolution.HD_PORTRAIT_9_16_HEIGHT: 1728,
        Resolution.HD_LANDSCAPE_4_3_WIDTH: 1536,
        Resolution.HD_LANDSCAPE_4_3_HEIGHT: 1152,
        Resolution.HD_LANDSCAPE_16_9_WIDTH: 1728,
        Resolution.HD_LANDSCAPE_16_9_HEIGHT: 960,
    }
)

# Width/height pairs for the ``size`` shortcut accepted by the request builder
RESOLUTION_PRESETS: Mapping[str, Tuple[Resolution, Resolution]] = MappingProxyType(
    {
        "sd": (Resolution.SD_WIDTH, Resolution.SD_HEIGHT),
        "sd_portrait_3_4": (Resolution.SD_PORTRAIT_3_4_WIDTH, Resolution.SD_PORTRAIT_3_4_HEIGHT),
        "sd_portrait_9_16": (Resolution.SD_PORTRAIT_9_16_WIDTH, Resolution.SD_PORTRAIT_9_16_HEIGHT),
        "sd_landscape_4_3": (Resolution.SD_LANDSCAPE_4_3_WIDTH, Resolution.SD_LANDSCAPE_4_3_HEIGHT),
        "sd_landscape_16_9": (Resolution.SD_LANDSCAPE_16_9_WIDTH, Resolution.SD_LANDSCAPE_16_9_HEIGHT),
        "hd": (Resolution.HD_WIDTH, Resolution.HD_HEIGHT),
        "hd_portrait_3_4": (Resolution.HD_PORTRAIT_3_4_WIDTH, Resolution.HD_PORTRAIT_3_4_HEIGHT),
        "hd_portrait_9_16": (Resolution.HD_PORTRAIT_9_16_WIDTH, Resolution.HD_PORTRAIT_9_16_HEIGHT),
        "hd_landscape_4_3": (Resolution.HD_LANDSCAPE_4_3_WIDTH, Resolution.HD_LANDSCAPE_4_3_HEIGHT),
        "hd_landscape_16_9": (Resolution.HD_LANDSCAPE_16_9_WIDTH, Resolution.HD_LANDSCAPE_16_9_HEIGHT),
    }
)


def coerce_resolution(value: Any, *, key: str = "resolution") -> Resolution:
    """Return the ``Resolution`` member for ``value`` or raise ``ConfigurationError``.

    Accepts a member or its tag string in any case. Integers are rejected even
    when they match a preset's pixel count, because several presets share the
    same pixel value and the tag is what the caller must choose.
    """

    if isinstance(value, Resolution):
        return value
    if isinstance(value, str):
        try:
            return Resolution(value)
        except ValueError:
            pass
    raise ConfigurationError(f"Unsupported {key} value: {value!r}", key=key)


def resolve_dimension(value: Any, *, key: str = "resolution") -> int:
    """Map a resolution tag to its pixel value."""

    return RESOLUTION_PIXELS[coerce_resolution(value, key=key)]


def resolve_preset(name: str) -> Tuple[Resolution, Resolution]:
    """Return the ``(width, height)`` pair registered under ``name``."""

    normalized = str(name or "").strip().lower()
    try:
        return RESOLUTION_PRESETS[normalized]
    except KeyError:
        raise ConfigurationError(f"Unknown size preset: {name!r}", key="size") from None


__all__ = [
    "Resolution",
    "RESOLUTION_PIXELS",
    "RESOLUTION_PRESETS",
    "coerce_resolution",
    "resolve_dimension",
    "resolve_preset",
]
