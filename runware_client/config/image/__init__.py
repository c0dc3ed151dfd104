"""Image configuration exports."""

from . import resolutions, runware
from .resolutions import *  # noqa: F401,F403
from .runware import *  # noqa: F401,F403

__all__ = [
    *resolutions.__all__,
    *runware.__all__,
]
