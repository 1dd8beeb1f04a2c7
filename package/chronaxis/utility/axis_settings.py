"""Axis appearance settings and their persistence."""

from pathlib import Path

import aiofiles
import aiofiles.os
from pydantic import BaseModel

from .data_models import AxisOrientation


class AxisSettings(BaseModel):
    tick_length: float = 40.0
    tick_label_padding: float = 5.0
    orientation: AxisOrientation = AxisOrientation.BOTTOM
    height: float | None = None
    """Fixed height in pixels, or `None` to size from the tick font"""


async def read_axis_settings(filepath: Path) -> AxisSettings | None:
    """Read axis settings from file."""
    if await aiofiles.os.path.isfile(filepath):
        async with aiofiles.open(filepath, encoding="utf8") as file:
            return AxisSettings.model_validate_json(await file.read())
    return None


async def save_axis_settings(axis_settings: AxisSettings, filepath: Path) -> None:
    """Save axis settings to file."""
    async with aiofiles.open(filepath, "w", encoding="utf8") as file:
        await file.write(axis_settings.model_dump_json(indent=2))
