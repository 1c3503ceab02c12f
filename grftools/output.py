"""Sprite sheet output formats and safe replacement of the encoded GRF file."""

from __future__ import annotations

import logging
import os
from enum import Enum

from grftools.paths import bak_filename

logger = logging.getLogger(__name__)


class SpriteSheetFormat(Enum):
    """Image formats that sprite sheets can be written in."""

    PCX = "pcx"
    PNG = "png"


DEFAULT_FORMAT = SpriteSheetFormat.PNG


def output_format(formatarg: str) -> SpriteSheetFormat:
    """Choose the sprite sheet format named by ``formatarg``.

    Only the first three characters count, compared case-insensitively.
    Anything unrecognised selects PCX.
    """
    prefix = formatarg[:3].lower()
    if prefix == "png":
        return SpriteSheetFormat.PNG
    return SpriteSheetFormat.PCX


def output_extension(fmt: SpriteSheetFormat, rgba: bool) -> str:
    """Return the file name suffix for sprite sheets of ``fmt``.

    PNG sheets holding 32bpp sprites get a distinct ``32.png`` suffix.
    """
    if fmt is SpriteSheetFormat.PNG:
        return "32.png" if rgba else ".png"
    return ".pcx"


def replace_with_backup(newfile: str, realfile: str) -> str:
    """Move ``newfile`` over ``realfile``, keeping the original as a backup.

    The original is renamed to its ``.bak`` name only if no backup exists
    yet; otherwise it is deleted.  Returns the backup file name.  Raises
    ``OSError`` if ``newfile`` cannot be renamed into place.
    """
    bakfile = bak_filename(realfile)

    if not os.path.exists(bakfile):
        logger.info("Renaming %s to %s", realfile, bakfile)
        try:
            os.rename(realfile, bakfile)
        except OSError:
            pass

    if os.path.exists(realfile):
        logger.info("Deleting %s", realfile)
        try:
            os.remove(realfile)
        except OSError:
            logger.error("Error deleting %s", realfile)

    logger.info("Replacing %s with %s", realfile, newfile)
    try:
        os.replace(newfile, realfile)
    except OSError as exc:
        raise OSError(f"Error renaming {newfile} to {realfile}") from exc
    return bakfile