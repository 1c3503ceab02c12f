"""File name helpers and checked stream I/O shared by the GRF tools."""

from __future__ import annotations

from typing import BinaryIO, Tuple


class IOActionError(OSError):
    """Raised when a read or write moves fewer bytes than asked for."""

    def __init__(self, message: str, action: str, got: int, wanted: int) -> None:
        super().__init__(message)
        self.action = action
        self.got = got
        self.wanted = wanted

    def __str__(self) -> str:
        return self.args[0]


def _split(path: str) -> Tuple[str, str, str, str]:
    """Split a path into drive, directory (with trailing separator), name and extension."""
    drive = ""
    if len(path) >= 2 and path[1] == ":":
        drive, path = path[:2], path[2:]
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    directory, filename = path[:cut], path[cut:]
    dot = filename.rfind(".")
    if dot < 0:
        return drive, directory, filename, ""
    return drive, directory, filename[:dot], filename[dot:]


def sprite_filename(basefilename: str, reldirectory: str, ext: str, spriteno: int) -> str:
    """Build the file name for a GRF's companion file.

    The directory part of ``reldirectory`` is taken relative to the GRF's
    own directory unless it starts with a separator; a drive in it replaces
    the GRF's drive.  A non-negative ``spriteno`` is appended to the base
    name, padded to two digits.
    """
    sdrive, sdirectory, _, _ = _split(reldirectory)
    bdrive, bdirectory, bname, _ = _split(basefilename)

    if sdrive:
        bdrive = sdrive
    if sdirectory:
        if sdirectory[0] in "\\/":
            bdirectory = sdirectory
        else:
            bdirectory += sdirectory
    if spriteno >= 0:
        bname += f"{spriteno:02d}"
    return f"{bdrive}{bdirectory}{bname}{ext}"


def bak_filename(filename: str) -> str:
    """Return ``filename`` with everything from its last dot replaced by ``.bak``."""
    dot = filename.rfind(".")
    stem = filename if dot < 0 else filename[:dot]
    return stem + ".bak"


def read_exact(action: str, stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising :class:`IOActionError` otherwise."""
    data = stream.read(size)
    got = len(data) if data else 0
    if got != size:
        try:
            where = f", at {stream.tell()}"
        except (OSError, ValueError):
            where = ""
        raise IOActionError(
            f"Error while {action}, got {got}, wanted {size}{where}", action, got, size
        )
    return data


def write_all(action: str, stream: BinaryIO, data: bytes) -> None:
    """Write all of ``data``, raising :class:`IOActionError` on a short write."""
    written = stream.write(data)
    if written is None:
        written = len(data)
    if written != len(data):
        raise IOActionError(
            f"Error while {action}, got {written}, wanted {len(data)}",
            action,
            written,
            len(data),
        )