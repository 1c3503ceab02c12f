"""Reading, identifying and stripping GRF container files."""

from __future__ import annotations

import hashlib
from importlib import metadata
from os import PathLike
from typing import BinaryIO, Iterable, Tuple, Union

PathType = Union[str, "PathLike[str]"]

HEADER = b"\x00\x00GRF\x82\r\n\x1a\n"
"""Signature that opens a container version 2 file."""

DEPTHS = ("8bpp", "32bpp")
ZOOMS = ("normal", "zi4", "zi2", "zo2", "zo4", "zo8")

try:
    VERSION = metadata.version("grftools")
except metadata.PackageNotFoundError:
    VERSION = "unknown"


class GrfError(Exception):
    """Raised when a GRF file cannot be read or processed."""


class ByteReader:
    """Little-endian reader over an in-memory buffer.

    Reading past the end yields zero bytes instead of failing.
    """

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.pos = pos

    def read_byte(self) -> int:
        if self.pos >= len(self.data):
            return 0
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_word(self) -> int:
        low = self.read_byte()
        return low | (self.read_byte() << 8)

    def read_dword(self) -> int:
        low = self.read_word()
        return low | (self.read_word() << 16)

    def skip(self, count: int) -> None:
        self.pos += count

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)


def detect_container_version(data: bytes) -> int:
    """Return 2 if ``data`` starts with the version 2 signature, else 1."""
    if len(data) > len(HEADER) and data.startswith(HEADER):
        return 2
    return 1


def _load(path: PathType) -> bytes:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise GrfError("Unable to open file") from exc
    if not data:
        raise GrfError("Unable to open file")
    return data


def _read_size(reader: ByteReader, version: int) -> int:
    return reader.read_dword() if version == 2 else reader.read_word()


def _skip_sprite_data(reader: ByteReader, sprite_type: int, num: int) -> None:
    if sprite_type & 2:
        if num < 0:
            reader.pos = len(reader.data)
        else:
            reader.skip(num)
        return
    # A negative count means an invalid sprite; the loop simply does not run.
    while num > 0:
        code = reader.read_byte()
        if code >= 0x80:
            code -= 0x100
        if code >= 0:
            size = 0x80 if code == 0 else code
            num -= size
            reader.skip(size)
        else:
            num -= -(code >> 3)
            reader.read_byte()


def get_grf_id(path: PathType) -> int:
    """Return the GRF ID stored in the action 8 of the file at ``path``."""
    data = _load(path)
    reader = ByteReader(data)
    version = detect_container_version(data)
    if version == 2:
        reader.skip(len(HEADER) + 4 + 1)

    if _read_size(reader, version) != 0x04 or reader.read_byte() != 0xFF:
        raise GrfError("No magic header")
    reader.read_dword()  # number of sprites

    grfid = 0
    while not reader.at_end:
        num = _read_size(reader, version)
        if num == 0:
            break
        if reader.pos + num > len(data):
            raise GrfError("Corrupt GRF; would read beyond buffer")

        sprite_type = reader.read_byte()
        if sprite_type == 0xFF:
            action = reader.read_byte()
            if action == 0x08:
                reader.read_byte()  # GRF version
                grfid = int.from_bytes(reader.read_dword().to_bytes(4, "little"), "big")
                break
            reader.skip(num - 1)
        elif version == 2 and sprite_type == 0xFD:
            reader.read_dword()
        elif version == 1:
            reader.skip(7)
            _skip_sprite_data(reader, sprite_type, num - 8)
        else:
            reader.pos = len(data)

    if grfid == 0:
        raise GrfError("File valid but no GrfID found")
    return grfid


def get_md5(path: PathType) -> str:
    """Return the hex MD5 digest of the file, leaving out the sprite section of version 2 files."""
    data = _load(path)
    length = len(data)
    if detect_container_version(data) == 2:
        reader = ByteReader(data, len(HEADER))
        length = len(HEADER) + 4 + reader.read_dword()
        if length > len(data):
            raise GrfError("Invalid sprite location offset")
    return hashlib.md5(data[:length]).hexdigest()


def allowed_mask(pairs: Iterable[Tuple[str, str]]) -> int:
    """Build the bit mask of allowed (depth, zoom) combinations for :func:`strip`."""
    mask = 0
    for depth, zoom in pairs:
        if depth not in DEPTHS:
            raise GrfError(f'Invalid depth "{depth}"')
        if zoom not in ZOOMS:
            raise GrfError(f'Invalid zoom "{zoom}"')
        mask |= 1 << (16 * DEPTHS.index(depth) + ZOOMS.index(zoom))
    return mask


def _write(out: BinaryIO, chunk: bytes) -> None:
    try:
        written = out.write(chunk)
    except OSError as exc:
        raise GrfError("Could not write to file") from exc
    if written is not None and written != len(chunk):
        raise GrfError("Could not write to file")


def _strip_into(data: bytes, out: BinaryIO, allowed: int) -> None:
    end = len(data)
    if end <= len(HEADER) or not data.startswith(HEADER):
        raise GrfError("No GRF with container version 2.")

    reader = ByteReader(data, len(HEADER))
    section = reader.read_dword()
    reader.pos = len(HEADER) + section + 4
    if reader.pos >= end:
        raise GrfError("Invalid GRF")

    _write(out, data[: reader.pos])

    while True:
        begin = reader.pos
        sprite_id = reader.read_dword()
        if sprite_id == 0:
            _write(out, data[begin:])
            return

        size = reader.read_dword()
        info = reader.read_byte()
        zoom = reader.read_byte()
        offset = (0 if info & 0x7 == 4 else 16) + zoom

        if info == 0xFF or allowed & (1 << offset):
            _write(out, data[begin : begin + size + 8])

        if size < 2:
            raise GrfError("Invalid GRF")
        reader.skip(size - 2)
        if reader.pos >= end:
            raise GrfError("Invalid GRF")


def strip(origin: PathType, dest: PathType, allowed: int) -> None:
    """Copy ``origin`` to ``dest``, dropping real sprites whose depth/zoom bit is not in ``allowed``."""
    try:
        with open(origin, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise GrfError("Unable to open origin file") from exc

    try:
        out = open(dest, "wb")
    except OSError as exc:
        raise GrfError("Unable to open destination file") from exc

    with out:
        _strip_into(data, out, allowed)