"""Loading sprite palettes and choosing the default palette for a GRF file."""

from __future__ import annotations

import ntpath
from typing import Dict, List, Tuple

PALETTE_NAMES: Tuple[str, ...] = (
    "ttd_norm",
    "ttw_norm",
    "ttd_cand",
    "ttw_cand",
    "tt1_norm",
    "tt1_mars",
    "ttw_pb_pal1",
    "ttw_pb_pal2",
)
"""Built-in palettes; ``-p <n>`` selects entry ``n - 1``."""

PALETTE_SIZE = 256 * 3

_DEFAULT_PALETTES: Dict[str, str] = {
    # DOS TTD
    "TRG1": "ttd_norm",
    "TRGC": "ttd_norm",
    "TRGH": "ttd_norm",
    "TRGI": "ttd_norm",
    "TRGT": "ttd_cand",
    # Windows TTD
    "TRG1R": "ttw_norm",
    "TRGCR": "ttw_norm",
    "TRGHR": "ttw_norm",
    "TRGIR": "ttw_norm",
    "TRGTR": "ttw_cand",
    # DOS TTO or TT+WB
    "TREDIT": "tt1_norm",
    "TREND": "tt1_norm",
    "TRTITLE": "tt1_norm",
    "TRHCOM": "tt1_norm",
    "TRHCOM2": "tt1_mars",
    # TTDPatch
    "TTDPATCH": "ttd_norm",
    "TTDPATCHW": "ttw_norm",
    "TTDPBASE": "ttd_norm",
    "TTDPBASEW": "ttw_norm",
}

_TYPES = ("bcp", "psp", "gpl")


def _parse_int(text: str, base: int) -> int:
    fields = text.split()
    if not fields:
        raise ValueError("empty line")
    return int(fields[0], base)


def _read_psp(path: str, data: bytes) -> bytes:
    lines = data.decode("latin-1").splitlines()
    if not lines or lines[0] != "JASC-PAL":
        raise ValueError(f"Error: {path} is not a PSP palette file.")
    try:
        count = _parse_int(lines[1], 16)
        count2 = _parse_int(lines[2], 10)
    except (IndexError, ValueError) as exc:
        raise ValueError(f"Error: {path} is not a PSP palette file.") from exc
    if count != count2 or count != 256:
        raise ValueError(f"{path}: Error: GRFCodec supports only 256 colour palette files.")

    entries = [line for line in lines[3:] if line.strip()]
    if len(entries) < 256:
        raise ValueError("Error reading palette.")
    out: List[int] = []
    for line in entries[:256]:
        try:
            rgb = [int(field) for field in line.split()[:3]]
        except ValueError as exc:
            raise ValueError("Error reading palette.") from exc
        if len(rgb) != 3 or any(not 0 <= value <= 255 for value in rgb):
            raise ValueError("Error reading palette.")
        out.extend(rgb)
    return bytes(out)


def _read_gpl(path: str, data: bytes) -> bytes:
    lines = data.decode("latin-1").splitlines()
    # Header, "Name:", "Columns:" and a "#" line must all be present.
    if not lines or lines[0] != "GIMP Palette" or len(lines) < 4:
        raise ValueError(f"Error: {path} is not a GIMP palette file.")

    entries = lines[4:]
    if len(entries) < 256:
        raise ValueError(f"{path}: Error: reading palette.")
    out: List[int] = []
    for line in entries[:256]:
        fields = line.split()
        try:
            rgb = [int(field) for field in fields[:3]]
        except ValueError as exc:
            raise ValueError(f"{path}: Error: reading palette.") from exc
        if len(rgb) != 3 or any(not 0 <= value <= 255 for value in rgb):
            raise ValueError(f"{path}: Error: reading palette.")
        out.extend(rgb)
    return bytes(out)


def read_palette(filearg: str) -> bytes:
    """Read a 256-colour palette file and return its 768 RGB bytes.

    ``filearg`` may start with ``bcp:``, ``psp:`` or ``gpl:`` (any case) to
    name the file type; without a prefix the file is read as binary BCP.
    Raises ``OSError`` if the file cannot be opened and ``ValueError`` if
    its contents are not a valid palette.
    """
    kind = "bcp"
    path = filearg
    prefix = filearg[:4].lower()
    if prefix.endswith(":") and prefix[:3] in _TYPES:
        kind = prefix[:3]
        path = filearg[4:]

    with open(path, "rb") as handle:
        data = handle.read()

    if kind == "psp":
        return _read_psp(path, data)
    if kind == "gpl":
        return _read_gpl(path, data)
    if len(data) < PALETTE_SIZE:
        raise ValueError(f"Error: {path} is not a BCP file.")
    return data[:PALETTE_SIZE]


def default_palette_name(grffile: str) -> str:
    """Return the name of the built-in palette suited to ``grffile``.

    The file's base name, up to its first dot, is compared case-insensitively
    with the known original game files; anything else gets the DOS palette.
    """
    base = ntpath.basename(grffile.replace("/", "\\"))
    base = base.split(".", 1)[0].upper()
    return _DEFAULT_PALETTES.get(base, PALETTE_NAMES[0])