"""Command that prints the GRF ID or the MD5 checksum of a NewGRF file."""

from __future__ import annotations

import sys
from typing import List, Optional

from grftools.container import VERSION, GrfError, get_grf_id, get_md5

_USAGE = (
    f"GRFID {VERSION}\n"
    "\n"
    "Usage:\n"
    "    GRFID <NewGRF-File>\n"
    "        Get the GRF ID from the NewGRF file\n"
    "    GRFID -m <NewGRF-File>\n"
    "        Get the MD5 checksum of the NewGRF file\n"
    "    GRFID -v\n"
    "        Get the version of GRFID\n"
)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args or args[0] == "-h" or (args[0] == "-m" and len(args) < 2):
        print(_USAGE, end="")
        return 1
    if args[0] == "-v":
        print(f"GRFID {VERSION}")
        return 0

    try:
        if args[0] == "-m":
            print(get_md5(args[1]))
        else:
            print(f"{get_grf_id(args[0]):08x}")
    except GrfError as exc:
        print(f"Unable to get requested information: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())