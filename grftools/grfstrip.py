"""Command that strips unwanted real sprites from a container version 2 GRF."""

from __future__ import annotations

import sys
from typing import List, Optional

from grftools.container import DEPTHS, VERSION, ZOOMS, GrfError, allowed_mask, strip

_USAGE = (
    f"GRFSTRIP {VERSION}\n"
    "\n"
    "Usage:\n"
    "    GRFSTRIP <origin> <dest> (<depth> <zoom>)*\n"
    "        Strip real sprites that are not in the set \"the ones\n"
    "        specified at the command line\" from origin into dest.\n"
    f"        Known depths: {', '.join(DEPTHS)}\n"
    f"        Known zooms: {', '.join(ZOOMS)}\n"
    "    GRFSTRIP -v\n"
    "        Get the version of GRFSTRIP\n"
)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) < 2 or args[0] == "-h":
        print(_USAGE, end="")
        return 1
    if args[0] == "-v":
        print(f"GRFSTRIP {VERSION}")
        return 0

    rest = args[2:]
    # A trailing unpaired argument is ignored.
    pairs = list(zip(rest[0::2], rest[1::2]))
    try:
        allowed = allowed_mask(pairs)
    except GrfError as exc:
        print(exc)
        return 1

    try:
        strip(args[0], args[1], allowed)
    except GrfError as exc:
        print(f"Unable to get requested information: {exc}")
        return 1

    print(f"Stripped {args[0]} into {args[1]} successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())