# grftools

Utilities for working with NewGRF files, the graphics and data container
format used by Transport Tycoon Deluxe and OpenTTD. The package reads GRF
IDs and checksums, strips unwanted real sprites from container version 2
files, and offers helpers for palettes, companion file naming and line input.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### grfid

Print the GRF ID of a NewGRF file as eight hex digits:

```
grfid mygraphics.grf
```

Print the MD5 checksum of the file. For container version 2 files only the
data section is hashed, not the sprite section:

```
grfid -m mygraphics.grf
```

`grfid -v` prints the version, `grfid -h` (or no arguments) prints usage.
On failure it prints `Unable to get requested information: <reason>` to
standard error and exits with status 1.

### grfstrip

Copy a container version 2 NewGRF, keeping only the real sprites of the
listed depth and zoom combinations. Pseudo sprites are always kept.

```
grfstrip origin.grf dest.grf 8bpp normal 32bpp zi4
```

Known depths: `8bpp`, `32bpp`.
Known zooms: `normal`, `zi4`, `zi2`, `zo2`, `zo4`, `zo8`.

A trailing argument without a partner is ignored. An unknown depth or zoom
is reported and the command exits with status 1. `grfstrip -v` prints the
version, `grfstrip -h` prints usage.

## Library use

### grftools.container

```python
from grftools.container import GrfError, allowed_mask, get_grf_id, get_md5, strip

try:
    grf_id = get_grf_id("mygraphics.grf")      # int, e.g. 0x12345678
    checksum = get_md5("mygraphics.grf")       # hex digest string
    strip("origin.grf", "dest.grf", allowed_mask([("8bpp", "normal")]))
except GrfError as exc:
    print(f"cannot process file: {exc}")
```

- `get_grf_id(path)` returns the GRF ID from the file's action 8, reading
  both container versions. It raises `GrfError` if the file cannot be
  opened or is empty, has no magic header, is corrupt, or holds no GRF ID.
- `get_md5(path)` returns the MD5 hex digest, leaving out the sprite section
  of version 2 files.
- `allowed_mask(pairs)` turns `(depth, zoom)` pairs into the bit mask used
  by `strip`; unknown names raise `GrfError`.
- `strip(origin, dest, allowed)` writes a copy of a version 2 file without
  the real sprites whose depth/zoom bit is not set.
- `detect_container_version(data)` returns 2 for data starting with the
  version 2 signature, otherwise 1.
- `ByteReader` reads little-endian bytes, words and dwords from a buffer
  (`read_byte`, `read_word`, `read_dword`, `skip`); reading past the end
  yields zeros.

### grftools.paths

- `sprite_filename(basefilename, reldirectory, ext, spriteno)` builds the
  name of a file kept next to a GRF: the directory is taken relative to the
  GRF's own unless it starts with a separator, and a non-negative
  `spriteno` is appended to the base name padded to two digits.
- `bak_filename(filename)` replaces everything from the last dot with `.bak`.
- `read_exact(action, stream, size)` and `write_all(action, stream, data)`
  raise `IOActionError` (an `OSError`) on a short read or write.

### grftools.palette

- `read_palette(filearg)` reads a 256-colour palette and returns its 768
  RGB bytes. A `bcp:`, `psp:` or `gpl:` prefix selects binary, Paintshop Pro
  or GIMP format; without one the file is read as binary. It raises
  `OSError` if the file cannot be opened and `ValueError` for bad contents.
- `default_palette_name(grffile)` returns the name of the built-in palette
  suited to an original game file (for example `"ttw_norm"` for
  `TRG1R.GRF`), or `"ttd_norm"` for anything else. `PALETTE_NAMES` lists
  the known names.

### grftools.output

- `output_format(formatarg)` returns a `SpriteSheetFormat` (`PNG` for
  arguments starting with `png`, case-insensitive, otherwise `PCX`).
- `output_extension(fmt, rgba)` gives the file suffix: `.pcx`, `.png`, or
  `32.png` for 32bpp PNG sheets.
- `replace_with_backup(newfile, realfile)` moves `newfile` over `realfile`,
  keeping the original under its `.bak` name if no backup exists yet, and
  returns the backup name.

### grftools.inject

`LineInjector` reads lines from an attached text stream, returning any
injected lines first (`inject_into`, `getline`, `peek`, `inject`). While no
stream is attached, injected lines are written to its output instead.

## What the package does not do

- It does not decode GRF files into NFO text and sprite sheets, nor encode
  them back; there is no command for that.
- It holds no palette colour data: `default_palette_name` and
  `PALETTE_NAMES` give palette names only, and colours must be loaded from
  a file with `read_palette`.
- It does not check or renumber NFO files and carries no NFO data tables.