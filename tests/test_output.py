import pytest

from grftools.output import (
    SpriteSheetFormat,
    output_extension,
    output_format,
    replace_with_backup,
)


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("png", SpriteSheetFormat.PNG),
        ("PNG", SpriteSheetFormat.PNG),
        ("pngfoo", SpriteSheetFormat.PNG),
        ("pcx", SpriteSheetFormat.PCX),
        ("PcX", SpriteSheetFormat.PCX),
        ("bmp", SpriteSheetFormat.PCX),
        ("", SpriteSheetFormat.PCX),
    ],
)
def test_output_format(arg, expected):
    assert output_format(arg) is expected


def test_output_extension_png():
    assert output_extension(SpriteSheetFormat.PNG, False) == ".png"
    assert output_extension(SpriteSheetFormat.PNG, True) == "32.png"


def test_output_extension_pcx_ignores_rgba():
    assert output_extension(SpriteSheetFormat.PCX, False) == ".pcx"
    assert output_extension(SpriteSheetFormat.PCX, True) == ".pcx"


def test_replace_creates_backup(tmp_path):
    real = tmp_path / "set.grf"
    new = tmp_path / "set.new"
    real.write_bytes(b"old")
    new.write_bytes(b"new")

    bak = replace_with_backup(str(new), str(real))

    assert bak == str(tmp_path / "set.bak")
    assert real.read_bytes() == b"new"
    assert (tmp_path / "set.bak").read_bytes() == b"old"
    assert not new.exists()


def test_replace_keeps_existing_backup(tmp_path):
    real = tmp_path / "set.grf"
    new = tmp_path / "set.new"
    bak = tmp_path / "set.bak"
    real.write_bytes(b"old")
    new.write_bytes(b"new")
    bak.write_bytes(b"older")

    replace_with_backup(str(new), str(real))

    assert real.read_bytes() == b"new"
    assert bak.read_bytes() == b"older"


def test_replace_without_original(tmp_path):
    real = tmp_path / "set.grf"
    new = tmp_path / "set.new"
    new.write_bytes(b"new")

    replace_with_backup(str(new), str(real))

    assert real.read_bytes() == b"new"
    assert not (tmp_path / "set.bak").exists()


def test_replace_missing_new_file_raises(tmp_path):
    real = tmp_path / "set.grf"
    real.write_bytes(b"old")
    with pytest.raises(OSError):
        replace_with_backup(str(tmp_path / "missing.new"), str(real))