import struct

from grftools.container import HEADER
from grftools.grfstrip import main


def dword(value):
    return struct.pack("<I", value)


def build(sprites):
    act8 = b"\x08\x07\x01\x02\x03\x04"
    data = dword(4) + b"\xff" + dword(len(sprites) + 1)
    for sprite_id, _, _, _ in sprites:
        data += dword(4) + b"\xfd" + dword(sprite_id)
    data += dword(len(act8)) + b"\xff" + act8 + dword(0)
    head = HEADER + dword(1 + len(data)) + b"\x00" + data
    chunks = [
        dword(i) + dword(2 + len(p)) + bytes([info, zoom]) + p
        for i, info, zoom, p in sprites
    ]
    return head, chunks


def test_strip_success(tmp_path, capsys):
    head, chunks = build([(1, 0x04, 0, b"AAAA"), (2, 0x01, 0, b"BBBB")])
    origin = tmp_path / "in.grf"
    origin.write_bytes(head + b"".join(chunks) + dword(0))
    dest = tmp_path / "out.grf"
    assert main([str(origin), str(dest), "32bpp", "normal"]) == 0
    assert dest.read_bytes() == head + chunks[1] + dword(0)
    assert "successfully" in capsys.readouterr().out


def test_trailing_argument_ignored(tmp_path):
    head, chunks = build([(1, 0x04, 0, b"AAAA")])
    origin = tmp_path / "in.grf"
    origin.write_bytes(head + b"".join(chunks) + dword(0))
    dest = tmp_path / "out.grf"
    assert main([str(origin), str(dest), "8bpp"]) == 0
    assert dest.read_bytes() == head + dword(0)


def test_invalid_depth(tmp_path, capsys):
    assert main([str(tmp_path / "a"), str(tmp_path / "b"), "4bpp", "normal"]) == 1
    assert 'Invalid depth "4bpp"' in capsys.readouterr().out


def test_invalid_zoom(tmp_path, capsys):
    assert main([str(tmp_path / "a"), str(tmp_path / "b"), "8bpp", "big"]) == 1
    assert 'Invalid zoom "big"' in capsys.readouterr().out


def test_usage_with_too_few_arguments(capsys):
    assert main(["-v"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_version(capsys):
    assert main(["-v", "x"]) == 0
    assert capsys.readouterr().out.startswith("GRFSTRIP ")


def test_error_from_strip(tmp_path, capsys):
    assert main([str(tmp_path / "none.grf"), str(tmp_path / "out.grf")]) == 1
    assert "Unable to open origin file" in capsys.readouterr().out