import pytest

from gameoflife.pgmio import ImageIO, PgmError, read_pgm, write_pgm


def _world(width, height, alive):
    rows = [bytearray(width) for _ in range(height)]
    for x, y in alive:
        rows[y][x] = 255
    return rows


def test_write_header_and_pixels(tmp_path):
    path = tmp_path / "img.pgm"
    write_pgm(path, 3, 2, [bytearray([0, 255, 0]), bytearray([255, 0, 0])])
    assert path.read_bytes() == b"P5\n3 2\n255\n\x00\xff\x00\xff\x00\x00"


def test_round_trip(tmp_path):
    world = _world(16, 16, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])
    path = tmp_path / "16x16.pgm"
    write_pgm(path, 16, 16, world)
    assert read_pgm(path, 16, 16) == world


def test_write_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "a.pgm"
    write_pgm(path, 1, 1, [bytearray([255])])
    assert read_pgm(path, 1, 1) == [bytearray([255])]


def test_write_rejects_wrong_size(tmp_path):
    with pytest.raises(ValueError):
        write_pgm(tmp_path / "a.pgm", 2, 2, [bytearray([0, 0])])


def test_not_a_pgm(tmp_path):
    path = tmp_path / "bad.pgm"
    path.write_bytes(b"P2\n2 2\n255\n\x00\x00\x00\x00")
    with pytest.raises(PgmError, match="not a pgm file"):
        read_pgm(path, 2, 2)


def test_width_mismatch(tmp_path):
    path = tmp_path / "a.pgm"
    write_pgm(path, 2, 3, _world(2, 3, []))
    with pytest.raises(PgmError, match="width"):
        read_pgm(path, 3, 3)


def test_height_mismatch(tmp_path):
    path = tmp_path / "a.pgm"
    write_pgm(path, 3, 2, _world(3, 2, []))
    with pytest.raises(PgmError, match="height"):
        read_pgm(path, 3, 3)


def test_maxval_mismatch(tmp_path):
    path = tmp_path / "a.pgm"
    path.write_bytes(b"P5\n1 1\n15\n\x00")
    with pytest.raises(PgmError, match="maxval"):
        read_pgm(path, 1, 1)


def test_truncated_pixels(tmp_path):
    path = tmp_path / "a.pgm"
    path.write_bytes(b"P5\n2 2\n255\n\x00\x00")
    with pytest.raises(PgmError):
        read_pgm(path, 2, 2)


def test_image_io_read_and_write(tmp_path):
    images = tmp_path / "images"
    out = tmp_path / "out"
    world = _world(4, 4, [(0, 0), (3, 3)])
    write_pgm(images / "4x4.pgm", 4, 4, world)
    image_io = ImageIO(4, 4, images, out)
    assert image_io.read("4x4") == world
    written = image_io.write("4x4x7", world)
    assert written == out / "4x4x7.pgm"
    assert read_pgm(written, 4, 4) == world


def test_image_io_missing_file(tmp_path):
    image_io = ImageIO(4, 4, tmp_path / "images", tmp_path / "out")
    with pytest.raises(FileNotFoundError):
        image_io.read("4x4")