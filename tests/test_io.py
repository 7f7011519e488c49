import json
import math

import pytest

from objparser import InputDecodeError, parse
from objparser.io import decode_text, find_material_library, read_asset_pair, write_record


def test_decode_text_passes_str_through():
    assert decode_text("v 1 2 3") == "v 1 2 3"


def test_decode_text_bytes_and_bytearray():
    assert decode_text(b"caf\xc3\xa9") == "café"
    assert decode_text(bytearray(b"abc")) == "abc"


def test_decode_text_errors():
    with pytest.raises(InputDecodeError):
        decode_text(b"\xff")
    with pytest.raises(TypeError):
        decode_text(42)


def test_find_material_library_from_mtllib(data_dir):
    assert find_material_library(data_dir / "cube.obj") == data_dir / "cube.mtl"


def test_find_material_library_falls_back_to_stem(tmp_path):
    obj_path = tmp_path / "model.obj"
    obj_path.write_text("mtllib missing.mtl\nv 0 0 0\n")
    (tmp_path / "model.mtl").write_text("newmtl A\n")

    assert find_material_library(obj_path) == tmp_path / "model.mtl"


def test_find_material_library_none(tmp_path):
    obj_path = tmp_path / "model.obj"
    obj_path.write_text("v 0 0 0\n")

    assert find_material_library(obj_path) is None


def test_read_asset_pair_resolves_mtl(data_dir):
    obj_data, mtl_data = read_asset_pair(data_dir / "cube.obj")

    assert obj_data.startswith(b"# Blender")
    assert b"newmtl Material" in mtl_data


def test_read_asset_pair_missing_files(tmp_path, data_dir):
    with pytest.raises(FileNotFoundError):
        read_asset_pair(tmp_path / "absent.obj")

    obj_path = tmp_path / "lonely.obj"
    obj_path.write_text("v 0 0 0\n")
    with pytest.raises(FileNotFoundError):
        read_asset_pair(obj_path)
    with pytest.raises(FileNotFoundError):
        read_asset_pair(data_dir / "cube.obj", tmp_path / "absent.mtl")


def test_write_record_round_trips_through_json(tmp_path, data_dir):
    record = parse(*read_asset_pair(data_dir / "cube.obj"))
    out = tmp_path / "cube.json"

    text = write_record(record, out, indent=2)

    assert out.read_text(encoding="utf-8") == text
    loaded = json.loads(text)
    assert len(loaded["faces"]) == 12
    assert loaded["faces"][0] == [0, 1, 2]


def test_write_record_nan():
    text = write_record({"alpha": float("nan")})

    assert text == '{"alpha": NaN}'
    assert math.isnan(json.loads(text)["alpha"])


def test_decode_text_drops_byte_order_mark():
    assert decode_text("\ufeffv 1 2 3".encode("utf-8")) == "v 1 2 3"
    assert decode_text("\ufeffv 1 2 3") == "v 1 2 3"


def test_decode_text_lives_in_model_layer():
    from objparser.model.text import decode_text as model_decode_text

    assert decode_text is model_decode_text
