import json
import logging

import pytest

from objparser.__main__ import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("objparser")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_prints_json_to_stdout(data_dir, capsys):
    assert main([str(data_dir / "cube.obj")]) == 0

    record = json.loads(capsys.readouterr().out)
    assert len(record["vertices"]) == 8
    assert len(record["faces"]) == 12
    assert "specularPower" in record


def test_writes_output_file(data_dir, tmp_path):
    out = tmp_path / "cube.json"

    assert main([str(data_dir / "cube.obj"), str(data_dir / "cube.mtl"), "-o", str(out), "--indent", "2"]) == 0
    assert len(json.loads(out.read_text(encoding="utf-8"))["normals"]) == 12


def test_missing_file_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.obj")]) == 1
    assert "not found" in capsys.readouterr().err


def test_missing_material_policy(tmp_path, data_dir, capsys):
    obj_path = tmp_path / "other.obj"
    obj_path.write_text("usemtl Unknown\nv 0 0 0\n")
    mtl_path = str(data_dir / "cube.mtl")

    assert main([str(obj_path), mtl_path]) == 1
    capsys.readouterr()
    assert main([str(obj_path), mtl_path, "--missing-material", "empty"]) == 0
    assert json.loads(capsys.readouterr().out)["vertices"] == [[0.0, 0.0, 0.0]]


def test_require_material_flag(tmp_path, data_dir):
    obj_path = tmp_path / "plain.obj"
    obj_path.write_text("v 0 0 0\n")

    assert main([str(obj_path), str(data_dir / "cube.mtl"), "--require-material"]) == 1


def test_unwritable_output_exits_with_error(data_dir, tmp_path, capsys):
    out = tmp_path / "missing_dir" / "cube.json"

    assert main([str(data_dir / "cube.obj"), "-o", str(out)]) == 1
    assert not out.exists()
    assert "ERROR" in capsys.readouterr().err


def test_directory_as_input_exits_with_error(tmp_path, data_dir):
    assert main([str(data_dir / "cube.obj"), str(tmp_path)]) == 1


def test_log_file_records_debug_with_location(data_dir, tmp_path, capsys):
    log_file = tmp_path / "run.log"

    assert main([str(data_dir / "cube.obj"), "--log-file", str(log_file)]) == 0

    logging.getLogger("objparser").handlers[-1].close()
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in text
    assert "objparser.model.geometry:" in text
    assert "DEBUG" not in capsys.readouterr().err
