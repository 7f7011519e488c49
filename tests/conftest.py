from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def cube_obj() -> str:
    return (DATA_DIR / "cube.obj").read_text(encoding="utf-8")


@pytest.fixture
def cube_mtl() -> str:
    return (DATA_DIR / "cube.mtl").read_text(encoding="utf-8")


@pytest.fixture
def bare_cube_obj() -> str:
    """Cube with positions and quad faces only: no normals, UVs or material."""
    return "\n".join([
        "v 1 -1 -1", "v 1 -1 1", "v -1 -1 1", "v -1 -1 -1",
        "v 1 1 -1", "v 1 1 1", "v -1 1 1", "v -1 1 -1",
        "f 1 2 3 4", "f 5 8 7 6", "f 1 5 6 2",
        "f 2 6 7 3", "f 3 7 8 4", "f 5 1 4 8",
    ]) + "\n"


@pytest.fixture
def two_material_mtl() -> str:
    return (
        "newmtl Red\n"
        "Kd 1.0 0.0 0.0\n"
        "Ns 10\n"
        "d 0.5\n"
        "\n"
        "newmtl Blue\n"
        "Kd 0.0 0.0 1.0\n"
        "Ks 0.2 0.2 0.2\n"
    )
