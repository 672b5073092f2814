"""Sample polygons bundled with the package.

Each ``*.json`` file beside this module is one shape, addressed by its file
stem.
"""

from __future__ import annotations

from pathlib import Path

from moremath.core.shape_data import PolygonShape, load_shape

_SHAPE_DIR = Path(__file__).resolve().parent


def list_shapes() -> list[str]:
    return sorted(path.stem for path in _SHAPE_DIR.glob("*.json"))


def get_shape_path(name: str) -> Path:
    path = _SHAPE_DIR / f"{name}.json"
    if not path.is_file():
        bundled = ", ".join(list_shapes()) or "none"
        raise FileNotFoundError(f"No bundled shape named '{name}' (bundled shapes: {bundled})")
    return path


def load_bundled_shape(name: str) -> PolygonShape:
    return load_shape(get_shape_path(name))
