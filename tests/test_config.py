import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for target in (PROJECT_ROOT / "src", PROJECT_ROOT):
    target_str = str(target)
    if target_str not in sys.path:
        sys.path.append(target_str)

from hanoi_lite.config import AnimationConfig, load_config  # type: ignore  # pylint: disable=wrong-import-position
from hanoi_lite.errors import ResourceError, UsageError  # type: ignore  # pylint: disable=wrong-import-position


def test_defaults():
    config = AnimationConfig()
    assert config.mode == "append"
    assert config.delay == 1.0
    assert not config.use_color


def test_load_yaml(tmp_path: Path):
    path = tmp_path / "anim.yaml"
    path.write_text("mode: inplace\ndelay: 0.25\ncolormap: colors.csv\n")
    config = load_config(path)
    assert config.mode == "inplace"
    assert config.delay == 0.25
    assert config.use_color


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "anim.yaml"
    path.write_text("")
    assert load_config(path) == AnimationConfig()


def test_merged_skips_none():
    config = AnimationConfig(mode="inplace", delay=2.0).merged(mode=None, delay=0.0)
    assert config.mode == "inplace"
    assert config.delay == 0.0


@pytest.mark.parametrize("text", ["speed: 3\n", "- a\n- b\n", "mode: [unclosed\n"])
def test_bad_config_files(tmp_path: Path, text):
    path = tmp_path / "anim.yaml"
    path.write_text(text)
    with pytest.raises(ResourceError):
        load_config(path)


def test_missing_config(tmp_path: Path):
    with pytest.raises(ResourceError, match="not found"):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mode": "sideways"},
        {"mode": 3},
        {"delay": -1},
        {"delay": "fast"},
        {"delay": float("nan")},
        {"delay": float("inf")},
        {"delay": True},
        {"spacing": 0},
        {"spacing": "x"},
        {"spacing": 2.5},
        {"colormap": 5},
        {"color": "yes"},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(UsageError):
        AnimationConfig(**kwargs)


def test_wrongly_typed_yaml_value(tmp_path: Path):
    path = tmp_path / "anim.yaml"
    path.write_text("delay: fast\n")
    with pytest.raises(UsageError, match="number of seconds"):
        load_config(path)
