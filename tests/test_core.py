"""
Unit tests for core module.
"""
from dataclasses import FrozenInstanceError
from pathlib import Path
import textwrap

import pytest

from darts_score.core import (
    BoardGeometry, BoardHit, Config, ThrowRecord, TurnSnapshot,
    atomic_write_yaml, load_yaml
)


def test_turn_snapshot_is_frozen():
    """Snapshots cannot be edited after capture."""
    snap = TurnSnapshot(active_index=0, throws_left=3, round_index=0, throws_this_round=0)
    with pytest.raises(FrozenInstanceError):
        snap.throws_left = 1

    record = ThrowRecord(snapshot=snap, player="Alice", points=20)
    assert record.snapshot.throws_left == 3


def test_board_geometry_validation():
    """Ring fractions must increase outward."""
    geometry = BoardGeometry()
    assert geometry.sector_sequence[0] == 20
    assert len(geometry.sector_sequence) == 20

    with pytest.raises(ValueError):
        BoardGeometry(triple_inner=0.9, triple_outer=0.5)


@pytest.mark.parametrize("ring,sector,multiplier,label", [
    ("double_bull", None, 50, "Bull (50)"),
    ("single_bull", None, 25, "Bull (25)"),
    ("triple", 20, 3, "20 x3"),
    ("double", 16, 2, "16 x2"),
    ("single", 5, 1, "5"),
    ("miss", None, 0, "Miss"),
])
def test_board_hit_label(ring, sector, multiplier, label):
    hit = BoardHit(x_px=0, y_px=0, radius=0, angle=0, ring=ring,
                   sector=sector, multiplier=multiplier)
    assert hit.label == label


def test_config_defaults():
    """Defaults are used without a file."""
    config = Config()
    assert config.get("game", "throws_per_turn") == 3
    assert config.get("session", "highlight_clear_sec") == pytest.approx(0.3)
    assert config.get("game", "missing", "x") == "x"
    assert config.get_section("board")["double_outer"] == pytest.approx(0.99)


def test_config_merges_user_file(tmp_path: Path):
    """User values override defaults; other keys survive."""
    config_path = tmp_path / "darts.yaml"
    config_path.write_text(textwrap.dedent("""
        game:
          initial_rounds: 5
        storage:
          roster_path: roster.yaml
    """).strip())

    config = Config(config_path)

    assert config.get("game", "initial_rounds") == 5
    assert config.get("game", "throws_per_turn") == 3
    assert config.roster_path == Path("roster.yaml")


def test_config_instances_do_not_share_defaults(tmp_path: Path):
    config_path = tmp_path / "darts.yaml"
    config_path.write_text("game:\n  throws_per_turn: 5\n")

    Config(config_path)

    assert Config().get("game", "throws_per_turn") == 3


def test_config_malformed_file_falls_back(tmp_path: Path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("game: [unclosed\n")

    config = Config(config_path)

    assert config.get("game", "throws_per_turn") == 3


def test_config_empty_section_keeps_defaults(tmp_path: Path):
    """A bare section header parses as null and must not replace the defaults."""
    config_path = tmp_path / "darts.yaml"
    config_path.write_text("game:\nsession: 5\nextra:\nstorage:\n  roster_path:\n")

    config = Config(config_path)

    assert config.get("game", "throws_per_turn") == 3
    assert config.get_section("game")["initial_rounds"] == 1
    assert config.get("session", "highlight_clear_sec") == pytest.approx(0.3)
    assert config.get("extra", "anything", "fallback") == "fallback"
    assert config.get_section("extra") == {}
    assert config.roster_path == Path(Config.DEFAULTS["storage"]["roster_path"]).expanduser()


def test_config_non_mapping_file(tmp_path: Path):
    config_path = tmp_path / "darts.yaml"
    config_path.write_text("- just\n- a list\n")

    assert Config(config_path).get("game", "throws_per_turn") == 3


def test_atomic_write_yaml(tmp_path: Path):
    """Test atomic YAML writing."""
    filepath = tmp_path / "nested" / "players.yaml"
    data = {"players": ["Alice", "Bob"], "selected": "Bob"}

    atomic_write_yaml(filepath, data)
    assert filepath.exists()

    loaded = load_yaml(filepath)
    assert loaded == data
    assert not list(filepath.parent.glob("*.tmp"))


def test_load_nonexistent_yaml(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "nonexistent_file.yaml")


def test_load_empty_yaml(tmp_path: Path):
    filepath = tmp_path / "empty.yaml"
    filepath.write_text("")
    assert load_yaml(filepath) == {}

