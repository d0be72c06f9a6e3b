"""Tests for YAML level loading and the level models."""
import pytest
from pydantic import ValidationError

from cabinet.games.levels import LevelLoader, LevelValidationError, load_yaml_model
from games.RacingThunder.config import TRACKS_FILE
from games.TowerDefensePro.config import LEVELS_DIR
from models import Color
from models.racing import TrackConfig, TrackSet
from models.tower_defense import TowerDefenseMap

MINIMAL_MAP = """
name: Tiny
path:
  - {x: 0, y: 100}
  - {x: 200, y: 100}
tower_types:
  basic: {damage: 10, range: 100, fire_rate_ms: 500, cost: 50, color: '#00ff00'}
enemy_types:
  normal: {health: 50, speed: 1, reward: 5, color: '#ff0000'}
waves:
  - enemies:
      - {type: normal, count: 3, delay_ms: 500}
    reward: 20
"""


@pytest.fixture
def levels_dir(tmp_path):
    (tmp_path / 'tiny.yaml').write_text(MINIMAL_MAP)
    (tmp_path / '_draft.yaml').write_text(MINIMAL_MAP)
    return tmp_path


class TestLevelLoader:
    """Discovery and validation of level files."""

    def test_lists_levels_skipping_private(self, levels_dir):
        loader = LevelLoader(levels_dir, TowerDefenseMap)
        assert loader.list_levels() == ['tiny']
        assert loader.level_exists('tiny')

    def test_defaults_fill_in(self, levels_dir):
        level = LevelLoader(levels_dir, TowerDefenseMap).load_level('tiny')
        assert (level.width, level.height, level.grid_size) == (800, 600, 40)
        assert level.starting_money == 200
        assert level.waves[0].total_enemies == 3

    def test_missing_level(self, levels_dir):
        with pytest.raises(LevelValidationError, match='file not found'):
            LevelLoader(levels_dir, TowerDefenseMap).load_level('nope')

    def test_missing_dir_lists_nothing(self, tmp_path):
        assert LevelLoader(tmp_path / 'absent', TowerDefenseMap).list_levels() == []

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("name: [unclosed\n")
        with pytest.raises(LevelValidationError, match='YAML parse error'):
            load_yaml_model(path, TowerDefenseMap)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(LevelValidationError, match='mapping'):
            load_yaml_model(path, TowerDefenseMap)

    def test_unknown_enemy_type_in_wave(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text(MINIMAL_MAP.replace('type: normal', 'type: ghost'))
        with pytest.raises(LevelValidationError) as exc_info:
            load_yaml_model(path, TowerDefenseMap)
        assert 'ghost' in str(exc_info.value)
        assert exc_info.value.path == path


class TestBundledLevels:
    """The level files shipped with the games validate."""

    def test_tower_defense_levels(self):
        loader = LevelLoader(LEVELS_DIR, TowerDefenseMap)
        assert 'default' in loader.list_levels()
        level = loader.load_level('default')
        assert len(level.path) >= 2
        assert level.waves

    def test_racing_tracks(self):
        track_set = load_yaml_model(TRACKS_FILE, TrackSet)
        assert len(track_set.tracks) == 3
        for track in track_set.tracks:
            assert len(track.checkpoints) >= 2
            assert 1 <= track.difficulty <= 3


class TestModels:
    """Primitive and track model validation."""

    def test_color_from_hex(self):
        assert Color.from_hex('#ff6b35').as_tuple == (255, 107, 53)
        assert str(Color(r=0, g=128, b=255)) == '#0080ff'

    def test_bad_hex_color(self):
        with pytest.raises(ValueError):
            Color.from_hex('red')

    def test_color_range(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

    def test_track_color_validated(self):
        with pytest.raises(ValidationError):
            TrackConfig(name='T', color='blue', difficulty=1, laps=1,
                        checkpoints=[{'x': 0, 'y': 0}, {'x': 10, 'y': 0}])

    def test_duplicate_track_names(self):
        track = {'name': 'T', 'color': '#ffffff', 'difficulty': 1, 'laps': 1,
                 'checkpoints': [{'x': 0, 'y': 0}, {'x': 10, 'y': 0}]}
        with pytest.raises(ValidationError):
            TrackSet(tracks=[track, track])
