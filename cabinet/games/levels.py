"""
YAML level loading with Pydantic validation.

Games keep level data (tracks, maps, waves) in YAML files beside their code
and describe the expected shape with a Pydantic model. The loader parses
the YAML, validates it and wraps every failure in LevelValidationError with
the offending path.

Examples:
    >>> loader = LevelLoader(Path(__file__).parent / 'levels', TowerDefenseMap)
    >>> loader.list_levels()
    ['default']
    >>> level = loader.load_level('default')
"""

from pathlib import Path
from typing import Generic, List, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from cabinet.logging import get_logger

log = get_logger('levels')

M = TypeVar('M', bound=BaseModel)


class LevelValidationError(ValueError):
    """A level file is missing, unparseable or does not match its model."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(f"Invalid level file '{path}': {message}")


def load_yaml_model(path: Union[str, Path], model: Type[M]) -> M:
    """Load a YAML file and validate it against a Pydantic model.

    Args:
        path: YAML file
        model: Pydantic model class describing the file

    Returns:
        Validated model instance

    Raises:
        LevelValidationError: If the file is missing, malformed or invalid
    """
    path = Path(path)
    if not path.exists():
        raise LevelValidationError(path, "file not found")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LevelValidationError(path, f"YAML parse error: {e}") from e

    if not isinstance(data, dict):
        raise LevelValidationError(path, "top level must be a mapping")

    try:
        result = model.model_validate(data)
    except ValidationError as e:
        raise LevelValidationError(path, f"\n{e}") from e

    log.debug("Loaded %s from %s", model.__name__, path)
    return result


class LevelLoader(Generic[M]):
    """Discovers and loads the YAML levels of one game.

    Args:
        levels_dir: Directory holding ``<slug>.yaml`` files
        model: Pydantic model every level validates against
    """

    def __init__(self, levels_dir: Path, model: Type[M]):
        self._levels_dir = Path(levels_dir)
        self._model = model

    @property
    def levels_dir(self) -> Path:
        """Get the levels directory."""
        return self._levels_dir

    def list_levels(self) -> List[str]:
        """List available level slugs (sorted).

        Hidden files and files starting with '_' are skipped.
        """
        if not self._levels_dir.exists():
            return []
        return sorted(
            path.stem for path in self._levels_dir.glob('*.yaml')
            if not path.name.startswith(('_', '.'))
        )

    def level_exists(self, slug: str) -> bool:
        return (self._levels_dir / f"{slug}.yaml").exists()

    def load_level(self, slug: str) -> M:
        """Load and validate a level by slug.

        Raises:
            LevelValidationError: If the level is missing or invalid
        """
        return load_yaml_model(self._levels_dir / f"{slug}.yaml", self._model)
