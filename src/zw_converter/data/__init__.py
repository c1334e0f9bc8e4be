"""Set up the data."""

from pathlib import Path

from pydantic_yaml import parse_yaml_file_as

from .models import ConverterSettings

__all__ = ["data_path", "default_settings", "load_settings"]

data_path = Path(__file__).parent


def load_settings(path: Path | str | None = None) -> ConverterSettings:
    """Load converter settings from a YAML file (packaged defaults if not given)."""
    if path is None:
        path = data_path / "defaults.yaml"
    return parse_yaml_file_as(ConverterSettings, Path(path))


default_settings = load_settings()
