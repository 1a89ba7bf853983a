"""YAML config loader — reads config.yml into GeneratorSettings."""

from pathlib import Path

import yaml

from sitegen.schemas.config import GeneratorSettings


def load_config(path: str | Path | None = None) -> GeneratorSettings:
    """Load and validate a settings file.

    ``None`` returns the defaults. Raises ``FileNotFoundError`` if the path
    doesn't exist and ``pydantic.ValidationError`` if the YAML content is invalid.
    """
    if path is None:
        return GeneratorSettings()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    # An empty file (or one with only comments) loads as None.
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # Nested sections with every key commented out load as None.
    for key in ("server", "assets"):
        if key in raw and raw[key] is None:
            del raw[key]

    return GeneratorSettings(**raw)
