"""JSON reading and writing for versioned configs.

Writing always produces indented text keyed by field aliases. Reading goes through
``json5`` so that hand-edited files may carry ``//`` and ``/* */`` comments.
"""

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import json5
from pydantic import ValidationError

if TYPE_CHECKING:
    from pluginconf.config.models import VersionedConfig

T = TypeVar("T", bound="VersionedConfig")

INDENT = 2


class ConfigParseError(ValueError):
    """Raised when config text cannot be parsed into its model."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def dumps(config: "VersionedConfig") -> str:
    """Serialize a config to indented, human-readable JSON.

    Args:
        config: Configuration to serialize

    Returns:
        str: JSON text using the on-disk field names
    """
    return config.model_dump_json(indent=INDENT, by_alias=True)


def loads(cls: type[T], text: str, path: Path | None = None) -> T:
    """Parse JSON text into a config object.

    Args:
        cls: Config class to validate into
        text: JSON text, possibly containing comments
        path: Source file, only used for error reporting

    Returns:
        A new instance of ``cls``

    Raises:
        ConfigParseError: If the text is not valid JSON or does not fit ``cls``
    """
    source = str(path) if path else "<string>"
    try:
        data = json5.loads(text)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON in {source}: {e}", path) from e

    try:
        return cls.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(
            f"Config in {source} does not match {cls.__name__}: {e}", path
        ) from e
