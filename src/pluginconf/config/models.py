"""Configuration models for pluginconf.

This module contains the Pydantic base class every persisted plugin config derives from.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pluginconf.config.codec import dumps, loads


class VersionedConfig(BaseModel):
    """Base class for a plugin's persisted settings.

    Subclasses declare their own fields with defaults and bump ``CURRENT_VERSION``
    whenever the schema changes. The ``Version`` key in the file is compared against
    ``CURRENT_VERSION`` by equality only, so it may be an int or a string.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Schema version the running code expects
    CURRENT_VERSION: ClassVar[int | str] = 1

    version: int | str = Field(default=None, alias="Version", validate_default=False)

    @model_validator(mode="before")
    @classmethod
    def fill_missing_version(cls, data: Any) -> Any:
        """Report the current version when the source data carries none."""
        if isinstance(data, dict) and "Version" not in data and "version" not in data:
            data = {**data, "Version": cls.CURRENT_VERSION}
        return data

    @classmethod
    def current_version(cls) -> int | str:
        """Return the schema version the running code expects."""
        return cls.CURRENT_VERSION

    def is_current(self) -> bool:
        return self.version == self.current_version()

    def to_json(self) -> str:
        """Serialize to indented JSON using the on-disk field names."""
        return dumps(self)

    @classmethod
    def from_json(cls, text: str) -> Self:
        """Parse JSON text (comments allowed) into an instance of this class."""
        return loads(cls, text)
