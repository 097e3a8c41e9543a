"""Configuration models describing file-identify settings."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from file_identify.detection import IdentifyOptions


class FileIdentifyBaseModel(BaseModel):
    """Shared configuration for file-identify Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class IdentifySettings(FileIdentifyBaseModel):
    """Defaults for the identification steps the CLI runs.

    Attributes:
        skip_content_analysis: Whether to skip text/binary sniffing.
        skip_shebang_analysis: Whether to skip shebang parsing for executables.
        custom_extensions: Extra extension to tag mappings checked first.
    """

    skip_content_analysis: bool = False
    skip_shebang_analysis: bool = False
    custom_extensions: Dict[str, List[str]] = Field(default_factory=dict)

    def to_options(self) -> IdentifyOptions:
        """Return identifier options equivalent to these settings."""
        return IdentifyOptions(
            skip_content_analysis=self.skip_content_analysis,
            skip_shebang_analysis=self.skip_shebang_analysis,
            custom_extensions=(
                {ext: frozenset(tags) for ext, tags in self.custom_extensions.items()}
                if self.custom_extensions
                else None
            ),
        )


class LoggingSettings(FileIdentifyBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: str = "WARNING"


class FileIdentifyConfig(FileIdentifyBaseModel):
    """Top-level configuration struct for file-identify.

    Attributes:
        identify: Identification step defaults.
        logging: Logging configuration.
    """

    identify: IdentifySettings = Field(default_factory=IdentifySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "FileIdentifyBaseModel",
    "IdentifySettings",
    "LoggingSettings",
    "FileIdentifyConfig",
]
