"""
Codegraph Globals Settings

Centralized configuration using pydantic-settings.
All environment variables use the CODEGRAPH_GLOBALS_ prefix; complex values
(names, include, exclude) are read as JSON.

Example:
    CODEGRAPH_GLOBALS_NAMES='{"react": "React", "lodash": "_"}'
    CODEGRAPH_GLOBALS_EXCLUDE='["**/vendor/**"]'
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from codegraph_globals.common.observability import LOG_FORMATS


class GlobalsSettings(BaseSettings):
    """
    Import-to-globals settings.

    Attributes:
        names: Module specifier → global object name
        include: Glob patterns of files to transform (empty: all files)
        exclude: Glob patterns of files to leave alone
        language: Grammar used when the file extension is not recognised
        strict_parse: Raise on syntax errors instead of rewriting best-effort
        log_level: Logging level
        log_format: "console" or "json"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODEGRAPH_GLOBALS_",
        extra="ignore",
    )

    names: dict[str, str] = Field(default_factory=dict, description="Specifier → global name")
    include: list[str] = Field(default_factory=list, description="Files to transform")
    exclude: list[str] = Field(default_factory=list, description="Files to skip")
    language: str = Field(default="javascript", description="Fallback grammar")
    strict_parse: bool = Field(default=True, description="Fail on syntax errors")
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("names")
    @classmethod
    def _check_names(cls, value: dict[str, str]) -> dict[str, str]:
        for specifier, global_name in value.items():
            if not specifier:
                raise ValueError("module specifier must not be empty")
            if not global_name:
                raise ValueError(f"global name for {specifier!r} must not be empty")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {value!r}")
        return value


# Eager loading (module-level instantiation)
settings = GlobalsSettings()
