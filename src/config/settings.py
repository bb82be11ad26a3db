"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SHERP_ prefix (e.g., SHERP_DEFAULT_PAGINATE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SHERP_ prefix.

    Examples:
        SHERP_DEFAULT_THEME=gaia
        SHERP_DEFAULT_PAGINATE=true
        SHERP_PYGMENTS_STYLE=friendly
    """

    model_config = SettingsConfigDict(
        env_prefix="SHERP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Presentation defaults (seed front matter, never per-slide directives)
    default_theme: str = Field(
        default="default",
        description="Theme used when the deck's front matter names none",
    )

    default_paginate: bool = Field(
        default=False,
        description="Page numbers shown when no paginate directive is in effect",
    )

    # Rendering configuration
    pygments_style: str = Field(
        default="monokai",
        description="Pygments style for fenced code blocks",
    )

    debug_mode: bool = Field(
        default=False,
        description="Print tracebacks on compile errors",
    )

    # Output configuration
    output_filename: str = Field(
        default="index.html",
        description="Name of the compiled deck within the output directory",
    )

    json_filename: str = Field(
        default="slides.json",
        description="Name of the slide list dump written with --json",
    )

    def outputFile_get(self, output_dir: Path) -> Path:
        """Path of the compiled HTML deck inside output_dir"""
        return Path(output_dir) / self.output_filename

    def jsonFile_get(self, output_dir: Path) -> Path:
        """Path of the slides.json dump inside output_dir"""
        return Path(output_dir) / self.json_filename


# Singleton instance - import this in your code
appsettings = AppSettings()
