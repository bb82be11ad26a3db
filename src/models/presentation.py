"""
Document-level presentation metadata

Front matter at the top of a deck seeds these fields; settings supply the
defaults. None of this is merged into per-slide directives.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import appsettings


class PresentationMeta(BaseModel):
    """
    Metadata parsed from a deck's YAML front matter

    Unknown keys are kept (model_extra) so custom themes can read them.
    """

    model_config = ConfigDict(extra="allow")

    title: str = Field(default="", description="Deck title, used for <title>")
    description: Optional[str] = None
    author: Optional[str] = None
    theme: str = Field(default_factory=lambda: appsettings.default_theme)
    paginate: bool = Field(default_factory=lambda: appsettings.default_paginate)
    size: Optional[str] = None
    math: Optional[str] = None
