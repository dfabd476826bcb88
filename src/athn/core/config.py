"""
Parser configuration.

The limits mirror what renderers are expected to cope with; documents that
exceed them still parse, the surplus entries are dropped.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParserConfig(BaseModel):
    """
    Tunables for a single parse.

    Attributes:
        max_authors: Maximum number of ``AU`` entries kept
        max_licenses: Maximum number of ``LI`` entries kept
        max_languages: Maximum number of ``LA`` entries kept
    """

    max_authors: int = Field(default=16, ge=0)
    max_licenses: int = Field(default=4, ge=0)
    max_languages: int = Field(default=256, ge=0)

    model_config = ConfigDict(frozen=True)


DEFAULT_CONFIG = ParserConfig()
