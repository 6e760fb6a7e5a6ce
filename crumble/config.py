"""Parser configuration loaded from environment variables.

Uses pydantic-settings so every field can be overridden via ``CRUMBLE_*``
env vars as well as passed explicitly.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from .boundary import DEFAULT_SCAN_WINDOW

# each nesting level costs about three interpreter frames; stay well under
# the default recursion limit of 1000
MAX_DEPTH_LIMIT = 200


class ParserConfig(BaseSettings):
    """Tuning knobs shared by the message and section parsers."""

    model_config = {"env_prefix": "CRUMBLE_", "frozen": True}

    scan_window: int = Field(
        default=DEFAULT_SCAN_WINDOW,
        ge=0,
        description=(
            "Characters scanned when looking for a content-type or boundary "
            "declaration in a section (0 scans the whole section)"
        ),
    )
    max_depth: int = Field(
        default=64,
        ge=1,
        le=MAX_DEPTH_LIMIT,
        description="Maximum section nesting depth before parsing is aborted",
    )
    encoding: str = Field(
        default="utf-8",
        description=(
            "Codec used to decode raw bytes handed to parse_bytes and to "
            "encode plain section bodies"
        ),
    )
