"""Splitter configuration models. Read-only; no business logic."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

BreakpointThresholdType = Literal["percentile", "standard_deviation", "interquartile", "gradient"]

DEFAULT_SENTENCE_SPLIT_REGEX = r"(?<=[.?!])\s+"


class SplitterConfig(BaseModel):
    """
    Options for the semantic double-pass splitter. Immutable per invocation.

    Accepts both snake_case field names and the camelCase option names used by
    host integrations (bufferSize, breakpointThresholdType, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    buffer_size: int = Field(default=1, ge=0, description="Neighbour sentences on each side of a window")
    breakpoint_threshold_type: BreakpointThresholdType = Field(default="percentile")
    breakpoint_threshold_amount: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Explicit distance threshold; overrides the strategy"
    )
    number_of_chunks: int | None = Field(
        default=None, ge=0, description="Target chunk count; 0 or None means unused"
    )
    sentence_split_regex: str = Field(default=DEFAULT_SENTENCE_SPLIT_REGEX)
    min_chunk_size: int | None = Field(default=None, ge=1, description="Minimum characters per chunk")
    max_chunk_size: int | None = Field(default=None, ge=1, description="Maximum characters per chunk")
    second_pass_threshold: float = Field(default=0.8, ge=0.0, le=1.0)

    @field_validator("sentence_split_regex")
    @classmethod
    def _check_regex(cls, value: str) -> str:
        if not value:
            raise ValueError("sentence_split_regex must not be empty")
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid sentence_split_regex {value!r}: {e}") from e
        return value

    @model_validator(mode="after")
    def _check_size_bounds(self) -> "SplitterConfig":
        if (
            self.min_chunk_size is not None
            and self.max_chunk_size is not None
            and self.min_chunk_size > self.max_chunk_size
        ):
            raise ValueError(
                f"min_chunk_size ({self.min_chunk_size}) exceeds max_chunk_size ({self.max_chunk_size})"
            )
        return self

    @property
    def sentence_pattern(self) -> re.Pattern[str]:
        return re.compile(self.sentence_split_regex)

    @property
    def has_size_constraints(self) -> bool:
        return bool(self.min_chunk_size or self.max_chunk_size)
