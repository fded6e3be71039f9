"""
Config Models — Settings that parameterize the calculator passes.
"""

from pydantic import BaseModel, Field, field_validator


class CalcSettings(BaseModel):
    """Tunable rules for one calculator profile."""

    default_separators: list[str] = Field(
        default_factory=lambda: [",", "\n"],
        description="Separators used when no custom header is present",
    )
    header_marker: str = Field(
        "//",
        description="Prefix announcing a custom separator header",
    )
    max_value: int = Field(
        1000,
        ge=0,
        description="Numbers above this are normalized to zero",
    )
    strict_header: bool = Field(
        False,
        description="Require the character after the custom separator to be a newline",
    )

    @field_validator("default_separators")
    @classmethod
    def _single_characters(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one default separator is required")
        for sep in value:
            if len(sep) != 1:
                raise ValueError(f"separator must be a single character: {sep!r}")
        return value

    @field_validator("header_marker")
    @classmethod
    def _non_empty_marker(cls, value: str) -> str:
        if not value:
            raise ValueError("header_marker must not be empty")
        return value


class Profile(BaseModel):
    """A named settings profile loaded from YAML."""

    name: str
    description: str = ""
    settings: CalcSettings = Field(default_factory=CalcSettings)
