"""Configuration schema definitions using Pydantic for validation.

Configuration errors surface as pydantic ValidationError at load time
rather than as odd output from the codec later on.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class CodecConfig(BaseModel):
    """Configuration for the TGF codec.

    Attributes:
        separator: Character that separates the vertex block from the edge block.
        encoding: Text encoding used for reading and writing files.
        atomic_write: Write through a temporary file and rename it into place.
    """

    separator: str = "#"
    encoding: str = "utf-8"
    atomic_write: bool = True

    model_config = {"extra": "forbid"}

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be a single non-whitespace character."""
        if len(v) != 1 or v.isspace():
            raise ValueError(f"Invalid separator {v!r}: expected one non-whitespace character")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Encoding must be known to the codecs registry."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding {v!r}") from exc
        return v


class GraphConfig(BaseModel):
    """Top-level tgfgraph configuration.

    Attributes:
        codec: TGF codec configuration.
    """

    codec: CodecConfig = Field(default_factory=CodecConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
