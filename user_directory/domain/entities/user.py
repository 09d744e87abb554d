"""User entity for the user directory."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """A single directory entry, immutable once created."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Alice",
            }
        },
    )

    id: str = Field(min_length=1, description="Unique identifier within the directory")
    name: str = Field(description="Display label")

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, value: str) -> str:
        """Reject IDs made only of whitespace, which lookups refuse as invalid."""
        if not value.strip():
            raise ValueError("id must contain a non-whitespace character")
        return value
