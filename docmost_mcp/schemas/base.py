"""
Schemas - Base Model

Shared configuration for models built from Docmost API payloads.
"""

from pydantic import BaseModel


class DocmostModel(BaseModel):
    """Model populated from camelCase API payloads, unknown keys dropped."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_dict(self) -> dict:
        """Serialize with the API's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
