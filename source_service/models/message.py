"""
Inbound queue message schema.

Validates the JSON body published when a source is ready for processing.

Dependencies: pydantic
System role: Data validation and contract definition
"""

from pydantic import BaseModel, ConfigDict, Field


class SourceMessage(BaseModel):
    """Message body for source processing events."""

    source_id: str = Field(..., min_length=1, description="Source record UUID")
    type: str = Field(..., description="link, note, pdf, ppt or doc")
    user_id: str = Field(..., min_length=1, description="Owning user ID")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "source_id": "550e8400-e29b-41d4-a716-446655440000",
                "type": "link",
                "user_id": "user_2abc",
            }
        }
    )
