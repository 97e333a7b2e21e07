from pydantic import BaseModel, ConfigDict, Field


class MessageResponseDTO(BaseModel):
    message: str


class CreatedResponseDTO(MessageResponseDTO):
    id: int


class CarStatusDTO(BaseModel):
    """Request payload for activating or deactivating a car."""

    status: str = Field(description="active or inactive", examples=["inactive"])

    model_config = ConfigDict(json_schema_extra={"example": {"status": "inactive"}})
