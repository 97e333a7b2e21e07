from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CarMaintenanceEntryDTO(BaseModel):
    """Request payload for creating or replacing a car maintenance entry."""

    car_id: int = Field(description="Car the maintenance was performed on", examples=[42])
    maintenance_type_id: int = Field(description="Maintenance type", examples=[3])
    maintenance_date: date = Field(examples=["2024-05-17"])
    maintenance_kilometers: int = Field(
        description="Odometer reading when the maintenance was done",
        examples=[85000],
    )
    recurrency: int = Field(
        default=0,
        description="Kilometers until the maintenance is due again (0 = one-off)",
        examples=[10000],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_id": 42,
                "maintenance_type_id": 3,
                "maintenance_date": "2024-05-17",
                "maintenance_kilometers": 85000,
                "recurrency": 10000,
            }
        }
    )
