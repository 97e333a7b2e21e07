from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ListQueryDTO(BaseModel):
    """Raw pagination/sort query parameters shared by every list endpoint.

    Values stay strings: page and limit are parsed leniently by the listing
    engine instead of being rejected at the HTTP layer.
    """

    page: str | None = None
    limit: str | None = None
    sort_field: str | None = None
    sort_order: str | None = None


class PageMetaDTO(BaseModel):
    """Pagination metadata returned next to every page of rows."""

    total_pages: int = Field(alias="totalPages", examples=[3])
    current_page: int = Field(alias="currentPage", examples=[1])
    total: int = Field(description="Rows matching the filters", examples=[25])
    limit: int = Field(description="Effective page size", examples=[10])
    valid_limits: list[int] = Field(alias="validLimits", examples=[[10, 20, 50, 100]])

    model_config = ConfigDict(populate_by_name=True)


class CarListResponseDTO(PageMetaDTO):
    cars: list[dict[str, Any]]


class DriverListResponseDTO(PageMetaDTO):
    drivers: list[dict[str, Any]]


class CarMaintenanceListResponseDTO(PageMetaDTO):
    car_maintenance_history: list[dict[str, Any]] = Field(alias="carMaintenanceHistory")


class OilChangeListResponseDTO(PageMetaDTO):
    oil_change_history: list[dict[str, Any]] = Field(alias="oilChangeHistory")


class MaintenanceHistoryListResponseDTO(PageMetaDTO):
    maintenance_history: list[dict[str, Any]] = Field(alias="maintenanceHistory")


class MaintenanceTypeListResponseDTO(PageMetaDTO):
    maintenance_types: list[dict[str, Any]] = Field(alias="maintenanceTypes")
