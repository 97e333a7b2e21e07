from typing import Any, Mapping

from fastapi import APIRouter, Depends, Path, Query

from fleet_tracker.domain.listing import MAX_INTEGER, ResourceSchema
from fleet_tracker.entrypoints.http.dependencies import (
    get_delete_record_use_case,
    get_get_record_by_id_use_case,
    get_list_query,
    get_list_query_engine,
    get_resource_schemas,
    get_update_car_status_use_case,
)
from fleet_tracker.entrypoints.http.dtos.listing import CarListResponseDTO, ListQueryDTO
from fleet_tracker.entrypoints.http.dtos.records import CarStatusDTO, MessageResponseDTO
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.delete_record import DeleteRecord, DeleteRecordRequest
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine
from fleet_tracker.use_cases.update_car_status import UpdateCarStatus, UpdateCarStatusRequest

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CarListResponseDTO,
    summary="List cars",
    description="""
    Paginated list of cars with their assigned driver's name.

    ## Pagination
    - `page` starts at 1; missing, zero or negative pages read as 1
    - `limit` must be one of `validLimits`; other values fall back to 10

    ## Sorting
    - `sortField`: id, make, model, license_plate, current_kilometers,
      next_tire_change, next_oil_change, driver_id, driver_name, status
    - Unknown sort fields fall back to `id`

    ## Filters
    - `status`: active, inactive or all
    - `driver_id`: integer

    ## Example
    ```
    GET /v1/cars?page=2&limit=20&sortField=driver_name&sortOrder=desc&status=active
    ```
    """,
    responses={400: {"model": ErrorResponse, "description": "Invalid filter value"}},
)
def list_cars(
    query: ListQueryDTO = Depends(get_list_query),
    status: str | None = Query(default=None, description="active, inactive or all"),
    driver_id: str | None = Query(default=None, description="Only cars assigned to this driver"),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> CarListResponseDTO:
    """List cars endpoint following parse → execute → map → return pattern."""
    schema = schemas["cars"]

    request = ListingMapper.to_domain_request(
        query, filters={"status": status, "driver_id": driver_id}
    )
    result = engine.execute(schema, request)

    return ListingMapper.to_response(result, schema, CarListResponseDTO)


@router.get(
    "/cars/{car_id}",
    response_model=dict[str, Any],
    summary="Get car details",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Malformed car id"},
    },
)
def get_car(
    car_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(GetRecordByIdRequest(schema=schemas["cars"], record_id=car_id))
    return response.record


@router.patch(
    "/cars/{car_id}/status",
    response_model=MessageResponseDTO,
    summary="Activate or deactivate a car",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Unknown status"},
    },
)
def update_car_status(
    payload: CarStatusDTO,
    car_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: UpdateCarStatus = Depends(get_update_car_status_use_case),
) -> MessageResponseDTO:
    use_case.execute(UpdateCarStatusRequest(car_id=car_id, status=payload.status))

    return MessageResponseDTO(message="Car status updated successfully")


@router.delete(
    "/cars/{car_id}",
    response_model=MessageResponseDTO,
    summary="Delete a car",
    description="Deletes the car together with its maintenance and oil change history.",
    responses={404: {"model": ErrorResponse, "description": "Car not found"}},
)
def delete_car(
    car_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: DeleteRecord = Depends(get_delete_record_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MessageResponseDTO:
    use_case.execute(DeleteRecordRequest(schema=schemas["cars"], record_id=car_id))

    return MessageResponseDTO(message="Car deleted successfully")
