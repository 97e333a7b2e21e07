from typing import Any, Mapping

from fastapi import APIRouter, Depends, Path, status

from fleet_tracker.domain.listing import MAX_INTEGER, ResourceSchema
from fleet_tracker.entrypoints.http.dependencies import (
    get_create_car_maintenance_entry_use_case,
    get_delete_car_maintenance_entry_use_case,
    get_get_record_by_id_use_case,
    get_list_query,
    get_list_query_engine,
    get_resource_schemas,
    get_update_car_maintenance_entry_use_case,
)
from fleet_tracker.entrypoints.http.dtos.car_maintenance import CarMaintenanceEntryDTO
from fleet_tracker.entrypoints.http.dtos.listing import (
    CarMaintenanceListResponseDTO,
    ListQueryDTO,
)
from fleet_tracker.entrypoints.http.dtos.records import CreatedResponseDTO, MessageResponseDTO
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.car_maintenance_mapper import CarMaintenanceMapper
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.create_car_maintenance_entry import CreateCarMaintenanceEntry
from fleet_tracker.use_cases.delete_car_maintenance_entry import DeleteCarMaintenanceEntry
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine
from fleet_tracker.use_cases.update_car_maintenance_entry import (
    UpdateCarMaintenanceEntry,
    UpdateCarMaintenanceEntryRequest,
)

router = APIRouter(tags=["Car maintenance"])


@router.get(
    "/car-maintenance",
    response_model=CarMaintenanceListResponseDTO,
    summary="List car maintenance entries",
    description="""
    Paginated maintenance entries of every car, joined with the car's
    make/model/plate and the maintenance type name.

    ## Sorting
    - `sortField`: id, car_id, maintenance_type, maintenance_type_name,
      maintenance_date, maintenance_kilometers, recurrency, vehicle
    - Unknown sort fields are rejected with 400

    ## Pagination
    - `limit` outside `validLimits` falls back to 10
    """,
    responses={400: {"model": ErrorResponse, "description": "Invalid sort field"}},
)
def list_car_maintenance(
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> CarMaintenanceListResponseDTO:
    schema = schemas["car_maintenance"]

    result = engine.execute(schema, ListingMapper.to_domain_request(query))

    return ListingMapper.to_response(result, schema, CarMaintenanceListResponseDTO)


@router.get(
    "/car-maintenance/car/{car_id}",
    response_model=CarMaintenanceListResponseDTO,
    summary="List maintenance entries of one car",
    description="""
    Same rows as `/car-maintenance`, restricted to one car.

    - `limit` must be one of 10, 20, 50, 100, 200, 500; anything else is rejected with 400
    - Unknown sort fields are rejected with 400
    - A non-integer `car_id` is rejected with 400
    """,
    responses={400: {"model": ErrorResponse, "description": "Invalid limit, sort field or car id"}},
)
def list_car_maintenance_by_car(
    car_id: str,
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> CarMaintenanceListResponseDTO:
    schema = schemas["car_maintenance_by_car"]

    request = ListingMapper.to_domain_request(query, filters={"car_id": car_id})
    result = engine.execute(schema, request)

    return ListingMapper.to_response(result, schema, CarMaintenanceListResponseDTO)


@router.get(
    "/car-maintenance/{entry_id}",
    response_model=dict[str, Any],
    summary="Get car maintenance entry",
    responses={404: {"model": ErrorResponse, "description": "Entry not found"}},
)
def get_car_maintenance_entry(
    entry_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(
        GetRecordByIdRequest(schema=schemas["car_maintenance"], record_id=entry_id)
    )
    return response.record


@router.post(
    "/car-maintenance",
    response_model=CreatedResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Record a car maintenance entry",
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def create_car_maintenance_entry(
    payload: CarMaintenanceEntryDTO,
    use_case: CreateCarMaintenanceEntry = Depends(get_create_car_maintenance_entry_use_case),
) -> CreatedResponseDTO:
    result = use_case.execute(CarMaintenanceMapper.to_domain_entry(payload))

    return CreatedResponseDTO(message="Car maintenance entry added successfully", id=result.id)


@router.put(
    "/car-maintenance/{entry_id}",
    response_model=MessageResponseDTO,
    summary="Replace a car maintenance entry",
    responses={
        404: {"model": ErrorResponse, "description": "Entry not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def update_car_maintenance_entry(
    payload: CarMaintenanceEntryDTO,
    entry_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: UpdateCarMaintenanceEntry = Depends(get_update_car_maintenance_entry_use_case),
) -> MessageResponseDTO:
    use_case.execute(
        UpdateCarMaintenanceEntryRequest(
            entry_id=entry_id,
            entry=CarMaintenanceMapper.to_domain_entry(payload),
        )
    )

    return MessageResponseDTO(message="Car maintenance entry updated successfully")


@router.delete(
    "/car-maintenance/{entry_id}",
    response_model=MessageResponseDTO,
    summary="Delete a car maintenance entry",
    responses={404: {"model": ErrorResponse, "description": "Entry not found"}},
)
def delete_car_maintenance_entry(
    entry_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: DeleteCarMaintenanceEntry = Depends(get_delete_car_maintenance_entry_use_case),
) -> MessageResponseDTO:
    use_case.execute(entry_id)

    return MessageResponseDTO(message="Car maintenance entry deleted successfully")
