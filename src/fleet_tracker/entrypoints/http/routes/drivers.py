from typing import Any, Mapping

from fastapi import APIRouter, Depends, Path

from fleet_tracker.domain.listing import MAX_INTEGER, ResourceSchema
from fleet_tracker.entrypoints.http.dependencies import (
    get_delete_record_use_case,
    get_get_record_by_id_use_case,
    get_list_query,
    get_list_query_engine,
    get_resource_schemas,
)
from fleet_tracker.entrypoints.http.dtos.listing import DriverListResponseDTO, ListQueryDTO
from fleet_tracker.entrypoints.http.dtos.records import MessageResponseDTO
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.delete_record import DeleteRecord, DeleteRecordRequest
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine

router = APIRouter(tags=["Drivers"])


@router.get(
    "/drivers",
    response_model=DriverListResponseDTO,
    summary="List drivers",
    description="""
    Paginated list of drivers.

    - `sortField`: id, name, license_number (unknown values fall back to id)
    - `limit`: one of `validLimits` (other values fall back to 10)
    """,
)
def list_drivers(
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> DriverListResponseDTO:
    schema = schemas["drivers"]

    result = engine.execute(schema, ListingMapper.to_domain_request(query))

    return ListingMapper.to_response(result, schema, DriverListResponseDTO)


@router.get(
    "/drivers/{driver_id}",
    response_model=dict[str, Any],
    summary="Get driver details",
    responses={404: {"model": ErrorResponse, "description": "Driver not found"}},
)
def get_driver(
    driver_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(
        GetRecordByIdRequest(schema=schemas["drivers"], record_id=driver_id)
    )
    return response.record


@router.delete(
    "/drivers/{driver_id}",
    response_model=MessageResponseDTO,
    summary="Delete a driver",
    description="Cars assigned to the driver are kept and left without a driver.",
    responses={404: {"model": ErrorResponse, "description": "Driver not found"}},
)
def delete_driver(
    driver_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: DeleteRecord = Depends(get_delete_record_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MessageResponseDTO:
    use_case.execute(DeleteRecordRequest(schema=schemas["drivers"], record_id=driver_id))

    return MessageResponseDTO(message="Driver deleted successfully")
