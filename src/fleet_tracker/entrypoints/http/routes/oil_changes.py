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
from fleet_tracker.entrypoints.http.dtos.listing import ListQueryDTO, OilChangeListResponseDTO
from fleet_tracker.entrypoints.http.dtos.records import MessageResponseDTO
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.delete_record import DeleteRecord, DeleteRecordRequest
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine

router = APIRouter(tags=["Oil changes"])


@router.get(
    "/oil-changes",
    response_model=OilChangeListResponseDTO,
    summary="List oil changes",
    description="""
    Paginated oil change history joined with each car's make, model and plate.

    - `sortField`: id, car_id, oil_change_date, oil_change_kilometers,
      liters_quantity, price_per_liter, total_cost, license_plate, vehicle
    - Unknown sort fields and limits fall back to the defaults
    """,
)
def list_oil_changes(
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> OilChangeListResponseDTO:
    schema = schemas["oil_changes"]

    result = engine.execute(schema, ListingMapper.to_domain_request(query))

    return ListingMapper.to_response(result, schema, OilChangeListResponseDTO)


@router.get(
    "/oil-changes/car/{car_id}",
    response_model=OilChangeListResponseDTO,
    summary="List oil changes of one car",
    responses={400: {"model": ErrorResponse, "description": "car_id is not an integer"}},
)
def list_oil_changes_by_car(
    car_id: str,
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> OilChangeListResponseDTO:
    schema = schemas["oil_changes_by_car"]

    request = ListingMapper.to_domain_request(query, filters={"car_id": car_id})
    result = engine.execute(schema, request)

    return ListingMapper.to_response(result, schema, OilChangeListResponseDTO)


@router.get(
    "/oil-changes/{oil_change_id}",
    response_model=dict[str, Any],
    summary="Get oil change details",
    responses={404: {"model": ErrorResponse, "description": "Oil change not found"}},
)
def get_oil_change(
    oil_change_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(
        GetRecordByIdRequest(schema=schemas["oil_changes"], record_id=oil_change_id)
    )
    return response.record


@router.delete(
    "/oil-changes/{oil_change_id}",
    response_model=MessageResponseDTO,
    summary="Delete an oil change",
    responses={404: {"model": ErrorResponse, "description": "Oil change not found"}},
)
def delete_oil_change(
    oil_change_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: DeleteRecord = Depends(get_delete_record_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MessageResponseDTO:
    use_case.execute(DeleteRecordRequest(schema=schemas["oil_changes"], record_id=oil_change_id))

    return MessageResponseDTO(message="Oil change deleted successfully")
