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
from fleet_tracker.entrypoints.http.dtos.listing import (
    ListQueryDTO,
    MaintenanceHistoryListResponseDTO,
)
from fleet_tracker.entrypoints.http.dtos.records import MessageResponseDTO
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.delete_record import DeleteRecord, DeleteRecordRequest
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine

router = APIRouter(tags=["Maintenance history"])


@router.get(
    "/maintenance/history",
    response_model=MaintenanceHistoryListResponseDTO,
    summary="List maintenance history",
    description="""
    Paginated maintenance history with vehicle and maintenance type names.

    - `sortField`: id, vehicle, maintenance_type_name, maintenance_date,
      maintenance_kilometers, recurrency, cost
    - Unknown sort fields and limits fall back to the defaults
    """,
)
def list_maintenance_history(
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MaintenanceHistoryListResponseDTO:
    schema = schemas["maintenance_history"]

    result = engine.execute(schema, ListingMapper.to_domain_request(query))

    return ListingMapper.to_response(result, schema, MaintenanceHistoryListResponseDTO)


@router.get(
    "/maintenance/history/{entry_id}",
    response_model=dict[str, Any],
    summary="Get maintenance history entry",
    responses={404: {"model": ErrorResponse, "description": "Entry not found"}},
)
def get_maintenance_history_entry(
    entry_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(
        GetRecordByIdRequest(schema=schemas["maintenance_history"], record_id=entry_id)
    )
    return response.record


@router.delete(
    "/maintenance/history/{entry_id}",
    response_model=MessageResponseDTO,
    summary="Delete a maintenance history entry",
    responses={404: {"model": ErrorResponse, "description": "Maintenance history entry not found"}},
)
def delete_maintenance_history_entry(
    entry_id: int = Path(ge=1, le=MAX_INTEGER),
    use_case: DeleteRecord = Depends(get_delete_record_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MessageResponseDTO:
    use_case.execute(DeleteRecordRequest(schema=schemas["maintenance_history"], record_id=entry_id))

    return MessageResponseDTO(message="Maintenance history entry deleted successfully")
