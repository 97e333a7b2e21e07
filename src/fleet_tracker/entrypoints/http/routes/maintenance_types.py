from typing import Any, Mapping

from fastapi import APIRouter, Depends

from fleet_tracker.domain.listing import ResourceSchema
from fleet_tracker.entrypoints.http.dependencies import (
    get_get_record_by_id_use_case,
    get_list_query,
    get_list_query_engine,
    get_resource_schemas,
)
from fleet_tracker.entrypoints.http.dtos.listing import (
    ListQueryDTO,
    MaintenanceTypeListResponseDTO,
)
from fleet_tracker.entrypoints.http.error_responses import ErrorResponse
from fleet_tracker.entrypoints.http.mappers.listing_mapper import ListingMapper
from fleet_tracker.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from fleet_tracker.use_cases.list_resource import ListQueryEngine

router = APIRouter(tags=["Maintenance types"])


@router.get(
    "/maintenance/types",
    response_model=MaintenanceTypeListResponseDTO,
    summary="List maintenance types",
    description="""
    Maintenance types to pick `maintenance_type_id` from when recording
    maintenance; `recurrency` is the type's default interval in kilometers.

    - `sortField`: id, name, recurrency (unknown values fall back to id)
    - `limit`: one of `validLimits`; pass `limit=100` to fill a picker in one call
    """,
)
def list_maintenance_types(
    query: ListQueryDTO = Depends(get_list_query),
    engine: ListQueryEngine = Depends(get_list_query_engine),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> MaintenanceTypeListResponseDTO:
    schema = schemas["maintenance_types"]

    result = engine.execute(schema, ListingMapper.to_domain_request(query))

    return ListingMapper.to_response(result, schema, MaintenanceTypeListResponseDTO)


@router.get(
    "/maintenance/types/{type_id}",
    response_model=dict[str, Any],
    summary="Get maintenance type",
    responses={404: {"model": ErrorResponse, "description": "Maintenance type not found"}},
)
def get_maintenance_type(
    type_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
    schemas: Mapping[str, ResourceSchema] = Depends(get_resource_schemas),
) -> dict[str, Any]:
    response = use_case.execute(
        GetRecordByIdRequest(schema=schemas["maintenance_types"], record_id=type_id)
    )
    return response.record
