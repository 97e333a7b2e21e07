from __future__ import annotations

from typing import Mapping, TypeVar

from fleet_tracker.domain.listing import ListRequest, ListResult, ResourceSchema
from fleet_tracker.entrypoints.http.dtos.listing import ListQueryDTO, PageMetaDTO

ResponseDTO = TypeVar("ResponseDTO", bound=PageMetaDTO)


class ListingMapper:
    """Maps between REST DTOs and the listing engine's domain types."""

    @staticmethod
    def to_domain_request(
        dto: ListQueryDTO,
        filters: Mapping[str, str | None] | None = None,
    ) -> ListRequest:
        """
        Builds a domain ListRequest from query parameters.

        Args:
            dto: Pagination and sort parameters
            filters: Resource-specific filter values (query or path parameters)

        Returns:
            ListRequest: Untrusted request for the listing engine to resolve
        """
        return ListRequest(
            page=dto.page,
            limit=dto.limit,
            sort_field=dto.sort_field,
            sort_order=dto.sort_order,
            filters=dict(filters or {}),
        )

    @staticmethod
    def to_response(
        result: ListResult,
        schema: ResourceSchema,
        response_cls: type[ResponseDTO],
    ) -> ResponseDTO:
        """
        Converts a ListResult into the resource's response DTO.

        The rows land under the schema's items key (e.g. "cars",
        "carMaintenanceHistory"), next to the pagination metadata.
        """
        return response_cls.model_validate(
            {
                schema.items_key: result.rows,
                "totalPages": result.total_pages,
                "currentPage": result.current_page,
                "total": result.total_count,
                "limit": result.limit,
                "validLimits": result.valid_limits,
            }
        )
