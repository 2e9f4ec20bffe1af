"""Construction service routes.

Listing and reading services is public; changes require an admin token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from api.routes.auth import require_admin
from core.dependencies import ServiceManagerDep
from models.service import ServiceModel
from schemas.common import MessageResponse
from schemas.service import (
    ServiceCreateRequest,
    ServiceInfo,
    ServiceListResponse,
    ServiceResponse,
    ServiceUpdateRequest,
)

router = APIRouter(prefix="/api/services", tags=["Services"])


def _service_to_info(service: ServiceModel) -> ServiceInfo:
    return ServiceInfo(
        id=service.id,
        title=service.title,
        description=service.description,
        icon=service.icon,
        created_at=service.created_at,
        updated_at=service.updated_at,
    )


@router.get("", response_model=ServiceListResponse, summary="List services")
def list_services(service_manager: ServiceManagerDep) -> ServiceListResponse:
    services = service_manager.list_services()
    return ServiceListResponse(
        count=len(services), data=[_service_to_info(s) for s in services]
    )


@router.get("/{service_id}", response_model=ServiceResponse, summary="Get a service")
def get_service(service_id: int, service_manager: ServiceManagerDep) -> ServiceResponse:
    return ServiceResponse(data=_service_to_info(service_manager.get_service(service_id)))


@router.post(
    "",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a service",
)
def create_service(
    req: ServiceCreateRequest,
    service_manager: ServiceManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> ServiceResponse:
    service = service_manager.create_service(
        title=req.title, description=req.description, icon=req.icon
    )
    return ServiceResponse(
        message="Service created successfully", data=_service_to_info(service)
    )


@router.put("/{service_id}", response_model=ServiceResponse, summary="Update a service")
def update_service(
    service_id: int,
    req: ServiceUpdateRequest,
    service_manager: ServiceManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> ServiceResponse:
    service = service_manager.update_service(
        service_id, title=req.title, description=req.description, icon=req.icon
    )
    return ServiceResponse(
        message="Service updated successfully", data=_service_to_info(service)
    )


@router.delete("/{service_id}", response_model=MessageResponse, summary="Delete a service")
def delete_service(
    service_id: int,
    service_manager: ServiceManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> MessageResponse:
    service_manager.delete_service(service_id)
    return MessageResponse(message="Service deleted successfully")
