"""Contact form inquiry routes.

Visitors submit inquiries without authentication; reading and managing them
requires an admin token.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from api.routes.auth import require_admin
from core.dependencies import InquiryManagerDep
from models.inquiry import InquiryModel
from schemas.common import MessageResponse
from schemas.inquiry import (
    InquiryCreateRequest,
    InquiryInfo,
    InquiryListResponse,
    InquiryResponse,
    InquiryStatusUpdateRequest,
    UnreadCountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inquiries", tags=["Inquiries"])


def _inquiry_to_info(inquiry: InquiryModel) -> InquiryInfo:
    return InquiryInfo(
        id=inquiry.id,
        name=inquiry.name,
        email=inquiry.email,
        phone=inquiry.phone,
        message=inquiry.message,
        status=inquiry.status,
        created_at=inquiry.created_at,
        updated_at=inquiry.updated_at,
    )


@router.post(
    "",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a contact inquiry",
)
def create_inquiry(req: InquiryCreateRequest, inquiry_manager: InquiryManagerDep) -> InquiryResponse:
    inquiry = inquiry_manager.create_inquiry(
        name=req.name, email=str(req.email), phone=req.phone, message=req.message
    )
    return InquiryResponse(
        message="Inquiry submitted successfully. We will contact you soon!",
        data=_inquiry_to_info(inquiry),
    )


@router.get("", response_model=InquiryListResponse, summary="List inquiries")
def list_inquiries(
    inquiry_manager: InquiryManagerDep,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    claims: Dict[str, Any] = Depends(require_admin),
) -> InquiryListResponse:
    inquiries = inquiry_manager.list_inquiries(status=status_filter)
    return InquiryListResponse(
        count=len(inquiries), data=[_inquiry_to_info(i) for i in inquiries]
    )


# Declared before /{inquiry_id} so "unread" is not parsed as an id
@router.get("/unread/count", response_model=UnreadCountResponse, summary="Count unread inquiries")
def unread_count(
    inquiry_manager: InquiryManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> UnreadCountResponse:
    return UnreadCountResponse(count=inquiry_manager.count_unread())


@router.get("/{inquiry_id}", response_model=InquiryResponse, summary="Get an inquiry")
def get_inquiry(
    inquiry_id: int,
    inquiry_manager: InquiryManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> InquiryResponse:
    return InquiryResponse(data=_inquiry_to_info(inquiry_manager.get_inquiry(inquiry_id)))


@router.put("/{inquiry_id}/status", response_model=InquiryResponse, summary="Update inquiry status")
def update_inquiry_status(
    inquiry_id: int,
    req: InquiryStatusUpdateRequest,
    inquiry_manager: InquiryManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> InquiryResponse:
    inquiry = inquiry_manager.update_status(inquiry_id, req.status)
    return InquiryResponse(
        message="Inquiry status updated successfully", data=_inquiry_to_info(inquiry)
    )


@router.delete("/{inquiry_id}", response_model=MessageResponse, summary="Delete an inquiry")
def delete_inquiry(
    inquiry_id: int,
    inquiry_manager: InquiryManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> MessageResponse:
    inquiry_manager.delete_inquiry(inquiry_id)
    logger.info("Inquiry %s deleted by %s", inquiry_id, claims.get("username"))
    return MessageResponse(message="Inquiry deleted successfully")
