"""Company information routes."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.routes.auth import require_admin
from core.dependencies import CompanyInfoManagerDep
from models.company_info import CompanyInfoModel
from schemas.company_info import CompanyInfo, CompanyInfoResponse, CompanyInfoUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/company", tags=["Company"])


def _company_to_info(company: CompanyInfoModel) -> CompanyInfo:
    return CompanyInfo(
        id=company.id,
        company_name=company.company_name,
        history=company.history,
        mission=company.mission,
        team_info=company.team_info,
        address=company.address,
        phone=company.phone,
        email=company.email,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


@router.get("", response_model=CompanyInfoResponse, summary="Get company information")
def get_company_info(company_manager: CompanyInfoManagerDep) -> CompanyInfoResponse:
    return CompanyInfoResponse(data=_company_to_info(company_manager.get_company_info()))


@router.put("", response_model=CompanyInfoResponse, summary="Update company information")
def update_company_info(
    req: CompanyInfoUpdateRequest,
    company_manager: CompanyInfoManagerDep,
    claims: Dict[str, Any] = Depends(require_admin),
) -> CompanyInfoResponse:
    # Only fields present in the request are applied
    company = company_manager.update_company_info(**req.model_dump(exclude_unset=True))
    logger.info("Company information updated by %s", claims.get("username"))
    return CompanyInfoResponse(
        message="Company information updated successfully",
        data=_company_to_info(company),
    )
