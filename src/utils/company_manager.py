"""Company information management.

There is at most one company information row. Updating when none exists
creates it.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from models.company_info import CompanyInfoModel

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("company_name", "history", "mission")
OPTIONAL_FIELDS = ("team_info", "address", "phone", "email")


class CompanyInfoNotFoundError(NotFoundError):
    """Exception raised when no company information has been saved yet."""

    default_message = "Company information not found"


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip() or None


class CompanyInfoManager:
    """Reads and updates the company information row."""

    def __init__(self, db: Session):
        self.db = db

    def find_company_info(self) -> Optional[CompanyInfoModel]:
        return self.db.query(CompanyInfoModel).order_by(CompanyInfoModel.id.asc()).first()

    def get_company_info(self) -> CompanyInfoModel:
        company = self.find_company_info()
        if company is None:
            raise CompanyInfoNotFoundError()
        return company

    def update_company_info(self, **fields) -> CompanyInfoModel:
        """Update the company information, creating it on first use.

        Args:
            **fields: Only the fields supplied by the caller. Blank required
                fields keep their current value; a supplied optional field
                replaces the current one, and ``None`` clears it.

        Raises:
            ValidationError: If creating the row without name, history or mission.
        """
        company = self.find_company_info()
        if company is None:
            company = CompanyInfoModel()
            self.db.add(company)

        for key in REQUIRED_FIELDS:
            value = _clean(fields.get(key))
            if value:
                setattr(company, key, value)
        for key in OPTIONAL_FIELDS:
            if key in fields:
                setattr(company, key, _clean(fields[key]))

        missing = [key for key in REQUIRED_FIELDS if not getattr(company, key)]
        if missing:
            self.db.rollback()
            raise ValidationError(
                "Invalid company information data", missing=missing
            )

        self.db.commit()
        self.db.refresh(company)
        logger.info("Company information updated")
        return company
