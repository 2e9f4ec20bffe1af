"""Contact form inquiry management utilities."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from models.inquiry import INQUIRY_STATUSES, InquiryModel

logger = logging.getLogger(__name__)


class InquiryNotFoundError(NotFoundError):
    """Exception raised when an inquiry is not found."""

    default_message = "Inquiry not found"


class InquiryManager:
    """Manages inquiries submitted through the public contact form."""

    def __init__(self, db: Session):
        self.db = db

    def create_inquiry(
        self,
        name: str,
        email: str,
        message: str,
        phone: Optional[str] = None,
    ) -> InquiryModel:
        """Store a new inquiry with status "unread"."""
        inquiry = InquiryModel(
            name=name.strip(),
            email=email.strip(),
            phone=(phone or "").strip() or None,
            message=message.strip(),
            status="unread",
        )
        if not inquiry.name or not inquiry.message:
            raise ValidationError("Invalid inquiry data")
        self.db.add(inquiry)
        self.db.commit()
        self.db.refresh(inquiry)
        logger.info("New inquiry %s from %s", inquiry.id, inquiry.email)
        return inquiry

    def list_inquiries(self, status: Optional[str] = None) -> List[InquiryModel]:
        """List inquiries newest first. Unknown status filters are ignored."""
        query = self.db.query(InquiryModel)
        if status in INQUIRY_STATUSES:
            query = query.filter(InquiryModel.status == status)
        return query.order_by(InquiryModel.created_at.desc(), InquiryModel.id.desc()).all()

    def get_inquiry(self, inquiry_id: int) -> InquiryModel:
        inquiry = self.db.query(InquiryModel).filter(InquiryModel.id == inquiry_id).first()
        if inquiry is None:
            raise InquiryNotFoundError()
        return inquiry

    def update_status(self, inquiry_id: int, status: Optional[str]) -> InquiryModel:
        if status not in INQUIRY_STATUSES:
            raise ValidationError(
                "Status must be one of: " + ", ".join(INQUIRY_STATUSES)
            )
        inquiry = self.get_inquiry(inquiry_id)
        inquiry.status = status
        self.db.commit()
        self.db.refresh(inquiry)
        logger.info("Inquiry %s marked %s", inquiry_id, status)
        return inquiry

    def delete_inquiry(self, inquiry_id: int) -> None:
        inquiry = self.get_inquiry(inquiry_id)
        self.db.delete(inquiry)
        self.db.commit()
        logger.info("Deleted inquiry %s", inquiry_id)

    def count_unread(self) -> int:
        return self.db.query(InquiryModel).filter(InquiryModel.status == "unread").count()
