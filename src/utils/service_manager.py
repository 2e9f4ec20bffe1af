"""Construction service management utilities."""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from models.service import ServiceModel

logger = logging.getLogger(__name__)


class ServiceNotFoundError(NotFoundError):
    """Exception raised when a service is not found."""

    default_message = "Service not found"


class ServiceManager:
    """Manages the services listed on the website."""

    def __init__(self, db: Session):
        self.db = db

    def list_services(self) -> List[ServiceModel]:
        return (
            self.db.query(ServiceModel)
            .order_by(ServiceModel.created_at.desc(), ServiceModel.id.desc())
            .all()
        )

    def get_service(self, service_id: int) -> ServiceModel:
        service = self.db.query(ServiceModel).filter(ServiceModel.id == service_id).first()
        if service is None:
            raise ServiceNotFoundError()
        return service

    def create_service(self, title: str, description: str, icon: str) -> ServiceModel:
        service = ServiceModel(
            title=title.strip(), description=description.strip(), icon=icon.strip()
        )
        if not service.title or not service.description or not service.icon:
            raise ValidationError("Invalid service data")
        self.db.add(service)
        self.db.commit()
        self.db.refresh(service)
        logger.info("Created service %s: %s", service.id, service.title)
        return service

    def update_service(self, service_id: int, **fields) -> ServiceModel:
        """Update title, description or icon. Blank values are ignored."""
        service = self.get_service(service_id)
        for key in ("title", "description", "icon"):
            value = (fields.get(key) or "").strip()
            if value:
                setattr(service, key, value)
        self.db.commit()
        self.db.refresh(service)
        logger.info("Updated service %s", service_id)
        return service

    def delete_service(self, service_id: int) -> None:
        service = self.get_service(service_id)
        self.db.delete(service)
        self.db.commit()
        logger.info("Deleted service %s", service_id)
