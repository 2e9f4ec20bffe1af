"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes.
Configuration values such as the signing secret and the upload directory are
passed into the services here, so tests can swap them through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from config import JWT_ALGORITHM, JWT_EXPIRES_IN, JWT_SECRET, MAX_FILE_SIZE, UPLOAD_DIR
from core.database import get_db
from core.security import TokenService
from utils import inquiry_manager
from utils import media_manager
from utils import company_manager
from utils import project_manager
from utils import service_manager
from utils import user_manager
from utils.upload_validator import MediaStorage, UploadValidator


def get_token_service() -> TokenService:
    """Get a TokenService configured with the server signing secret.

    Raises:
        ConfigurationError: If JWT_SECRET is not set.
    """
    return TokenService(
        secret=JWT_SECRET, expires_in=JWT_EXPIRES_IN, algorithm=JWT_ALGORITHM
    )


def get_upload_validator() -> UploadValidator:
    return UploadValidator(max_size=MAX_FILE_SIZE)


def get_media_storage() -> MediaStorage:
    return MediaStorage(upload_dir=UPLOAD_DIR)


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.AdminUserManager:
    """Get AdminUserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        AdminUserManager instance.
    """
    return user_manager.AdminUserManager(db)


def get_media_manager(
    db: Session = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage),
) -> media_manager.MediaManager:
    """Get MediaManager instance with request-scoped DB session.

    Args:
        db: Database session.
        storage: Storage for the uploaded files.

    Returns:
        MediaManager instance.
    """
    return media_manager.MediaManager(db, storage)


def get_project_manager(db: Session = Depends(get_db)) -> project_manager.ProjectManager:
    """Get ProjectManager instance with request-scoped DB session."""
    return project_manager.ProjectManager(db)


def get_inquiry_manager(db: Session = Depends(get_db)) -> inquiry_manager.InquiryManager:
    """Get InquiryManager instance with request-scoped DB session."""
    return inquiry_manager.InquiryManager(db)


def get_service_manager(db: Session = Depends(get_db)) -> service_manager.ServiceManager:
    """Get ServiceManager instance with request-scoped DB session."""
    return service_manager.ServiceManager(db)


def get_company_manager(
    db: Session = Depends(get_db),
) -> company_manager.CompanyInfoManager:
    """Get CompanyInfoManager instance with request-scoped DB session."""
    return company_manager.CompanyInfoManager(db)


# Type aliases for dependency injection
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
UploadValidatorDep = Annotated[UploadValidator, Depends(get_upload_validator)]
MediaStorageDep = Annotated[MediaStorage, Depends(get_media_storage)]
UserManagerDep = Annotated[
    user_manager.AdminUserManager, Depends(get_user_manager)
]
MediaManagerDep = Annotated[
    media_manager.MediaManager, Depends(get_media_manager)
]
ProjectManagerDep = Annotated[
    project_manager.ProjectManager, Depends(get_project_manager)
]
InquiryManagerDep = Annotated[
    inquiry_manager.InquiryManager, Depends(get_inquiry_manager)
]
ServiceManagerDep = Annotated[
    service_manager.ServiceManager, Depends(get_service_manager)
]
CompanyInfoManagerDep = Annotated[
    company_manager.CompanyInfoManager, Depends(get_company_manager)
]
