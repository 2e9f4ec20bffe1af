"""Database models.

Importing this package registers every table with ``Base.metadata``.
"""

from .base import Base
from .user import AdminUserModel
from .media import MediaModel
from .project import ProjectImageModel, ProjectModel
from .inquiry import InquiryModel
from .service import ServiceModel
from .company_info import CompanyInfoModel

__all__ = [
    "Base",
    "AdminUserModel",
    "MediaModel",
    "ProjectModel",
    "ProjectImageModel",
    "InquiryModel",
    "ServiceModel",
    "CompanyInfoModel",
]
