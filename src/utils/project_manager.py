"""Project portfolio management utilities."""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, selectinload

from core.exceptions import NotFoundError, ValidationError
from models.project import ProjectImageModel, ProjectModel

logger = logging.getLogger(__name__)


class ProjectNotFoundError(NotFoundError):
    """Exception raised when a project is not found."""

    default_message = "Project not found"


class ProjectManager:
    """Manages projects and the images attached to them."""

    def __init__(self, db: Session):
        self.db = db

    def list_projects(self) -> List[ProjectModel]:
        return (
            self.db.query(ProjectModel)
            .options(selectinload(ProjectModel.images))
            .order_by(ProjectModel.completion_date.desc(), ProjectModel.id.desc())
            .all()
        )

    def get_project(self, project_id: int) -> ProjectModel:
        project = (
            self.db.query(ProjectModel)
            .options(selectinload(ProjectModel.images))
            .filter(ProjectModel.id == project_id)
            .first()
        )
        if project is None:
            raise ProjectNotFoundError()
        return project

    def _build_images(self, images: Iterable, title: str) -> List[ProjectImageModel]:
        # Alt text falls back to the project title, thumbnail to the image itself
        return [
            ProjectImageModel(
                src=image.src,
                alt=image.alt or title,
                thumbnail=image.thumbnail or image.src,
            )
            for image in images
        ]

    def create_project(
        self,
        title: str,
        description: str,
        category: str,
        completion_date,
        location: str,
        images: Optional[Iterable] = None,
    ) -> ProjectModel:
        project = ProjectModel(
            title=title,
            description=description,
            category=category,
            completion_date=completion_date,
            location=location,
        )
        project.images = self._build_images(images or [], title)
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        logger.info("Created project %s: %s", project.id, title)
        return project

    def update_project(self, project_id: int, images: Optional[Iterable] = None, **fields) -> ProjectModel:
        """Update project fields; a non-None ``images`` replaces all images.

        Blank values leave the existing field untouched.
        """
        project = self.get_project(project_id)
        for key in ("title", "description", "category", "completion_date", "location"):
            value = fields.get(key)
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            setattr(project, key, value)

        if images is not None:
            # delete-orphan cascade removes the previous rows
            project.images = self._build_images(images, project.title)

        if not project.title or not project.description:
            raise ValidationError("Invalid project data")

        self.db.commit()
        self.db.refresh(project)
        logger.info("Updated project %s", project_id)
        return project

    def delete_project(self, project_id: int) -> None:
        project = self.get_project(project_id)
        self.db.delete(project)
        self.db.commit()
        logger.info("Deleted project %s", project_id)
