"""SQLAlchemy implementation of application repository."""

from typing import Any, Optional
from uuid import UUID
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import VendorApplication
from domain.enums import ApplicationStatus, VendorType
from domain.exceptions import UpstreamFailure, ValidationError
from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger
from infrastructure.database.models import ApplicationModel

logger = get_logger(__name__)

# Columns stored as-is on both sides of the mapping
_PLAIN_FIELDS = tuple(
    name for name in VendorApplication.field_names()
    if name not in ("status", "vendor_type")
)


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, application: VendorApplication) -> VendorApplication:
        """Create a new application in the database."""
        model = self._entity_to_model(application)
        try:
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                f"Application code already taken: {application.application_code}",
                extra={"application_code": application.application_code},
            )
            raise ValidationError("Application code already exists") from e
        except SQLAlchemyError as e:
            raise self._upstream("create application", e) from e
        return self._model_to_entity(model)

    async def get_by_id(self, application_id: UUID) -> Optional[VendorApplication]:
        """Retrieve an application by ID."""
        model = await self._get_model(application_id, "load application")

        if model is None:
            return None

        return self._model_to_entity(model)

    async def get_by_code_and_email(
        self,
        application_code: str,
        email: str,
    ) -> Optional[VendorApplication]:
        """Retrieve an application by code, matching the email case-insensitively."""
        stmt = select(ApplicationModel).where(
            ApplicationModel.application_code == application_code,
            func.lower(ApplicationModel.primary_contact_email) == email.strip().lower(),
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._upstream("load application", e) from e

        if model is None:
            return None

        return self._model_to_entity(model)

    async def list_all(self) -> list[VendorApplication]:
        """Retrieve all applications, newest first."""
        stmt = select(ApplicationModel).order_by(ApplicationModel.created_date.desc())
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._upstream("load applications", e) from e

        return [self._model_to_entity(model) for model in models]

    async def update(
        self,
        application_id: UUID,
        fields: dict[str, Any],
    ) -> Optional[VendorApplication]:
        """Overwrite the given fields of an application."""
        model = await self._get_model(application_id, "update application")

        if model is None:
            return None

        self._update_model_from_fields(model, fields)
        try:
            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            raise self._upstream("update application", e) from e

        return self._model_to_entity(model)

    async def delete(self, application_id: UUID) -> bool:
        """Delete an application."""
        model = await self._get_model(application_id, "delete application")

        if model is None:
            return False

        try:
            await self.session.delete(model)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._upstream("delete application", e) from e
        return True

    async def _get_model(self, application_id: UUID, operation: str) -> Optional[ApplicationModel]:
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        try:
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._upstream(operation, e) from e

    def _upstream(self, operation: str, error: Exception) -> UpstreamFailure:
        """Log a database error and wrap it in a caller-safe failure."""
        logger.error(f"Database error during {operation}: {error}", exc_info=True)
        return UpstreamFailure(f"Failed to {operation}")

    def _entity_to_model(self, entity: VendorApplication) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        model = ApplicationModel(
            vendor_type=entity.vendor_type.value,
            status=entity.status.storage_value,
        )
        for name in _PLAIN_FIELDS:
            setattr(model, name, getattr(entity, name))
        return model

    def _update_model_from_fields(self, model: ApplicationModel, fields: dict[str, Any]) -> None:
        """Update ORM model from a field mapping."""
        for name, value in fields.items():
            if name in ("id", "application_code", "created_date", "vendor_type"):
                continue
            if name == "status":
                value = ApplicationStatus(value).storage_value
            setattr(model, name, value)

    def _model_to_entity(self, model: ApplicationModel) -> VendorApplication:
        """Convert ORM model to domain entity."""
        values = {name: getattr(model, name) for name in _PLAIN_FIELDS}
        return VendorApplication(
            vendor_type=VendorType(model.vendor_type),
            status=ApplicationStatus.from_storage(model.status),
            **values,
        )
