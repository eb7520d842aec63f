"""SQLAlchemy implementation of application repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Application
from domain.enums import ApplicationPriority, ApplicationStatus, RecordState
from domain.exceptions import ConcurrencyConflictError, NotFoundError
from domain.repositories import IApplicationRepository, ApplicationCriteria
from domain.value_objects import ExpectedSalary
from infrastructure.config import get_logger
from infrastructure.database.models import ApplicationModel

OPEN_APPLICATION_CONSTRAINT = "uq_applications_open_per_offer"


def _is_open_application_violation(error: IntegrityError) -> bool:
    # PostgreSQL reports the constraint name, SQLite the column list
    message = str(error.orig)
    return OPEN_APPLICATION_CONSTRAINT in message or "status_class" in message


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.logger = get_logger(self.__class__.__name__)
    
    async def create(self, application: Application) -> Application:
        """
        Insert a new application.
        
        The insert is the last write of an admission, so a uniqueness
        violation rolls the whole unit of work back before it is reported.
        """
        model = ApplicationModel(id=application.id)
        self._update_model_from_entity(model, application)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            if _is_open_application_violation(e):
                self.logger.warning(
                    f"Open application already stored for professional "
                    f"{application.professional_id} and offer {application.job_offer_id}"
                )
                raise ConcurrencyConflictError() from e
            raise
        return self._model_to_entity(model)
    
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Retrieve an application by ID."""
        model = await self.session.get(ApplicationModel, application_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, application: Application) -> Application:
        """Update an existing application."""
        model = await self.session.get(ApplicationModel, application.id)
        
        if model is None:
            raise NotFoundError("Application", application.id)
        
        self._update_model_from_entity(model, application)
        await self.session.flush()
        
        return self._model_to_entity(model)
    
    async def count(self, criteria: ApplicationCriteria) -> int:
        """Count applications matching the criteria."""
        stmt = (
            select(func.count())
            .select_from(ApplicationModel)
            .where(*self._conditions(criteria))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
    
    async def find(self, criteria: ApplicationCriteria) -> list[Application]:
        """List applications matching the criteria, newest first."""
        stmt = (
            select(ApplicationModel)
            .where(*self._conditions(criteria))
            .order_by(ApplicationModel.applied_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    def _conditions(self, criteria: ApplicationCriteria) -> list:
        """Translate criteria into WHERE clauses."""
        conditions = []
        if not criteria.include_deleted:
            conditions.append(ApplicationModel.record_state == RecordState.ACTIVE.value)
        if criteria.professional_id is not None:
            conditions.append(ApplicationModel.professional_id == criteria.professional_id)
        if criteria.job_offer_id is not None:
            conditions.append(ApplicationModel.job_offer_id == criteria.job_offer_id)
        if criteria.statuses is not None:
            conditions.append(
                ApplicationModel.status.in_([status.value for status in criteria.statuses])
            )
        if criteria.applied_from is not None:
            conditions.append(ApplicationModel.applied_at >= criteria.applied_from)
        if criteria.applied_before is not None:
            conditions.append(ApplicationModel.applied_at < criteria.applied_before)
        if criteria.reviewed is True:
            conditions.append(ApplicationModel.reviewed_at.is_not(None))
        elif criteria.reviewed is False:
            conditions.append(ApplicationModel.reviewed_at.is_(None))
        return conditions
    
    def _update_model_from_entity(self, model: ApplicationModel, entity: Application) -> None:
        """Update ORM model from domain entity."""
        model.professional_id = entity.professional_id
        model.job_offer_id = entity.job_offer_id
        model.status = entity.status.value
        model.record_state = entity.record_state.value
        model.status_class = entity.status_class
        model.priority = entity.priority.value
        model.cover_letter = entity.cover_letter
        model.motivation = entity.motivation
        model.availability_date = entity.availability_date
        model.additional_skills = list(entity.additional_skills)
        model.applied_at = entity.applied_at
        model.reviewed_at = entity.reviewed_at
        model.reviewed_by = entity.reviewed_by
        model.notes = entity.notes
        model.updated_at = entity.updated_at
        
        # Expected salary
        if entity.expected_salary:
            model.expected_salary_amount = entity.expected_salary.amount
            model.expected_salary_currency = entity.expected_salary.currency
            model.expected_salary_negotiable = entity.expected_salary.is_negotiable
        else:
            model.expected_salary_amount = None
            model.expected_salary_currency = None
            model.expected_salary_negotiable = None
    
    def _model_to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity."""
        expected_salary = None
        if model.expected_salary_amount is not None:
            expected_salary = ExpectedSalary(
                amount=model.expected_salary_amount,
                currency=model.expected_salary_currency or "CRC",
                is_negotiable=bool(model.expected_salary_negotiable),
            )
        
        return Application(
            id=model.id,
            professional_id=model.professional_id,
            job_offer_id=model.job_offer_id,
            status=ApplicationStatus(model.status),
            record_state=RecordState(model.record_state),
            priority=ApplicationPriority(model.priority),
            cover_letter=model.cover_letter,
            motivation=model.motivation,
            expected_salary=expected_salary,
            availability_date=model.availability_date,
            additional_skills=list(model.additional_skills or []),
            applied_at=model.applied_at,
            reviewed_at=model.reviewed_at,
            reviewed_by=model.reviewed_by,
            notes=model.notes,
            updated_at=model.updated_at,
        )
