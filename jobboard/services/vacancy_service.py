"""CRUD operations over job vacancies."""

import logging

from fastapi import status
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import NotFoundError, StorageError
from jobboard.core.storage import Database
from jobboard.models.vacancy import Vacancy
from jobboard.schemas.vacancy import VacancyRequest

logger = logging.getLogger(__name__)


class VacancyService:
    """Create, read and replace job postings. There is no delete."""

    def __init__(self, db: Database):
        self.db = db

    async def create(self, request: VacancyRequest) -> int:
        """Insert a vacancy and return its id.

        Missing required fields are left for the store to reject.
        """
        vacancy = Vacancy(
            title=request.title,
            description=request.description,
            location=request.location,
            salary=request.salary,
        )
        try:
            async with self.db.session() as session:
                session.add(vacancy)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error creating vacancy: {e}")
            raise StorageError(
                "Error al crear la vacante.",
                str(e),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(f"Created vacancy {vacancy.id}: {vacancy.title}")
        return vacancy.id

    async def get(self, vacancy_id: int) -> Vacancy:
        try:
            async with self.db.session() as session:
                vacancy = await session.get(Vacancy, vacancy_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching vacancy {vacancy_id}: {e}")
            raise StorageError("Error al obtener la vacante.", str(e))

        if vacancy is None:
            raise NotFoundError("Vacante no encontrada.")
        return vacancy

    async def list_all(self) -> list[Vacancy]:
        try:
            async with self.db.session() as session:
                result = await session.execute(select(Vacancy).order_by(Vacancy.id))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Database error listing vacancies: {e}")
            raise StorageError("Error al obtener las vacantes.", str(e))

    async def update(self, vacancy_id: int, request: VacancyRequest) -> int:
        """Replace every field of a vacancy.

        Returns the number of rows touched; an unknown id touches none and is
        not an error.
        """
        statement = (
            update(Vacancy)
            .where(Vacancy.id == vacancy_id)
            .values(
                {
                    Vacancy.title: request.title,
                    Vacancy.description: request.description,
                    Vacancy.location: request.location,
                    Vacancy.salary: request.salary,
                }
            )
        )
        try:
            async with self.db.session() as session:
                result = await session.execute(statement)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error updating vacancy {vacancy_id}: {e}")
            raise StorageError(
                "Error al actualizar la vacante.",
                str(e),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        if result.rowcount == 0:
            logger.info(f"Update of vacancy {vacancy_id} matched no rows")
        else:
            logger.info(f"Updated vacancy {vacancy_id}")
        return result.rowcount


def create_vacancy_service(db: Database) -> VacancyService:
    """Factory function to create VacancyService with dependencies."""
    return VacancyService(db)
