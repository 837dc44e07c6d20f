"""Application services."""

from jobboard.services.account_service import AccountService, create_account_service
from jobboard.services.application_service import (
    ApplicationService,
    create_application_service,
)
from jobboard.services.vacancy_service import VacancyService, create_vacancy_service

__all__ = [
    "AccountService",
    "ApplicationService",
    "VacancyService",
    "create_account_service",
    "create_application_service",
    "create_vacancy_service",
]
