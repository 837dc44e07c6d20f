"""Pydantic schemas for request/response validation."""

from jobboard.schemas.account import (
    AccountCredentials,
    AccountResponse,
    LoginResponse,
)
from jobboard.schemas.application import (
    ApplicationDetailResponse,
    ApplicationListResponse,
    ApplicationResponse,
)
from jobboard.schemas.common import CreatedResponse, MessageResponse
from jobboard.schemas.vacancy import VacancyRequest, VacancyResponse

__all__ = [
    "AccountCredentials",
    "AccountResponse",
    "ApplicationDetailResponse",
    "ApplicationListResponse",
    "ApplicationResponse",
    "CreatedResponse",
    "LoginResponse",
    "MessageResponse",
    "VacancyRequest",
    "VacancyResponse",
]
