"""Database models."""

from jobboard.models.account import Account
from jobboard.models.application import Application
from jobboard.models.vacancy import Vacancy

__all__ = [
    "Account",
    "Application",
    "Vacancy",
]
