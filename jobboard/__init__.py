"""jobboard - Job vacancies, accounts and resume submissions."""

__version__ = "1.0.0"
