"""Account registration and login."""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobboard.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    StorageError,
    ValidationError,
)
from jobboard.core.security import DUMMY_HASH, hash_password, verify_password
from jobboard.core.storage import Database
from jobboard.models.account import Account
from jobboard.schemas.account import AccountCredentials, AccountResponse

logger = logging.getLogger(__name__)


class AccountService:
    """Creates accounts and checks login credentials."""

    def __init__(self, db: Database):
        self.db = db

    async def register(self, credentials: AccountCredentials) -> AccountResponse:
        """Create an account. All four fields are required."""
        if not all(
            [credentials.name, credentials.code, credentials.email, credentials.secret]
        ):
            raise ValidationError("Todos los campos son requeridos.")

        password_hash = await asyncio.to_thread(hash_password, credentials.secret)
        account = Account(
            name=credentials.name,
            code=credentials.code,
            email=credentials.email,
            password_hash=password_hash,
        )

        try:
            async with self.db.session() as session:
                session.add(account)
                await session.commit()
        except IntegrityError as e:
            # The only constraint left after validation is the unique email.
            logger.warning(f"Registration rejected, email in use: {credentials.email}")
            raise DuplicateEmailError(credentials.email, str(e.orig))
        except SQLAlchemyError as e:
            logger.error(f"Database error creating account: {e}")
            raise StorageError("Error al agregar el usuario.", str(e))

        logger.info(f"Created account {account.id} for {account.email}")
        return AccountResponse.model_validate(account)

    async def login(self, credentials: AccountCredentials) -> AccountResponse:
        """Return the account matching name, code, email and password.

        Unknown accounts and wrong passwords fail the same way.
        """
        query = select(Account).where(
            Account.name == credentials.name,
            Account.code == credentials.code,
            Account.email == credentials.email,
        )
        try:
            async with self.db.session() as session:
                result = await session.execute(query)
                account = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error during login: {e}")
            raise StorageError("Error en la consulta.", str(e))

        stored_hash = account.password_hash if account else DUMMY_HASH
        valid = await asyncio.to_thread(
            verify_password, credentials.secret or "", stored_hash
        )
        if account is None or not valid:
            raise InvalidCredentialsError()

        return AccountResponse.model_validate(account)


def create_account_service(db: Database) -> AccountService:
    """Factory function to create AccountService with dependencies."""
    return AccountService(db)
