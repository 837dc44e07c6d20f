"""API routes for account registration and login."""

from fastapi import APIRouter, Depends, status

from jobboard.dependencies import get_account_service
from jobboard.schemas.account import AccountCredentials, AccountResponse, LoginResponse
from jobboard.services.account_service import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/usuarios",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    credentials: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Register a new account."""
    return await service.register(credentials)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Check name, code, email and password against the stored account."""
    account = await service.login(credentials)
    return LoginResponse(account=account)
