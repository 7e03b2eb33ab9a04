# /privy_lookup/api/endpoints/lookup_user.py
"""
Email lookup API endpoint - find the wallets of a Privy user by email.
"""
import logging
import httpx
from fastapi import APIRouter, Depends, Request
from privy_lookup.config import PrivySettings, get_privy_settings
from privy_lookup.errors import (
    ConfigurationError, InvalidInput, LookupFailure, MethodNotAllowed, UnexpectedError
)
from privy_lookup.models.lookup_models import ErrorResponse, LookupRequest, LookupResult
from privy_lookup.services.privy_client import PrivyClient, get_http_client
from privy_lookup.utils.helpers import classify_wallet_addresses, is_valid_email

logger = logging.getLogger(__name__)
router = APIRouter()


@router.api_route(
    "/lookup-user",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    summary="Get wallets for an email address",
    description="Given an email, looks up the Privy user and returns their Ethereum and Solana wallet addresses.",
    response_model=LookupResult,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LookupRequest.model_json_schema()}},
        }
    },
    responses={
        200: {"description": "Successfully retrieved wallet addresses", "model": LookupResult},
        400: {"description": "Missing or malformed email", "model": ErrorResponse},
        404: {"description": "No Privy user for the provided email", "model": ErrorResponse},
        405: {"description": "Method not allowed", "model": ErrorResponse},
        500: {"description": "Internal Server Error", "model": ErrorResponse}
    }
)
async def lookup_user(
    request: Request,
    settings: PrivySettings = Depends(get_privy_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> LookupResult:
    """
    Look up a Privy user by email and bucket their wallets by chain.

    - Only POST is accepted
    - Body: {"email": "..."}
    - Ethereum and Solana addresses keep the order Privy lists them in
    """
    if request.method != "POST":
        raise MethodNotAllowed()

    try:
        body = await request.json()
    except ValueError:
        body = None

    email = body.get("email") if isinstance(body, dict) else None
    if not email or not isinstance(email, str):
        raise InvalidInput("Email is required")

    if not is_valid_email(email):
        raise InvalidInput("Invalid email format")

    if not settings.has_credentials:
        logger.error(f"Missing Privy credentials: {', '.join(settings.missing_credentials)}")
        raise ConfigurationError()

    logger.info(f"Looking up Privy user for {email}")

    try:
        user = await PrivyClient(settings, client).find_user_by_email(email)
        ethereum_addresses, solana_addresses = classify_wallet_addresses(user.linked_accounts)
    except LookupFailure:
        raise
    except Exception as e:
        logger.exception(f"Error looking up user {email}: {str(e)}")
        raise UnexpectedError(str(e))

    logger.info(
        f"Found {len(ethereum_addresses)} ethereum and {len(solana_addresses)} solana wallet(s) for {email}"
    )

    return LookupResult(
        success=True,
        email=email,
        userId=user.id,
        ethereumAddresses=ethereum_addresses,
        solanaAddresses=solana_addresses,
    )
