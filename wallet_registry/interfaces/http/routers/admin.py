"""Administrative endpoints. Unauthenticated; intended for demos only."""
from typing import Optional

from fastapi import APIRouter, Body, Depends

from wallet_registry.interfaces.http.deps import get_wallet_service
from wallet_registry.modules.wallets import WalletService
from wallet_registry.schemas import (
    AdminCreditRequest,
    AdminCreditResponse,
    ErrorResponse,
    WalletBalancesResponse,
)

router = APIRouter()


@router.post(
    "/credit",
    response_model=AdminCreditResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
    summary="Credit an asset balance",
)
async def admin_credit(
    payload: Optional[AdminCreditRequest] = Body(default=None),
    service: WalletService = Depends(get_wallet_service),
) -> AdminCreditResponse:
    payload = payload or AdminCreditRequest()
    wallet = await service.admin_credit(payload.address, payload.asset, payload.amount)
    return AdminCreditResponse(wallet=WalletBalancesResponse.from_domain(wallet))
