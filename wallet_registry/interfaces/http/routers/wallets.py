"""Wallet registration, lookup and peer-to-peer transfers."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends

from wallet_registry.interfaces.http.deps import get_wallet_service
from wallet_registry.modules.wallets import WalletService
from wallet_registry.schemas import (
    ErrorResponse,
    RegisterRequest,
    SendRequest,
    SendResponse,
    TransactionListResponse,
    TransactionResponse,
    WalletDetail,
    WalletListResponse,
    WalletResponse,
    WalletSummary,
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.post("/register", response_model=WalletResponse, summary="Register a new wallet")
async def register_wallet(
    payload: Optional[RegisterRequest] = Body(default=None),
    service: WalletService = Depends(get_wallet_service),
) -> WalletResponse:
    name = payload.label if payload is not None else None
    wallet = await service.register(name)
    return WalletResponse(wallet=WalletDetail.from_snapshot(wallet))


@router.get("/wallets", response_model=WalletListResponse, summary="List registered wallets")
async def list_wallets(service: WalletService = Depends(get_wallet_service)) -> WalletListResponse:
    wallets = await service.list_wallets()
    return WalletListResponse(
        total=len(wallets),
        wallets=[WalletSummary(address=wallet.address, name=wallet.name) for wallet in wallets],
    )


@router.get(
    "/wallet/{address}",
    response_model=WalletResponse,
    responses=NOT_FOUND,
    summary="Get wallet balances and history",
)
async def get_wallet(address: str, service: WalletService = Depends(get_wallet_service)) -> WalletResponse:
    wallet = await service.get_wallet(address)
    return WalletResponse(wallet=WalletDetail.from_snapshot(wallet))


@router.get(
    "/wallet/{address}/transactions",
    response_model=TransactionListResponse,
    responses=NOT_FOUND,
    summary="Get a wallet's transaction log",
)
async def list_transactions(
    address: str,
    service: WalletService = Depends(get_wallet_service),
) -> TransactionListResponse:
    records = await service.list_transactions(address)
    return TransactionListResponse(
        address=address,
        transactions=[TransactionResponse.from_record(record) for record in records],
    )


@router.post(
    "/send",
    response_model=SendResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Transfer an asset between wallets",
)
async def send(
    payload: Optional[SendRequest] = Body(default=None),
    service: WalletService = Depends(get_wallet_service),
) -> SendResponse:
    payload = payload or SendRequest()
    result = await service.send(payload.from_address, payload.to_address, payload.asset, payload.amount)
    return SendResponse.from_result(result)
