"""Health check and reference data."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from wallet_registry.modules.wallets import ASSETS
from wallet_registry.schemas import AssetListResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Health check")
async def health() -> str:
    return "Wallet backend running"


@router.get("/assets", response_model=AssetListResponse, summary="List supported asset symbols")
async def list_assets() -> AssetListResponse:
    return AssetListResponse(assets=list(ASSETS))
