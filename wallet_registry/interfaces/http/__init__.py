from fastapi import APIRouter

from wallet_registry.interfaces.http.routers import admin, system, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(system.router, tags=["system"])
    router.include_router(wallets.router, tags=["wallets"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    return router


__all__ = [
    "create_api_router",
]
