from fastapi import APIRouter, Depends
from services.storage_svc import Storage, STORAGE_BACKEND, get_storage
from services.ai_client import AIProvider, get_ai_provider

router = APIRouter()


@router.get("/live")
def live():
    return {"status": "ok"}


@router.get("/ready")
def ready(
    storage: Storage = Depends(get_storage),
    provider: AIProvider = Depends(get_ai_provider),
):
    storage_ok = storage.ping()
    return {
        "status": "ok" if storage_ok else "degraded",
        "storage": {"backend": STORAGE_BACKEND, "reachable": storage_ok},
        "ai_provider": provider.name,
    }
