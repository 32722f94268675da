from fastapi import APIRouter

from app.api.deps import get_engine, get_storage
from app.api.endpoints.interview import interview_router

api_router = APIRouter()

api_router.include_router(interview_router, prefix="/interview", tags=["interview"])


@api_router.get("/health", tags=["health"])
async def health():
    return {
        "status": "ok",
        "provider": get_engine().provider.name,
        "active_sessions": len(get_storage().session_ids()),
    }
