from fastapi import APIRouter

router = APIRouter()


@router.get(
    "/health",
    summary="Compliance API health",
    description="Liveness check for the resume compliance API; runs no compliance checks.",
)
async def compliance_health():
    return {"status": "healthy"}
