import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.database import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)) -> JSONResponse:
    """Report service health, including database connectivity."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        await db.execute(text("SELECT 1"))
    except (sa_exc.SQLAlchemyError, OSError) as e:
        logger.error("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "disconnected", "timestamp": timestamp},
        )
    return JSONResponse(content={"status": "healthy", "database": "connected", "timestamp": timestamp})
