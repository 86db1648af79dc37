"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from api.dependencies import get_mailer
from adapter.mongodb.connection import get_mongodb_client
from port.mailer import MailerPort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(mailer: MailerPort = Depends(get_mailer)):
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    overall_healthy = True

    try:
        mongo_client = get_mongodb_client()
        if mongo_client:
            mongo_client.admin.command('ping')
            health_status["services"]["mongodb"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["mongodb"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
            overall_healthy = False
    except PyMongoError as e:
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }
        overall_healthy = False

    # Configuration only, no SMTP login per probe
    if mailer.is_configured():
        health_status["services"]["mail"] = {"status": "healthy", "message": "Credentials configured"}
    else:
        health_status["services"]["mail"] = {"status": "unhealthy", "message": "EMAIL_USER/EMAIL_PASS not set"}
        overall_healthy = False

    if not overall_healthy:
        health_status["status"] = "unhealthy"
        logger.warning("Health check failed", extra={"services": health_status["services"]})
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status)

    return health_status
