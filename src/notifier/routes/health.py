"""
Health Check Routes

Endpoints for service health monitoring.
"""
from fastapi import APIRouter
from datetime import datetime

from ..services.notifier_service import get_notifier_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
@router.get("/")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "notifier",
        "timestamp": datetime.utcnow().isoformat()
    }


@router.get("/ready")
async def readiness_check():
    """
    Readiness check - ready once at least one transport is configured.
    Used by Kubernetes/orchestrators for readiness probes.
    """
    transports = get_notifier_service().dispatcher.transports
    return {
        "ready": bool(transports),
        "transports": len(transports),
        "timestamp": datetime.utcnow().isoformat()
    }


@router.get("/live")
async def liveness_check():
    """
    Liveness check - indicates if service is running.
    Used by Kubernetes/orchestrators for liveness probes.
    """
    return {
        "alive": True,
        "timestamp": datetime.utcnow().isoformat()
    }
