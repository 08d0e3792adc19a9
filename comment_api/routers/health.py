from fastapi import APIRouter, Depends, HTTPException

from comment_api import __version__
from comment_api.dependencies import get_comment_service
from comment_api.errors import StoreUnavailableError
from comment_api.schemas import HealthResponse, MessageResponse
from comment_api.services.comment_service import CommentService

router = APIRouter(tags=["health"])

@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version=__version__)

@router.get("/alive", response_model=MessageResponse)
async def alive():
    return MessageResponse(message="I am Alive!")

@router.get("/ready", response_model=MessageResponse)
async def ready(service: CommentService = Depends(get_comment_service)):
    try:
        await service.ready_check()
    except StoreUnavailableError:
        raise HTTPException(status_code=503, detail="Comment store is not ready")
    return MessageResponse(message="I am Ready!")
