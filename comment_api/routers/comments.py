from fastapi import APIRouter, Depends

from comment_api.dependencies import get_comment_service
from comment_api.schemas import CommentRequest, CommentResponse, MessageResponse
from comment_api.services.comment_service import CommentService

# Domain errors raised below are translated to HTTP responses by
# comment_api.errors.handlers.
router = APIRouter(prefix="/api/v1/comments", tags=["comments"])

@router.get("", response_model=list[CommentResponse])
async def list_comments(service: CommentService = Depends(get_comment_service)):
    return await service.get_comments()

@router.post("", status_code=201, response_model=CommentResponse)
async def post_comment(data: CommentRequest, service: CommentService = Depends(get_comment_service)):
    return await service.post_comment(data.to_comment())

@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: str, service: CommentService = Depends(get_comment_service)):
    return await service.get_comment(comment_id)

@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    data: CommentRequest,
    service: CommentService = Depends(get_comment_service),
):
    return await service.update_comment(comment_id, data.to_comment())

@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(comment_id: str, service: CommentService = Depends(get_comment_service)):
    await service.delete_comment(comment_id)
    return MessageResponse(message="Successfully Deleted")
