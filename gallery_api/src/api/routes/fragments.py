from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from src.fragments import render_comment_skeleton_list

router = APIRouter(prefix="/fragments", tags=["Fragments"])


# PUBLIC_INTERFACE
@router.get(
    "/comments/skeleton",
    response_class=HTMLResponse,
    summary="Comment list loading skeleton",
    description="Static placeholder markup shown while a comment thread loads.",
)
def comment_skeleton() -> HTMLResponse:
    return HTMLResponse(
        content=render_comment_skeleton_list(),
        headers={"Cache-Control": "public, max-age=3600"},
    )
