"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from typestub_gateway.interface.dependencies import get_use_case
from typestub_gateway.services.project_stubs import ProjectStubsUseCase

router = APIRouter()


@router.get(
    "/{path:path}",
    response_class=Response,
    responses={
        200: {"content": {"application/typescript": {}}},
        400: {"description": "Path lacks author, repository or branch"},
        404: {"description": "No candidate source file could be fetched"},
        415: {"description": "Source dialect has no stub projector"},
        422: {"description": "Source file does not parse"},
    },
)
async def project_stubs(
    path: str,
    use_case: ProjectStubsUseCase = Depends(get_use_case),
) -> Response:
    """Emit TypeScript interface stubs for the types of a remote source file."""
    document = await use_case.execute(path)
    return Response(
        content=document.text,
        media_type=document.media_type,
        headers={
            "Content-Location": document.source_url,
            "X-Target-Extension": document.target_extension,
        },
    )
