from fastapi import APIRouter, Depends, HTTPException, status

from mdx_include.api.dependencies import get_workspace
from mdx_include.api.schemas import (
    CompletionRequest,
    CompletionResponse,
    DocumentRequest,
    LinksResponse,
    LintResponse,
    ReferencesResponse,
)
from mdx_include.core.workspace import Workspace, load_document
from mdx_include.models import Document, Position

router = APIRouter(tags=["documents"])


def _open(body: DocumentRequest) -> Document:
    try:
        return load_document(body.path, body.text)
    except FileNotFoundError:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Document not found: {body.path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Cannot read {body.path}: {exc}") from None


@router.post("/lint", response_model=LintResponse)
async def lint(body: DocumentRequest, workspace: Workspace = Depends(get_workspace)) -> LintResponse:
    document = _open(body)
    return LintResponse(path=document.path, diagnostics=workspace.lint(document))


@router.post("/references", response_model=ReferencesResponse)
async def references(body: DocumentRequest, workspace: Workspace = Depends(get_workspace)) -> ReferencesResponse:
    document = _open(body)
    return ReferencesResponse(path=document.path, references=workspace.resolve(document))


@router.post("/links", response_model=LinksResponse)
async def links(body: DocumentRequest, workspace: Workspace = Depends(get_workspace)) -> LinksResponse:
    document = _open(body)
    return LinksResponse(path=document.path, links=workspace.links(document))


@router.post("/complete", response_model=CompletionResponse)
async def complete(body: CompletionRequest, workspace: Workspace = Depends(get_workspace)) -> CompletionResponse:
    document = _open(body)
    position = Position(line=body.line, character=body.character)
    return CompletionResponse(candidates=await workspace.complete(document, position))
