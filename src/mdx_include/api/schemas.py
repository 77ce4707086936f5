from __future__ import annotations

from pydantic import BaseModel, Field

from mdx_include.models import CompletionCandidate, Diagnostic, DocumentLink, ResolvedReference


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str
    root_dir: str | None = None


class DocumentRequest(BaseModel):
    """A document by absolute path; ``text`` overrides the file contents."""

    path: str
    text: str | None = None


class CompletionRequest(DocumentRequest):
    line: int = Field(ge=0)
    character: int = Field(ge=0)


class LintResponse(BaseModel):
    path: str
    diagnostics: list[Diagnostic]


class ReferencesResponse(BaseModel):
    path: str
    references: list[ResolvedReference]


class LinksResponse(BaseModel):
    path: str
    links: list[DocumentLink]


class CompletionResponse(BaseModel):
    candidates: list[CompletionCandidate] | None
