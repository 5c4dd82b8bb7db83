"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from carcass.web.schemas.common import LayoutSchema


class DesignSessionSchema(BaseModel):
    """State of a designer session after a request."""

    design_id: str
    name: str
    default_thickness: float = Field(..., description="Thickness of new panels in mm")
    created_id: str | None = Field(
        default=None, description="Id of the panel or division this request created"
    )
    layout: LayoutSchema


class ValidationIssueSchema(BaseModel):
    """One finding, located by JSON path in the posted design."""

    path: str = Field(..., description="e.g. design.panels[2].parent_space_id")
    message: str
    suggestion: str | None = None


class ValidationResultSchema(BaseModel):
    is_valid: bool = Field(..., description="True when there are no errors")
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)


class TemplateListItemSchema(BaseModel):
    name: str
    description: str


class TemplateListSchema(BaseModel):
    templates: list[TemplateListItemSchema]


class TemplateContentSchema(BaseModel):
    """A bundled design file."""

    name: str
    description: str
    content: dict[str, Any] = Field(..., description="Design file JSON")


class ErrorResponseSchema(BaseModel):
    """Body of every 404 and design-content 422 response."""

    error: str
    error_type: str = Field(..., description="not_found, validation, json_parse, ...")
    details: list[dict[str, Any]] | dict[str, Any] | None = None
