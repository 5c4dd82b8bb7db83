"""Template endpoints."""

import json

from fastapi import APIRouter

from carcass.web.dependencies import TemplateManagerDep
from carcass.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    return TemplateListSchema(
        templates=[
            TemplateListItemSchema(name=name, description=description)
            for name, description in manager.list_templates()
        ]
    )


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Return a bundled design file.

    Raises:
        TemplateNotFoundError: Unknown template (handled as 404).
    """
    return TemplateContentSchema(
        name=name,
        description=manager.describe(name),
        content=json.loads(manager.get_template(name)),
    )
