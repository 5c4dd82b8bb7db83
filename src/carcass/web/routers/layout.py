"""Stateless layout resolution endpoint."""

from fastapi import APIRouter

from carcass.application.config import config_to_requests, load_config_from_dict
from carcass.infrastructure import layout_to_dict
from carcass.web.dependencies import ServiceFactoryDep
from carcass.web.schemas.common import LayoutSchema
from carcass.web.schemas.requests import LayoutRequest
from carcass.web.schemas.responses import ErrorResponseSchema

router = APIRouter(
    prefix="/layout",
    tags=["layout"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=LayoutSchema)
async def resolve_layout(
    request: LayoutRequest,
    factory: ServiceFactoryDep,
) -> LayoutSchema:
    """Resolve a posted design into its spaces and positioned panels.

    Raises:
        ConfigError: If the design fails schema validation (handled as 422).
    """
    config = load_config_from_dict(request.config)
    requests = config_to_requests(config, factory.get_id_generator())
    layout = factory.get_layout_resolver().resolve(requests)
    return LayoutSchema.model_validate(layout_to_dict(layout))
