"""Designer session endpoints.

Each session holds the request lists of one design. Every mutation
returns the session with its freshly resolved layout.
"""

from typing import Any

from fastapi import APIRouter, Response, status

from carcass.application import FurnitureDesigner
from carcass.application.config import (
    config_to_designer,
    load_config_from_dict,
    requests_to_config,
)
from carcass.domain import Dimensions, ResolvedLayout
from carcass.infrastructure import layout_to_dict
from carcass.web.dependencies import (
    ServiceFactoryDep,
    SessionStoreDep,
    TemplateManagerDep,
)
from carcass.web.exceptions import PieceNotFoundError
from carcass.web.schemas.common import DimensionsSchema, LayoutSchema
from carcass.web.schemas.requests import (
    AddPieceRequest,
    CreateDesignRequest,
    SelectSpaceRequest,
    SplitSpaceRequest,
    UpdateThicknessRequest,
)
from carcass.web.schemas.responses import DesignSessionSchema, ErrorResponseSchema

router = APIRouter(
    prefix="/designs",
    tags=["designs"],
    responses={404: {"model": ErrorResponseSchema}},
)


def _session_schema(
    design_id: str,
    designer: FurnitureDesigner,
    layout: ResolvedLayout,
    created_id: str | None = None,
) -> DesignSessionSchema:
    return DesignSessionSchema(
        design_id=design_id,
        name=designer.name,
        default_thickness=designer.default_thickness,
        created_id=created_id,
        layout=LayoutSchema.model_validate(
            layout_to_dict(layout, designer.selected_space_id)
        ),
    )


@router.post(
    "",
    response_model=DesignSessionSchema,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponseSchema}},
)
async def create_design(
    request: CreateDesignRequest,
    store: SessionStoreDep,
    factory: ServiceFactoryDep,
    manager: TemplateManagerDep,
) -> DesignSessionSchema:
    """Open a designer session.

    Raises:
        TemplateNotFoundError: Unknown template (handled as 404).
        ConfigError: Invalid design content (handled as 422).
    """
    dimensions = None
    if request.dimensions is not None:
        dimensions = Dimensions(
            request.dimensions.width,
            request.dimensions.height,
            request.dimensions.depth,
        )

    config = None
    if request.template is not None:
        config = manager.load_design(request.template)
    elif request.config is not None:
        config = load_config_from_dict(request.config)

    if config is not None:
        designer = config_to_designer(config, factory.get_id_generator())
        if dimensions is not None:
            designer.update_root_dimensions(dimensions)
        if request.default_thickness is not None:
            designer.set_default_thickness(request.default_thickness)
    else:
        designer = factory.create_designer(dimensions, request.default_thickness)

    design_id, layout = store.create(designer)
    return _session_schema(design_id, designer, layout)


@router.get("/{design_id}", response_model=DesignSessionSchema)
async def get_design(design_id: str, store: SessionStoreDep) -> DesignSessionSchema:
    designer, layout = store.read(design_id)
    return _session_schema(design_id, designer, layout)


@router.get("/{design_id}/config")
async def export_design(design_id: str, store: SessionStoreDep) -> dict[str, Any]:
    """Return the session's requests as a design file.

    The result loads back through ``POST /designs`` or ``carcass resolve
    --config`` with every id preserved.
    """
    designer, _ = store.read(design_id)
    return requests_to_config(designer.snapshot()).model_dump(mode="json")


@router.delete("/{design_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_design(design_id: str, store: SessionStoreDep) -> Response:
    store.delete(design_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{design_id}/pieces",
    response_model=DesignSessionSchema,
    status_code=status.HTTP_201_CREATED,
)
async def add_piece(
    design_id: str, request: AddPieceRequest, store: SessionStoreDep
) -> DesignSessionSchema:
    """Add a panel to the selected space, or to ``space_id`` when given."""

    def mutate(designer: FurnitureDesigner) -> str:
        if request.space_id is not None:
            designer.select_space(request.space_id)
        return designer.add_piece(request.type).id

    piece_id, designer, layout = store.apply(design_id, mutate)
    return _session_schema(design_id, designer, layout, created_id=piece_id)


@router.delete("/{design_id}/pieces/{piece_id}", response_model=DesignSessionSchema)
async def remove_piece(
    design_id: str, piece_id: str, store: SessionStoreDep
) -> DesignSessionSchema:
    """Remove a panel; its dependants move to the panel's parent space.

    Raises:
        PieceNotFoundError: The design holds no such panel (handled as 404).
    """

    def mutate(designer: FurnitureDesigner) -> None:
        if not designer.remove_piece(piece_id):
            raise PieceNotFoundError(design_id, piece_id)

    _, designer, layout = store.apply(design_id, mutate)
    return _session_schema(design_id, designer, layout)


@router.post(
    "/{design_id}/divisions",
    response_model=DesignSessionSchema,
    status_code=status.HTTP_201_CREATED,
)
async def split_space(
    design_id: str, request: SplitSpaceRequest, store: SessionStoreDep
) -> DesignSessionSchema:
    """Split a space at a measured offset.

    A cut that does not fall strictly inside the space is still stored and
    reported in ``pending_division_ids``.
    """
    division, designer, layout = store.apply(
        design_id,
        lambda d: d.split_space(
            request.space_id, request.axis, request.value, request.from_end
        ),
    )
    return _session_schema(design_id, designer, layout, created_id=division.id)


@router.post("/{design_id}/clear", response_model=DesignSessionSchema)
async def clear_design(design_id: str, store: SessionStoreDep) -> DesignSessionSchema:
    _, designer, layout = store.apply(design_id, lambda d: d.clear_all())
    return _session_schema(design_id, designer, layout)


@router.put("/{design_id}/dimensions", response_model=DesignSessionSchema)
async def update_dimensions(
    design_id: str, request: DimensionsSchema, store: SessionStoreDep
) -> DesignSessionSchema:
    dimensions = Dimensions(request.width, request.height, request.depth)
    _, designer, layout = store.apply(
        design_id, lambda d: d.update_root_dimensions(dimensions)
    )
    return _session_schema(design_id, designer, layout)


@router.put("/{design_id}/thickness", response_model=DesignSessionSchema)
async def update_thickness(
    design_id: str, request: UpdateThicknessRequest, store: SessionStoreDep
) -> DesignSessionSchema:
    """Change the thickness of panels added from now on."""
    _, designer, layout = store.apply(
        design_id, lambda d: d.set_default_thickness(request.thickness)
    )
    return _session_schema(design_id, designer, layout)


@router.put("/{design_id}/selection", response_model=DesignSessionSchema)
async def select_space(
    design_id: str, request: SelectSpaceRequest, store: SessionStoreDep
) -> DesignSessionSchema:
    _, designer, layout = store.apply(
        design_id, lambda d: d.select_space(request.space_id)
    )
    return _session_schema(design_id, designer, layout)
