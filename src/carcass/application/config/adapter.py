"""Conversion between design files and domain requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from carcass.application.config.schemas import (
    DesignConfig,
    DesignConfiguration,
    DimensionsConfig,
    DivisionConfig,
    PanelConfig,
)
from carcass.application.designer import FurnitureDesigner
from carcass.domain import (
    ROOT_SPACE_ID,
    DesignRequests,
    Dimensions,
    ManualDivision,
    Panel,
)

if TYPE_CHECKING:
    from carcass.contracts import IdGeneratorProtocol

CURRENT_SCHEMA_VERSION = "1.0"


def config_to_requests(
    config: DesignConfiguration,
    id_generator: "IdGeneratorProtocol | None" = None,
) -> DesignRequests:
    """Build domain requests from a validated design file.

    Missing ids are drawn from ``id_generator`` (UUIDs by default), skipping
    any id the file already uses. Missing thicknesses fall back to the
    design default.
    """
    from carcass.infrastructure.ids import UuidIdGenerator, unused_id

    ids = id_generator if id_generator is not None else UuidIdGenerator()
    design = config.design
    taken = {ROOT_SPACE_ID}
    taken.update(p.id for p in design.panels if p.id)
    taken.update(d.id for d in design.divisions if d.id)

    def request_id(explicit: str | None) -> str:
        if explicit:
            return explicit
        generated = unused_id(ids, taken)
        taken.add(generated)
        return generated

    panels = tuple(
        Panel(
            id=request_id(p.id),
            panel_type=p.type,
            parent_space_id=p.parent_space_id,
            thickness=p.thickness if p.thickness is not None else design.default_thickness,
            name=p.name or "",
            color=p.color or "",
        )
        for p in design.panels
    )
    divisions = tuple(
        ManualDivision(
            id=request_id(d.id),
            parent_space_id=d.parent_space_id,
            axis=d.axis,
            value=d.value,
            from_end=d.from_end,
        )
        for d in design.divisions
    )
    return DesignRequests(
        root_dimensions=Dimensions(
            width=design.dimensions.width,
            height=design.dimensions.height,
            depth=design.dimensions.depth,
        ),
        default_thickness=design.default_thickness,
        panels=panels,
        divisions=divisions,
        name=design.name,
    )


def config_to_designer(
    config: DesignConfiguration,
    id_generator: "IdGeneratorProtocol | None" = None,
) -> FurnitureDesigner:
    """Open a designer session holding the requests of ``config``."""
    return FurnitureDesigner.from_requests(
        config_to_requests(config, id_generator), id_generator=id_generator
    )


def requests_to_config(requests: DesignRequests) -> DesignConfiguration:
    """Describe ``requests`` as a design file model.

    Every request keeps its id so dependants still find the spaces it
    creates when the file is loaded again.
    """
    dims = requests.root_dimensions
    return DesignConfiguration(
        schema_version=CURRENT_SCHEMA_VERSION,
        design=DesignConfig(
            name=requests.name,
            dimensions=DimensionsConfig(
                width=dims.width, height=dims.height, depth=dims.depth
            ),
            default_thickness=requests.default_thickness,
            panels=[
                PanelConfig(
                    id=p.id,
                    type=p.panel_type,
                    parent_space_id=p.parent_space_id,
                    thickness=p.thickness,
                    name=p.name,
                    color=p.color,
                )
                for p in requests.panels
            ],
            divisions=[
                DivisionConfig(
                    id=d.id,
                    parent_space_id=d.parent_space_id,
                    axis=d.axis,
                    value=d.value,
                    from_end=d.from_end,
                )
                for d in requests.divisions
            ],
        ),
    )
