"""Design validation endpoint."""

from fastapi import APIRouter

from carcass.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from carcass.web.schemas.requests import ConfigValidateRequest
from carcass.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_design(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a design without keeping it.

    Schema violations are reported as errors in the result rather than as
    an HTTP error, so clients get one shape for every outcome.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                ValidationIssueSchema(path=d["path"], message=d["message"])
                for d in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            ValidationIssueSchema(path=e.path, message=e.message) for e in result.errors
        ],
        warnings=[
            ValidationIssueSchema(path=w.path, message=w.message, suggestion=w.suggestion)
            for w in result.warnings
        ],
    )
