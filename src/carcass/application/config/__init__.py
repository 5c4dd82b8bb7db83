"""Design file schema, loading and validation.

Public API:
    - DesignConfiguration: Root design file model
    - DesignConfig, DimensionsConfig, PanelConfig, DivisionConfig: Nested models
    - load_config: Load a design from a JSON file
    - load_config_from_dict: Load a design from a dictionary
    - ConfigError: Exception for design file errors
    - config_to_requests / config_to_designer: Convert to domain objects
    - requests_to_config: Convert domain requests back to a design model
    - ValidationResult, ValidationError, ValidationWarning: Validation results
    - validate_config: Perform full design validation

Example:
    >>> from pathlib import Path
    >>> from carcass.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bookcase.json"))
    ...     print(f"Panels: {len(config.design.panels)}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from carcass.application.config.adapter import (
    config_to_designer,
    config_to_requests,
    requests_to_config,
)
from carcass.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from carcass.application.config.schemas import (
    SUPPORTED_VERSIONS,
    DesignConfig,
    DesignConfiguration,
    DimensionsConfig,
    DivisionConfig,
    PanelConfig,
)
from carcass.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DesignConfig",
    "DesignConfiguration",
    "DimensionsConfig",
    "DivisionConfig",
    "PanelConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_designer",
    "config_to_requests",
    "load_config",
    "load_config_from_dict",
    "requests_to_config",
    "validate_config",
]
