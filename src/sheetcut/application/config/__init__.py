"""Configuration schema and loading for cut job files.

Public API:
    - CutJobConfiguration: Root configuration model
    - SheetConfig, PieceConfig, SearchConfig, OutputConfig: Section models
    - OutputFormat: Report format enum
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - ConfigError: Exception for configuration errors
    - check_oversized_pieces: Advisory warnings for pieces that never fit
    - config_to_*: Adapters from configuration to DTOs and services

Example:
    >>> from pathlib import Path
    >>> from sheetcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Sheet: {config.sheet.width}x{config.sheet.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sheetcut.application.config.adapter import (
    config_to_command,
    config_to_piece_inputs,
    config_to_search,
    config_to_sheet_input,
)
from sheetcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutJobConfiguration,
    OutputConfig,
    OutputFormat,
    PieceConfig,
    SearchConfig,
    SheetConfig,
)
from sheetcut.application.config.validator import (
    ValidationWarning,
    check_oversized_pieces,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutJobConfiguration",
    "OutputConfig",
    "OutputFormat",
    "PieceConfig",
    "SearchConfig",
    "SheetConfig",
    "ValidationWarning",
    "check_oversized_pieces",
    "config_to_command",
    "config_to_piece_inputs",
    "config_to_search",
    "config_to_sheet_input",
    "load_config",
    "load_config_from_dict",
]
