"""eitherkit: an immutable Left/Right result type for explicit error handling.

Public API:
    - right() / left(): Construct a result
    - Left / Right: The two variants (usable in ``match`` statements)
    - catch_result() / catching: Turn raised exceptions into ``Left`` values
    - sequence(): Collect many results into one
    - config_scope(): Scoped control over capture logging
"""

from __future__ import annotations

import logging

from eitherkit.capture import catch_result, catching, sequence
from eitherkit.config import FrozenConfig, config_scope, resolve_config
from eitherkit.errors import ConfigurationError, EitherError, UnwrapError
from eitherkit.result import Left, Result, Right, Side, left, right

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("eitherkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("eitherkit").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "EitherError",
    "FrozenConfig",
    "Left",
    "Result",
    "Right",
    "Side",
    "UnwrapError",
    "catch_result",
    "catching",
    "config_scope",
    "left",
    "resolve_config",
    "right",
    "sequence",
]
