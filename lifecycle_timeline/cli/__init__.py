"""CLI module for lifecycle-timeline.

It supports both CLI arguments and environment variables for configuration.
"""

from .main import (
    Config,
    build_config,
    cli,
    evaluate_boolean,
    main,
    run_render,
)

__all__ = [
    "cli",
    "main",
    "Config",
    "build_config",
    "run_render",
    "evaluate_boolean",
]
