"""Custom exceptions for lifecycle-timeline."""


class LifecycleTimelineError(Exception):
    """Base exception for all lifecycle-timeline operations."""


class ConfigurationError(LifecycleTimelineError):
    """Raised when configuration validation fails."""


class CatalogLoadError(LifecycleTimelineError):
    """Raised when the component catalog or site mapping cannot be loaded."""


class RenderError(LifecycleTimelineError):
    """Raised when a render sink fails to produce output."""
