"""Custom exceptions for node-lifecycle."""


class NodeLifecycleError(Exception):
    """Base exception for all node-lifecycle operations."""


class ConfigurationError(NodeLifecycleError):
    """Raised when configuration validation fails."""


class FeedError(NodeLifecycleError):
    """Raised when a release schedule feed cannot be fetched or decoded."""
