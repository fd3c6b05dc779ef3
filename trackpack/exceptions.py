"""
trackpack.exceptions - Custom exception classes.

All Trackpack-specific exceptions inherit from TrackpackError.
"""


class TrackpackError(Exception):
    """Base exception for all Trackpack errors."""

    pass


class ConfigError(TrackpackError):
    """Invalid configuration value."""

    pass


class DiscoveryError(TrackpackError, OSError):
    """Media file scan could not walk the directory tree."""

    pass


class SelectionError(TrackpackError, ValueError):
    """Menu selection is not a valid candidate index."""

    pass


class TrackSpecError(TrackpackError, ValueError):
    """Track specification text is malformed or missing fields."""

    pass


class OutputDirectoryError(TrackpackError, OSError):
    """Per-source output directory could not be created."""

    pass


class ExtractionError(TrackpackError):
    """Audio extraction error."""

    pass


class ExternalProcessError(ExtractionError):
    """Transcoder failed to launch or exited non-zero."""

    def __init__(self, command: list[str], message: str, returncode: int | None = None):
        self.command = command
        self.returncode = returncode
        self.message = message
        super().__init__(message)


class ArchiveError(TrackpackError, OSError):
    """Zip archive could not be written."""

    pass
