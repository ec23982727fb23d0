"""Domain exceptions."""


class OpsMindError(Exception):
    """Base class for OpsMind errors."""


class IngestError(OpsMindError):
    """Raised when a document cannot be ingested."""


class DocumentLoadError(IngestError):
    """Raised when a file cannot be read or parsed."""
