class UnicodeArtError(Exception):
    """Base class for errors raised while rendering."""


class ConfigurationError(UnicodeArtError, ValueError):
    """The requested render options cannot be honoured."""


class PipelineError(UnicodeArtError):
    """The producer stage of the subpixel pipeline failed."""


class ImageTooSmallError(UnicodeArtError):
    """The image has fewer pixels than the character grid needs to sample."""
