"""Error taxonomy for conversions.

Every failure aborts the whole document; nothing is retried and no partial
output is returned.
"""


class ConversionError(Exception):
    """Base class for conversion errors."""


class RenderFailure(ConversionError):
    """The PDF could not be opened or a page's text could not be read.

    Examples: corrupted page, encrypted file, not a PDF at all.
    """


class CodecFailure(ConversionError):
    """The Word or Excel writer failed after all pages were structured."""


# PyMuPDF raises these for unreadable input (FileDataError is a RuntimeError)
RENDER_ERRORS = (
    RuntimeError,
    ValueError,
)
