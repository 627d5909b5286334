class DownloadError(Exception):
    """Raised when a source file cannot be downloaded."""

    pass


class CardDataError(Exception):
    """Raised when a source file cannot be read as card data."""

    pass
