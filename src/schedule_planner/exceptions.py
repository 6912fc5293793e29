"""Custom exceptions for catalog and constraint loading."""


class CatalogError(Exception):
    """Base exception for catalog loading errors."""

    pass


class CatalogFileNotFoundError(CatalogError):
    """Catalog or constraint file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: '{path}'")


class UnsupportedFormatError(CatalogError):
    """File extension is not one of the supported formats."""

    def __init__(self, suffix: str, supported: list[str] | None = None):
        self.suffix = suffix
        self.supported = supported or []
        message = f"Unsupported file format '{suffix}'"
        if self.supported:
            message += f". Supported formats: {', '.join(self.supported)}"
        super().__init__(message)


class MissingColumnError(CatalogError):
    """Tabular catalog is missing required columns."""

    def __init__(self, missing: list[str], source: str | None = None):
        self.missing = missing
        self.source = source
        location = f" in '{source}'" if source else ""
        super().__init__(
            f"Missing required column(s){location}: {', '.join(missing)}. "
            "Expected columns: code, name, credits, section, slots."
        )


class InvalidDataError(CatalogError):
    """Data validation failed."""

    def __init__(self, message: str, source: str | None = None, row: int | None = None):
        self.source = source
        self.row = row
        location = ""
        if source:
            location += f" in '{source}'"
        if row is not None:
            location += f" at row {row}"
        super().__init__(f"Invalid data{location}: {message}")
