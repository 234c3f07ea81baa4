class SchedulingError(Exception):
    """Base class for all errors raised by the scheduling package."""

    pass


class CatalogError(SchedulingError):
    """Raised when a course cannot be resolved from the catalog, or its record is incomplete."""

    pass


class CatalogLoadError(CatalogError):
    """Raised when the catalog file is missing, unreadable, or not in the expected shape."""

    pass


class CourseRecordError(CatalogError):
    """Raised when a single catalog record is missing required fields or has unusable values."""

    def __init__(self, code, missing_fields=(), reason=""):
        self.code = code
        self.missing_fields = tuple(missing_fields)
        if self.missing_fields:
            message = f"Course {code or '<unknown>'} is missing required field(s): {', '.join(self.missing_fields)}"
        else:
            message = f"Course {code or '<unknown>'} has an invalid record: {reason}"
        super().__init__(message)


# Mapping of custom exceptions to CLI exit codes
EXIT_CODES = {
    CatalogLoadError: 2,
    CourseRecordError: 2,
    CatalogError: 2,
    SchedulingError: 1,
}
