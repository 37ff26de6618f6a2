class DuplicateStageError(Exception):
    """Raised when a schedule contains the same stage id, or the same stage number on one well, more than once."""

    pass


class InvalidStageError(Exception):
    """Raised when a stage record breaks a schedule invariant (e.g. it ends before it starts)."""

    pass


class StageNotFoundError(Exception):
    """Raised when a requested stage id is not part of the schedule."""

    pass


class ImmutableStageError(Exception):
    """Raised when a complete or in-progress stage is used as a move target."""

    pass


class FileReadingError(Exception):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    DuplicateStageError: 400,
    InvalidStageError: 400,
    StageNotFoundError: 404,
    ImmutableStageError: 409,
    FileReadingError: 500,
    FileContentError: 400,
}
