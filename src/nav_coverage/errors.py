class CoverageError(Exception):
    pass


class InvalidGoalError(CoverageError, ValueError):
    """Raised when a planning goal can't be turned into a field."""


class InvalidPathStateError(CoverageError, RuntimeError):
    """Raised when a path state is neither a swath nor a turn."""


class InvalidModeError(CoverageError, ValueError):
    pass


class ConfigError(CoverageError):
    pass
