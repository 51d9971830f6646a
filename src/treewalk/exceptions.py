from treewalk.types import SortKey


class ConfigurationError(ValueError):
    """
    Exception raised when a tree configuration is invalid or self-contradictory.

    This is raised while the configuration is being resolved, before any output is
    produced, e.g. for a non-positive depth limit or an unknown sort key. The CLI
    reports it once on stderr and exits with status 1.

    Attributes:
        option (str): Name of the offending option, if known.

    Example:
        >>> error = ConfigurationError("Invalid level, must be greater than 0", option="max_depth")
        >>> str(error)
        'Invalid level, must be greater than 0'
        >>> error.option
        'max_depth'
    """

    def __init__(self, message: str, option: str = "") -> None:
        """
        Initialize the exception.

        Args:
            message (str): Description of the problem.
            option (str, optional): Name of the offending option. Defaults to "".
        """
        self.option = option
        super().__init__(message)


class UnsupportedSortError(ConfigurationError):
    """
    Exception raised when an unknown sort mode is requested.

    Example:
        >>> error = UnsupportedSortError("natural")
        >>> str(error)
        "Unsupported sort type 'natural'. Choose one of: name, version, size, mtime, ctime"
    """

    def __init__(self, sort_name: str) -> None:
        """
        Initialize the exception with the rejected sort name.

        Args:
            sort_name (str): The sort mode that was requested.
        """
        self.sort_name = sort_name
        choices = ", ".join(key.value for key in SortKey)
        super().__init__(f"Unsupported sort type '{sort_name}'. Choose one of: {choices}", option="sort")
