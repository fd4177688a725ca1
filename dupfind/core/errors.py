# dupfind/core/errors.py


class DupFindError(Exception):
    """Base class for errors that abort a scan. Carries the offending path and the underlying cause."""

    def __init__(self, path: str, cause: Exception, action: str = "process"):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot {action} '{path}': {cause}")


class TraversalError(DupFindError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(path, cause, action="traverse")


class HashError(DupFindError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(path, cause, action="hash")


class WriteError(DupFindError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(path, cause, action="write")
