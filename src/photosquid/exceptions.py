"""Exception hierarchy for Photosquid.

The editor core never raises; these are used by the layers that read
input from outside the process.
"""


class PhotosquidError(Exception):
    """Base exception for all Photosquid errors."""

    pass


class ScriptError(PhotosquidError):
    """Errors related to interaction scripts."""

    pass


class ScriptLoadError(ScriptError):
    """Error reading an interaction script."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load script '{path}': {reason}")


class ScriptFormatError(ScriptError):
    """Interaction script does not have the expected structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid script format '{path}': {details}")
