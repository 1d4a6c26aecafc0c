from pathlib import Path


class BumpFilesError(Exception):
    pass


class MissingFieldError(BumpFilesError):
    def __init__(self, field_name: str, pattern: str) -> None:
        self.field_name = field_name
        self.pattern = pattern
        super().__init__(f"field {field_name} not found using pattern: {pattern}")


class InvalidVersionError(BumpFilesError):
    def __init__(self, version: str, reason: str) -> None:
        self.version = version
        self.reason = reason
        super().__init__(f"Invalid version string: {version!r}, {reason}")


class BumpFileNotFoundError(BumpFilesError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not find bump file: {path}")
