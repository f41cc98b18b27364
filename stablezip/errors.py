class ArchiveError(Exception):
    """Base class for stablezip errors."""


# Input validation (raised before the target is opened)
class ValidationError(ArchiveError):
    pass


class SourceMissingError(ValidationError):
    pass


class SourceTypeError(ValidationError):
    pass


class EntryNameError(ValidationError):
    pass


# Container construction
class ContainerError(ArchiveError):
    pass


class EntryHeaderError(ContainerError):
    pass


class EntryCreateError(ContainerError):
    pass


# Factory
class UnsupportedArchiveTypeError(ArchiveError):
    pass
