"""
Errors raised by the practice app. Each carries a stable error code that the
JSON API reports alongside the message.
"""


class GolfLogError(Exception):
    """Base class for errors the caller is expected to see."""
    error_code = 'GOLFLOG_ERROR'

    def __init__(self, message, error_code=None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class ValidationError(GolfLogError):
    """Input is well-formed but not acceptable (empty title, no valid shots...)."""
    error_code = 'VALIDATION_FAILED'

    def __init__(self, message, field_errors=None):
        super().__init__(message)
        self.field_errors = field_errors


class InvalidFileFormatError(GolfLogError):
    """Empty file, wrong extension or content type, or undecodable bytes."""
    error_code = 'INVALID_FILE_FORMAT'


class FileTooLargeError(GolfLogError):
    error_code = 'FILE_SIZE_EXCEEDED'


class FileProcessingError(GolfLogError):
    """The file parsed but the session could not be stored."""
    error_code = 'FILE_PROCESSING_ERROR'


class ResourceNotFoundError(GolfLogError):
    error_code = 'RESOURCE_NOT_FOUND'

    def __init__(self, resource_type, identifier):
        super().__init__(f"{resource_type} with id {identifier} not found")
        self.resource_type = resource_type
        self.identifier = identifier
