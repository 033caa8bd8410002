"""Errors raised while managing records and their uploaded attachments.

Every error carries a JSON-ready `message` payload and the HTTP status code
a transport layer should answer with."""


class RecordError(Exception):
    """Base class for the record manager failures."""
    http_code = 500

    def __init__(self, message=None):
        if message is None:
            message = self.__doc__
        super().__init__(message)
        self.message = message

    @property
    def payload(self):
        """Return the body a JSON response would carry."""
        return {'message': self.message}


class ValidationFailure(RecordError):
    """The submitted data is incomplete or malformed."""
    http_code = 400


class NotFound(RecordError):
    """The record does not exist."""
    http_code = 404


class UploadRejected(RecordError):
    """An uploaded file did not pass the filter of its field."""
    http_code = 400


class UnsupportedFileType(UploadRejected):
    """The file type is not allowed for this field."""
    http_code = 415


class FileTooLarge(UploadRejected):
    """The file exceeds the size limit of this field."""
    http_code = 413


class StoreWriteFailure(RecordError):
    """The record store rejected the write."""
    http_code = 400


class BlobWriteFailure(RecordError):
    """The file could not be written to storage."""
    http_code = 500


class BlobDeleteFailure(RecordError):
    """The file could not be removed from storage."""
