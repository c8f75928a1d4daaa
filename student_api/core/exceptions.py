from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every error the API reports to the caller.
    The message is sent back verbatim as a plain-text body.
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestException(BaseAPIException):
    """400: the request could not be understood (e.g. malformed JSON body)"""
    def __init__(self, message: str = "Bad Request"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST
        )


class DatabaseException(BaseAPIException):
    """
    500: a statement failed inside the database driver, or an insert
    reported zero affected rows.
    """
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


class StorageError(Exception):
    """The database file could not be opened, pinged or given its schema."""
