class FeedbackError(Exception):
    """Base error for the feedback backend. `status_code` is what the API returns."""

    status_code = 500


class ValidationError(FeedbackError):
    status_code = 400


class NotFoundError(FeedbackError):
    status_code = 404


class StorageError(FeedbackError):
    status_code = 500


class RemoteProviderError(FeedbackError):
    status_code = 500
