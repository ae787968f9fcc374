"""Error taxonomy for the transcript pipeline.

Every stage raises a subclass of PipelineError. The HTTP boundary reads
``error_code`` and ``status_code`` to build the response, so the failing
stage is visible to callers instead of collapsing into a generic message.
"""


class PipelineError(Exception):
    """Base class for all pipeline failures."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InvalidUriFormat(PipelineError):
    """Raised when a storage URI cannot be split into bucket and key."""

    error_code = "INVALID_URI_FORMAT"

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid storage URI format: '{uri}'")


class RemoteError(PipelineError):
    """Raised when a call to a remote service fails."""

    error_code = "REMOTE_ERROR"

    def __init__(self, operation: str, message: str, cause: Exception | None = None):
        self.operation = operation
        self.message = message
        super().__init__(f"Remote call '{operation}' failed: {message}", cause)


class JobFailed(PipelineError):
    """Raised when the transcription service reports a failed job."""

    error_code = "JOB_FAILED"

    def __init__(self, name: str, reason: str | None = None):
        self.name = name
        self.reason = reason
        message = f"Transcription job '{name}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class JobNotFound(PipelineError):
    """Raised when the transcription service does not know the job."""

    error_code = "JOB_NOT_FOUND"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Transcription job '{name}' not found")


class MissingResultLocation(PipelineError):
    """Raised when a completed job carries no transcript location."""

    error_code = "MISSING_RESULT_LOCATION"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Transcription job '{name}' completed without a result location")


class MalformedResult(PipelineError):
    """Raised when a job result document cannot be decoded."""

    error_code = "MALFORMED_RESULT"

    def __init__(self, uri: str, cause: Exception | None = None):
        self.uri = uri
        super().__init__(f"Result document '{uri}' is malformed", cause)


class TranscriptNotFound(PipelineError):
    """Raised when a result document holds no transcript text."""

    error_code = "TRANSCRIPT_NOT_FOUND"

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"No transcript found in result document '{uri}'")


class LocalIoError(PipelineError):
    """Raised when staging an upload on local disk fails."""

    error_code = "LOCAL_IO_ERROR"

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        super().__init__(f"Local file operation failed for '{path}'", cause)


class JobCancelled(PipelineError):
    """Raised when polling is interrupted through the job's cancellation token."""

    status_code = 503
    error_code = "JOB_CANCELLED"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Polling for transcription job '{name}' was cancelled")


class JobPollTimeout(PipelineError):
    """Raised when a job does not reach a terminal state before the deadline."""

    status_code = 504
    error_code = "JOB_POLL_TIMEOUT"

    def __init__(self, name: str, waited_seconds: float):
        self.name = name
        self.waited_seconds = waited_seconds
        super().__init__(
            f"Transcription job '{name}' did not finish within {waited_seconds:.0f}s"
        )


class DuplicateJobName(PipelineError):
    """Raised when a job name is already tracked as active."""

    status_code = 409
    error_code = "DUPLICATE_JOB_NAME"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Transcription job '{name}' is already active")
