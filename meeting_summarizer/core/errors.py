# errors.py
from typing import List, Optional


class SummarizerError(Exception):
    """Base error rendered at the HTTP boundary as ``{"error", "details"}``."""

    status_code = 500
    # False: details only reach the client in development
    public_details = True

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


# 400s

class InputValidationError(SummarizerError):
    status_code = 400


class MissingTranscriptError(InputValidationError):
    def __init__(self):
        super().__init__("No transcript provided. Please upload a file or paste text.")


class EmptyTranscriptError(InputValidationError):
    def __init__(self):
        super().__init__("Transcript is empty or invalid.")


class InputReadError(InputValidationError):
    def __init__(self, cause: Exception):
        super().__init__("Failed to read uploaded file.", details=str(cause))
        self.__cause__ = cause


class UnsupportedFileError(InputValidationError):
    def __init__(self):
        super().__init__("Only text files are allowed (.txt, .text, .md)")


class FileTooLargeError(InputValidationError):
    def __init__(self, limit_bytes: int):
        super().__init__(f"File too large. Maximum size is {limit_bytes // (1024 * 1024)}MB.")
        self.limit_bytes = limit_bytes


class MissingRecipientsError(InputValidationError):
    def __init__(self):
        super().__init__("Please provide at least one recipient email address.")


class EmptySummaryContentError(InputValidationError):
    def __init__(self):
        super().__init__("Summary content is required.")


class InvalidRecipientsError(InputValidationError):
    def __init__(self, invalid: List[str]):
        super().__init__(f"Invalid email addresses: {', '.join(invalid)}")
        self.invalid = invalid


class InvalidSubjectError(InputValidationError):
    def __init__(self):
        super().__init__("Subject must be a single line.")


# 500s

class UpstreamProviderError(SummarizerError):
    """Completion provider failure, classified into a coarse category."""

    public_details = False

    AUTH = "auth"
    QUOTA = "quota"
    NETWORK = "network"
    GENERIC = "generic"

    MESSAGES = {
        AUTH: "AI service configuration error. Please check your API key.",
        QUOTA: "AI service quota exceeded. Please try again later.",
        NETWORK: "Network error. Please try again.",
        GENERIC: "Failed to generate summary",
    }

    def __init__(self, category: str, details: Optional[str] = None):
        super().__init__(self.MESSAGES.get(category, self.MESSAGES[self.GENERIC]), details=details)
        self.category = category


class EmptySummaryError(UpstreamProviderError):
    def __init__(self):
        super().__init__(self.GENERIC, details="No summary generated from AI service")


class DeliveryError(SummarizerError):
    def __init__(self, details: Optional[str] = None):
        super().__init__("Failed to send email", details=details)


class ShareFailedError(SummarizerError):
    public_details = False

    def __init__(self, details: Optional[str] = None):
        super().__init__("Failed to share summary via email", details=details)
