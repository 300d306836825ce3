"""Custom exceptions for the submission and curriculum layers."""


class SubmissionServiceError(Exception):
    """Base exception for submission errors."""

    def __init__(self, message: str, error_type: str = "submission_service_error"):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class ExerciseResolutionError(SubmissionServiceError):
    """Raised when a submitted path cannot be mapped to an exercise."""


class UnknownLanguageError(ExerciseResolutionError):
    """Raised when no curriculum is registered for a path's language."""

    def __init__(self, identifier: str):
        super().__init__(
            f"No curriculum registered for '{identifier}'",
            "unknown_language",
        )
        self.identifier = identifier


class UnknownExerciseError(ExerciseResolutionError):
    """Raised when a slug is not part of a language's curriculum."""

    def __init__(self, language: str, slug: str):
        super().__init__(
            f"Exercise '{slug}' is not part of the {language} curriculum",
            "unknown_exercise",
        )
        self.language = language
        self.slug = slug


class DuplicateSubmissionError(SubmissionServiceError):
    """Raised when saving code identical to the previous submission."""

    def __init__(self, language: str, slug: str):
        super().__init__(
            f"Code is identical to the previous {language}/{slug} submission",
            "duplicate_submission",
        )
        self.language = language
        self.slug = slug


class ConcurrentAttemptError(SubmissionServiceError):
    """Raised when another attempt on the same exercise won the race."""

    def __init__(self, language: str, slug: str):
        super().__init__(
            f"Another {language}/{slug} submission was saved concurrently",
            "concurrent_attempt",
        )
        self.language = language
        self.slug = slug


class SubmissionStateError(SubmissionServiceError):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, current_state: str, target_state: str):
        super().__init__(
            f"Invalid state transition: '{current_state}' → '{target_state}'",
            "submission_state_error",
        )
        self.current_state = current_state
        self.target_state = target_state


class SubmissionNotFoundError(SubmissionServiceError):
    """Raised when a submission is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            f"Submission '{identifier}' not found",
            "submission_not_found",
        )
        self.identifier = identifier


class UserNotFoundError(SubmissionServiceError):
    """Raised when a user is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            f"User '{identifier}' not found",
            "user_not_found",
        )
        self.identifier = identifier
