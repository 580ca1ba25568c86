"""
Custom Exceptions - Application-specific error types
"""


class HabitTrackerException(Exception):
    """Base exception for all habit tracker errors"""
    pass


class HabitNotFoundError(HabitTrackerException):
    """Raised when a habit cannot be found"""
    pass


class MoodEntryNotFoundError(HabitTrackerException):
    """Raised when a mood entry cannot be found"""
    pass


class ChatMessageNotFoundError(HabitTrackerException):
    """Raised when a chat message cannot be found"""
    pass


class InvalidHabitDataError(HabitTrackerException):
    """Raised when habit data validation fails"""
    pass


class StorageError(HabitTrackerException):
    """Raised when a write to the key-value store fails"""
    pass


class ExternalServiceError(HabitTrackerException):
    """Raised when external services (OpenAI, etc.) fail"""
    pass


class InvalidMoodDataError(HabitTrackerException):
    """Raised when mood entry data validation fails"""
    pass
