"""Custom exceptions for the KYC documents analysis service."""
from typing import Optional


class KYCAnalysisError(Exception):
    """Base exception for KYC analysis operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize KYC analysis error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.details = details or {}


class InvalidRequestError(KYCAnalysisError):
    """Raised when the request body cannot be decoded into an analysis request."""
    pass


class RekognitionClientError(KYCAnalysisError):
    """Raised when the Rekognition client cannot be constructed."""
    pass


class FaceAnalysisError(KYCAnalysisError):
    """Raised when a remote face detection or comparison call fails."""
    pass


class ResponseEncodingError(KYCAnalysisError):
    """Raised when the analysis response cannot be serialized."""
    pass
