"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class ResumeParserException(Exception):
    """Base exception for the resume parser service"""

    error = "Failed to parse resume"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class DecodeError(ResumeParserException):
    """Uploaded file could not be turned into text"""

    def __init__(self, message: str = "Failed to parse file", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class UploadError(ResumeParserException):
    """Malformed upload request"""

    error = "No file uploaded"

    def __init__(self, message: str = "Attach a resume file in the 'resume' form field", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class FileTooLargeError(ResumeParserException):
    """Upload exceeds the configured size ceiling"""

    error = "File too large"

    def __init__(self, max_size_mb: int):
        super().__init__(
            f"File size exceeds maximum allowed size of {max_size_mb}MB",
            status_code=413,
            details={"max_size_mb": max_size_mb},
        )
