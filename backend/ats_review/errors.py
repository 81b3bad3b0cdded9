"""
ATS Resume Review - error types
"""


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a runnable service"""


class InputError(ValueError):
    """Raised when the caller supplied no resume, no resume text or no job description"""


class ExtractionError(RuntimeError):
    """Raised when a PDF cannot be read"""


class AIServiceError(RuntimeError):
    """Raised when the Gemini completion call does not finish"""
