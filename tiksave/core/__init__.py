from .validation import MediaUrlValidator, SourceUrlValidator, UrlValidationResult

__all__ = ["MediaUrlValidator", "SourceUrlValidator", "UrlValidationResult"]
