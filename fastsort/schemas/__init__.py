"""
Response schemas for rejected requests.
"""

from fastsort.schemas.errors import AllowedSort, ErrorInfo, ErrorResponse

__all__ = ["AllowedSort", "ErrorInfo", "ErrorResponse"]
