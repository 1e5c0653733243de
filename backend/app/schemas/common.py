"""
Common Pydantic schemas (error responses).
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    detail: str
