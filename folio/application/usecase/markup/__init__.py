"""Markup use cases."""

from .convert_math import (
    ConvertMathRequest,
    ConvertMathResponse,
    ConvertMathUseCase,
    StageOutput,
)

__all__ = [
    "ConvertMathRequest",
    "ConvertMathResponse",
    "ConvertMathUseCase",
    "StageOutput",
]
