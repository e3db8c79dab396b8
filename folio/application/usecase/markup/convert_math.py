"""Convert legacy math markup use case."""

import logfire
from pydantic import BaseModel

from folio.domain.service.markup import trace_legacy_math, transform_legacy_math


class ConvertMathRequest(BaseModel):
    """Convert math request."""

    text: str
    trace: bool = False  # Include the output of every pipeline stage


class StageOutput(BaseModel):
    """Text after one pipeline stage."""

    stage: str
    output: str


class ConvertMathResponse(BaseModel):
    """Convert math response."""

    result: str
    stages: list[StageOutput] | None = None


class ConvertMathUseCase:
    """Use case behind the admin math conversion tool.

    The result is only returned to the editor; stored content is never
    rewritten.
    """

    async def execute(self, request: ConvertMathRequest) -> ConvertMathResponse:
        with logfire.span(
            "convert_math.execute", length=len(request.text), trace=request.trace
        ):
            if not request.trace:
                return ConvertMathResponse(result=transform_legacy_math(request.text))

            trace = trace_legacy_math(request.text)
            return ConvertMathResponse(
                result=trace[-1][1] if trace else request.text,
                stages=[StageOutput(stage=name, output=text) for name, text in trace],
            )
