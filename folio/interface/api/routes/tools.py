"""Admin tool routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from folio.application.usecase.markup import (
    ConvertMathRequest,
    ConvertMathResponse,
    ConvertMathUseCase,
)
from folio.domain.service import AuthService

from .auth import require_admin

router = APIRouter(prefix="/admin/tools", tags=["tools"], route_class=DishkaRoute)


class ConvertMathAPIRequest(BaseModel):
    """API request for the math converter."""

    text: str
    trace: bool = False


@router.post("/math", response_model=ConvertMathResponse)
async def convert_math(
    body: ConvertMathAPIRequest,
    request: Request,
    auth_service: FromDishka[AuthService],
    convert_math_use_case: FromDishka[ConvertMathUseCase],
) -> ConvertMathResponse:
    """Convert legacy sub/sup math markup to LaTeX.

    The editor pastes the result back into the content by hand.

    Example:
        POST /admin/tools/math
        {"text": "Let a<sub>x</sub> be"}

        Response:
        {"result": "Let $a_{x}$ be", "stages": null}
    """
    require_admin(request, auth_service)
    return await convert_math_use_case.execute(
        ConvertMathRequest(text=body.text, trace=body.trace)
    )
