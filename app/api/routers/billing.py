from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_create_checkout_session_use_case
from app.api.schemas.billing import (
    CreateCheckoutSessionRequest,
    CreateCheckoutSessionResponse,
)
from app.application.dto.billing import CreateCheckoutSessionInput
from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.domain.exceptions import BillingError, InvalidCheckoutRequestError


router = APIRouter()


@router.post("/api/checkout", response_model=CreateCheckoutSessionResponse)
def create_checkout_session(
    req: CreateCheckoutSessionRequest,
    use_case: CreateCheckoutSessionUseCase = Depends(get_create_checkout_session_use_case),
):
    try:
        output = use_case.execute(
            CreateCheckoutSessionInput(
                user_id=req.user_id,
                credits=req.credits,
            )
        )
    except InvalidCheckoutRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except BillingError as exc:
        raise HTTPException(status_code=500, detail="Failed to create checkout session") from exc

    return CreateCheckoutSessionResponse(checkout_url=output.checkout_url)
