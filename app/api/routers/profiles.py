from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_register_profile_use_case
from app.api.schemas.profiles import RegisterProfileRequest, RegisterProfileResponse
from app.application.dto.profiles import RegisterProfileInput
from app.application.use_cases.register_profile import RegisterProfileUseCase
from app.domain.exceptions import IdentityLookupError, ProfileStoreError, UserNotFoundError


router = APIRouter()


@router.post("/api/register", response_model=RegisterProfileResponse)
def register_profile(
    req: RegisterProfileRequest,
    use_case: RegisterProfileUseCase = Depends(get_register_profile_use_case),
):
    try:
        use_case.execute(
            RegisterProfileInput(
                user_id=req.user_id,
                first_name=req.first_name,
                last_name=req.last_name,
                email=req.email,
            )
        )
    except UserNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (IdentityLookupError, ProfileStoreError) as exc:
        raise HTTPException(status_code=500, detail="Failed to register user") from exc

    return RegisterProfileResponse()
