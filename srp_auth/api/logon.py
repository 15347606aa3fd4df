from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from srp_auth.core.provider import SrpAuthenticationProvider
from srp_auth.schemas.api import AuthRequest, AuthResponse

# new APIRouter instance for SRP logon
router = APIRouter(prefix="/auth/srp", tags=["SRP"])


def get_auth_provider(request: Request) -> SrpAuthenticationProvider:
    # set by create_app()
    return request.app.state.auth_provider


# POST /auth/srp/logon => one SRP round trip (step 1 or step 2) ===========================================================
@router.post(
        "/logon",
        summary="Run one step of the SRP-6a handshake",
        response_model=AuthResponse,
        responses={
            200: {"description": "Step accepted (step 1) or authentication completed (step 2)"},
            401: {"description": "Malformed request, unknown step, expired session or bad credentials"}
        }
)
def logon(data: AuthRequest, provider: SrpAuthenticationProvider = Depends(get_auth_provider)):
    response = provider.authenticate(data)
    return JSONResponse(
        status_code=status.HTTP_200_OK if response.success else status.HTTP_401_UNAUTHORIZED,
        content=response.model_dump(mode="json")
    )
