from fastapi import Depends, HTTPException, Request

from airgate.config import settings
from airgate.services.auth_service import AuthenticationService
from airgate.services.gateway import AirlinesGateway


def get_gateway(request: Request) -> AirlinesGateway:
    return request.app.state.gateway


def get_auth_service() -> AuthenticationService:
    return AuthenticationService(settings.auth_cookie_name, settings.auth_tokens)


def require_auth_cookie(
    request: Request,
    auth: AuthenticationService = Depends(get_auth_service),
) -> None:
    if not auth.check(request.headers.getlist("cookie")):
        raise HTTPException(status_code=401, detail="Unauthorized User")
