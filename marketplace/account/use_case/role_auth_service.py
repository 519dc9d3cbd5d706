from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketplace.account.domain.account_entity import AccountRole
from marketplace.account.use_case.jwt_auth_service import jwt_auth_service
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.exception.exceptions import AuthenticationError, ForbiddenError
from marketplace.platform.logging.loguru_io import Logger


bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthService:
    @staticmethod
    def has_role(user: CurrentUserInfo, role: AccountRole) -> bool:
        return user.role == role.value

    @staticmethod
    def ensure_role(user: CurrentUserInfo, role: AccountRole) -> CurrentUserInfo:
        if not RoleAuthService.has_role(user, role):
            raise ForbiddenError(f'Access denied. {role.value.capitalize()} permission required.')
        return user


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUserInfo:
    if credentials is None:
        if request.headers.get('Authorization'):
            raise AuthenticationError('Authentication format invalid')
        raise AuthenticationError('Authentication required')
    return jwt_auth_service.to_user_info(credentials.credentials)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[CurrentUserInfo]:
    """Public endpoints: a valid token widens visibility, a bad one is ignored."""
    if credentials is None:
        return None
    try:
        return jwt_auth_service.to_user_info(credentials.credentials)
    except AuthenticationError:
        return None


@Logger.io
def require_admin(current_user: CurrentUserInfo = Depends(get_current_user)) -> CurrentUserInfo:
    return RoleAuthService.ensure_role(current_user, AccountRole.ADMIN)


@Logger.io
def require_seller(current_user: CurrentUserInfo = Depends(get_current_user)) -> CurrentUserInfo:
    return RoleAuthService.ensure_role(current_user, AccountRole.SELLER)


@Logger.io
def require_customer(current_user: CurrentUserInfo = Depends(get_current_user)) -> CurrentUserInfo:
    return RoleAuthService.ensure_role(current_user, AccountRole.CUSTOMER)
