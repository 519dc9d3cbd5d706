"""JWT, role guard and password hashing unit tests"""

from unittest.mock import Mock

from fastapi.security import HTTPAuthorizationCredentials
from pydantic import SecretStr
import pytest

from marketplace.account.domain.account_entity import AccountRole
from marketplace.account.infra.bcrypt_password_hasher import BcryptPasswordHasher
from marketplace.account.use_case.jwt_auth_service import JwtAuthService
from marketplace.account.use_case.role_auth_service import (
    RoleAuthService,
    get_current_user,
    get_optional_user,
)
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.exception.exceptions import (
    AuthenticationError,
    ForbiddenError,
    ValidationError,
)


@pytest.fixture
def auth_service():
    return JwtAuthService(
        secret='unit-test-secret-0123456789abcdef', algorithm='HS256', expire_minutes=5
    )


def make_request(authorization: str | None = None):
    request = Mock()
    request.headers = {'Authorization': authorization} if authorization else {}
    return request


class TestJwtAuthService:
    def test_token_round_trip(self, auth_service):
        token = auth_service.create_token(user_id=3, email='a@b.com', role='seller')

        user = auth_service.to_user_info(token)

        assert user == CurrentUserInfo(user_id=3, email='a@b.com', role='seller')
        assert user.is_seller()
        assert auth_service.decode_token(token)['sub'] == '3'

    def test_expired_token(self, auth_service):
        expired = JwtAuthService(
            secret='unit-test-secret-0123456789abcdef', algorithm='HS256', expire_minutes=-1
        )
        token = expired.create_token(user_id=3, email='a@b.com', role='seller')

        with pytest.raises(AuthenticationError, match='Invalid or expired token'):
            auth_service.to_user_info(token)

    def test_token_signed_with_other_secret(self, auth_service):
        other = JwtAuthService(
            secret='another-secret-0123456789abcdefgh', algorithm='HS256', expire_minutes=5
        )
        token = other.create_token(user_id=3, email='a@b.com', role='admin')

        with pytest.raises(AuthenticationError):
            auth_service.to_user_info(token)


class TestRoleGuards:
    def test_matching_role_passes(self):
        user = CurrentUserInfo(user_id=1, email='admin@x.com', role='admin')

        assert RoleAuthService.ensure_role(user, AccountRole.ADMIN) is user

    def test_wrong_role_is_forbidden(self):
        user = CurrentUserInfo(user_id=1, email='c@x.com', role='customer')

        with pytest.raises(ForbiddenError, match='Access denied. Seller permission required.'):
            RoleAuthService.ensure_role(user, AccountRole.SELLER)

    def test_missing_header(self):
        with pytest.raises(AuthenticationError, match='Authentication required'):
            get_current_user(make_request(), None)

    def test_malformed_header(self):
        with pytest.raises(AuthenticationError, match='Authentication format invalid'):
            get_current_user(make_request('Token abc'), None)

    def test_optional_user_ignores_bad_token(self):
        credentials = HTTPAuthorizationCredentials(scheme='Bearer', credentials='garbage')

        assert get_optional_user(credentials) is None
        assert get_optional_user(None) is None


class TestBcryptPasswordHasher:
    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher()

        hashed = hasher.hash_password(plain_password=SecretStr('Admin@123'))

        assert hashed != 'Admin@123'
        assert hasher.verify_password(plain_password=SecretStr('Admin@123'), hashed_password=hashed)
        assert not hasher.verify_password(
            plain_password=SecretStr('wrong'), hashed_password=hashed
        )

    def test_malformed_hash_never_verifies(self):
        hasher = BcryptPasswordHasher()

        assert not hasher.verify_password(plain_password=SecretStr('x'), hashed_password='')
        assert not hasher.verify_password(
            plain_password=SecretStr('x'), hashed_password='not-a-hash'
        )

    def test_password_over_72_bytes_cannot_be_hashed(self):
        hasher = BcryptPasswordHasher()

        with pytest.raises(ValidationError, match='Password cannot be longer than 72 bytes'):
            hasher.hash_password(plain_password=SecretStr('é' * 37))
