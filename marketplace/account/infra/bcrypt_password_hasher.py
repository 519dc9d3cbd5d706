import bcrypt
from pydantic import SecretStr

from marketplace.account.domain.password_hasher import PasswordHasher
from marketplace.platform.exception.exceptions import ValidationError


class BcryptPasswordHasher(PasswordHasher):
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > 72:
            raise ValidationError('Password cannot be longer than 72 bytes')
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt())
        return hashed.decode('utf-8')

    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        try:
            return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
        except ValueError:
            # Malformed stored hash
            return False
