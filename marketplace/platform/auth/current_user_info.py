import attrs


@attrs.define(frozen=True)
class CurrentUserInfo:
    """Caller identity decoded from the bearer token - avoids cross-domain dependencies"""

    user_id: int
    email: str
    role: str  # 'admin', 'seller' or 'customer'

    def is_admin(self) -> bool:
        return self.role == 'admin'

    def is_seller(self) -> bool:
        return self.role == 'seller'

    def is_customer(self) -> bool:
        return self.role == 'customer'
