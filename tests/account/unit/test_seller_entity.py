"""Seller approval lifecycle unit tests"""

import pytest

from marketplace.account.domain.account_entity import Seller, SellerStatus
from marketplace.platform.exception.exceptions import (
    ConflictError,
    ForbiddenError,
    ValidationError,
)


@pytest.fixture
def pending_seller():
    return Seller(email='spices@example.com', business_name='Kerala Spice Co.', id=1)


class TestSellerStatus:
    def test_self_registered_seller_is_pending(self, pending_seller):
        assert pending_seller.status == SellerStatus.PENDING

    def test_approve_then_reject(self, pending_seller):
        approved = pending_seller.approve()
        assert approved.status == SellerStatus.APPROVED

        rejected = approved.reject()
        assert rejected.status == SellerStatus.REJECTED
        assert not rejected.approved

    def test_approving_twice_conflicts(self, pending_seller):
        with pytest.raises(ConflictError, match='Seller is already approved'):
            pending_seller.approve().approve()

    def test_rejecting_twice_conflicts(self, pending_seller):
        with pytest.raises(ConflictError, match='Seller is already rejected'):
            pending_seller.reject().reject()

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            Seller(email='not-an-email', business_name='Shop')


class TestSellerLogin:
    def test_pending_seller_cannot_login(self, pending_seller):
        with pytest.raises(ForbiddenError, match='pending approval'):
            pending_seller.ensure_can_login()

    def test_rejected_seller_cannot_login(self, pending_seller):
        with pytest.raises(ForbiddenError, match='has been rejected'):
            pending_seller.reject().ensure_can_login()

    def test_approved_seller_can_login(self, pending_seller):
        pending_seller.approve().ensure_can_login()
