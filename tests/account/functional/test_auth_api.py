"""Registration and login API tests."""

from marketplace.platform.constant.route_constant import (
    ADMIN_REGISTER,
    ADMIN_SELLER_REJECT,
    CUSTOMER_LOGIN,
    CUSTOMER_PROFILE,
    CUSTOMER_REGISTER,
    SELLER_LOGIN,
    SELLER_REGISTER,
)
from tests.shared.utils import (
    assert_response_status,
    auth_headers,
    login_admin,
    register_customer,
    register_seller,
)
from tests.util_constant import (
    DEFAULT_PASSWORD,
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
    TEST_CUSTOMER_EMAIL,
    TEST_SELLER_EMAIL,
)


class TestCustomerAuth:
    def test_register_returns_token_and_profile(self, client):
        data = register_customer(client)

        assert data['token']
        assert data['user']['email'] == TEST_CUSTOMER_EMAIL
        assert 'hashed_password' not in data['user']

        profile = client.get(CUSTOMER_PROFILE, headers=auth_headers(data['token']))
        assert_response_status(profile, 200)
        assert profile.json()['id'] == data['user']['id']

    def test_duplicate_email_is_rejected(self, client):
        register_customer(client)

        response = client.post(
            CUSTOMER_REGISTER,
            json={'email': TEST_CUSTOMER_EMAIL, 'password': DEFAULT_PASSWORD, 'name': 'Again'},
        )

        assert_response_status(response, 400)
        assert response.json()['message'] == 'Email already registered'

    def test_login_with_wrong_password(self, client):
        register_customer(client)

        response = client.post(
            CUSTOMER_LOGIN, json={'email': TEST_CUSTOMER_EMAIL, 'password': 'wrong-password'}
        )

        assert_response_status(response, 401)
        assert response.json()['message'] == 'Invalid email or password'

    def test_login_is_scoped_to_role(self, client):
        register_customer(client)

        response = client.post(
            SELLER_LOGIN, json={'email': TEST_CUSTOMER_EMAIL, 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 401)

    def test_invalid_email_is_a_bad_request(self, client):
        response = client.post(
            CUSTOMER_REGISTER,
            json={'email': 'not-an-email', 'password': DEFAULT_PASSWORD, 'name': 'X'},
        )

        assert_response_status(response, 400)
        assert response.json()['message'].startswith('email')

    def test_multibyte_password_over_72_bytes_is_a_bad_request(self, client):
        response = client.post(
            CUSTOMER_REGISTER,
            json={'email': TEST_CUSTOMER_EMAIL, 'password': 'é' * 60, 'name': 'Asha Buyer'},
        )

        assert_response_status(response, 400)
        assert response.json()['message'] == 'password: Password cannot be longer than 72 bytes'

    def test_multibyte_password_within_72_bytes_works(self, client):
        password = 'é' * 36
        register_customer(client, password=password)

        response = client.post(
            CUSTOMER_LOGIN, json={'email': TEST_CUSTOMER_EMAIL, 'password': password}
        )

        assert_response_status(response, 200)


class TestSellerAuth:
    def test_self_registered_seller_is_pending(self, client):
        response = client.post(
            SELLER_REGISTER,
            json={
                'email': TEST_SELLER_EMAIL,
                'password': DEFAULT_PASSWORD,
                'business_name': 'Kerala Spice Co.',
            },
        )

        assert_response_status(response, 201)
        body = response.json()
        assert 'token' not in body
        assert body['user']['status'] == 'pending'
        assert 'pending approval' in body['message']

    def test_pending_seller_cannot_login(self, client):
        register_seller(client)

        response = client.post(
            SELLER_LOGIN, json={'email': TEST_SELLER_EMAIL, 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 403)
        assert response.json()['message'] == 'Your account is pending approval'

    def test_rejected_seller_cannot_login(self, client):
        seller = register_seller(client)
        admin_token = login_admin(client)
        client.put(
            ADMIN_SELLER_REJECT.format(seller_id=seller['id']), headers=auth_headers(admin_token)
        )

        response = client.post(
            SELLER_LOGIN, json={'email': TEST_SELLER_EMAIL, 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 403)
        assert response.json()['message'] == 'Your account has been rejected'


class TestAdminAuth:
    def test_default_admin_is_seeded(self, client):
        assert login_admin(client)

    def test_admin_registers_another_admin(self, client):
        admin_token = login_admin(client)

        response = client.post(
            ADMIN_REGISTER,
            json={'email': TEST_ADMIN_EMAIL, 'password': DEFAULT_PASSWORD, 'name': TEST_ADMIN_NAME},
            headers=auth_headers(admin_token),
        )

        assert_response_status(response, 201)
        assert response.json()['email'] == TEST_ADMIN_EMAIL

    def test_admin_registration_requires_admin(self, client):
        customer_token = register_customer(client)['token']

        anonymous = client.post(
            ADMIN_REGISTER,
            json={'email': TEST_ADMIN_EMAIL, 'password': DEFAULT_PASSWORD, 'name': TEST_ADMIN_NAME},
        )
        as_customer = client.post(
            ADMIN_REGISTER,
            json={'email': TEST_ADMIN_EMAIL, 'password': DEFAULT_PASSWORD, 'name': TEST_ADMIN_NAME},
            headers=auth_headers(customer_token),
        )

        assert_response_status(anonymous, 401)
        assert anonymous.json()['message'] == 'Authentication required'
        assert_response_status(as_customer, 403)
        assert as_customer.json()['message'] == 'Access denied. Admin permission required.'

    def test_garbage_token(self, client):
        response = client.get(CUSTOMER_PROFILE, headers=auth_headers('not-a-jwt'))

        assert_response_status(response, 401)
        assert response.json()['message'] == 'Invalid or expired token'
