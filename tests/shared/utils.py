from typing import Any, Dict

from fastapi.testclient import TestClient

from marketplace.platform.config.core_setting import settings
from marketplace.platform.constant.route_constant import (
    ADMIN_LOGIN,
    ADMIN_PRODUCT_APPROVE,
    ADMIN_SELLER_APPROVE,
    CUSTOMER_CART,
    CUSTOMER_LOGIN,
    CUSTOMER_ORDERS,
    CUSTOMER_REGISTER,
    SELLER_LOGIN,
    SELLER_PRODUCTS,
    SELLER_REGISTER,
)
from tests.util_constant import (
    DEFAULT_PASSWORD,
    TEST_ADDRESS,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
    TEST_PRODUCT_CATEGORY,
    TEST_PRODUCT_DESCRIPTION,
    TEST_PRODUCT_NAME,
    TEST_PRODUCT_PRICE,
    TEST_PRODUCT_QUANTITY,
    TEST_SELLER_BUSINESS,
    TEST_SELLER_EMAIL,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response.text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def login_admin(client: TestClient) -> str:
    response = client.post(
        ADMIN_LOGIN,
        json={
            'email': settings.DEFAULT_ADMIN_EMAIL,
            'password': settings.DEFAULT_ADMIN_PASSWORD.get_secret_value(),
        },
    )
    assert_response_status(response, 200, f'Admin login failed: {response.text}')
    return response.json()['token']


def register_customer(
    client: TestClient,
    email: str = TEST_CUSTOMER_EMAIL,
    name: str = TEST_CUSTOMER_NAME,
    password: str = DEFAULT_PASSWORD,
) -> Dict[str, Any]:
    response = client.post(
        CUSTOMER_REGISTER,
        json={'email': email, 'password': password, 'name': name, 'address': TEST_ADDRESS},
    )
    assert_response_status(response, 201, 'Failed to register customer')
    return response.json()


def login_customer(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(CUSTOMER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Customer login failed: {response.text}')
    return response.json()['token']


def register_seller(
    client: TestClient,
    email: str = TEST_SELLER_EMAIL,
    business_name: str = TEST_SELLER_BUSINESS,
    password: str = DEFAULT_PASSWORD,
) -> Dict[str, Any]:
    response = client.post(
        SELLER_REGISTER,
        json={
            'email': email,
            'password': password,
            'business_name': business_name,
            'warehouse_address': 'Plot 4, Kochi',
            'zip_code': '682001',
        },
    )
    assert_response_status(response, 201, 'Failed to register seller')
    return response.json()['user']


def create_approved_seller(
    client: TestClient,
    admin_token: str,
    email: str = TEST_SELLER_EMAIL,
    business_name: str = TEST_SELLER_BUSINESS,
) -> Dict[str, Any]:
    """Register a seller, approve it and return the seller with a login token."""
    seller = register_seller(client, email=email, business_name=business_name)
    response = client.put(
        ADMIN_SELLER_APPROVE.format(seller_id=seller['id']), headers=auth_headers(admin_token)
    )
    assert_response_status(response, 200, 'Failed to approve seller')
    login = client.post(SELLER_LOGIN, json={'email': email, 'password': DEFAULT_PASSWORD})
    assert_response_status(login, 200, f'Seller login failed: {login.text}')
    return {**login.json()['user'], 'token': login.json()['token']}


def create_product(
    client: TestClient,
    seller_token: str,
    name: str = TEST_PRODUCT_NAME,
    price: str = TEST_PRODUCT_PRICE,
    quantity: int = TEST_PRODUCT_QUANTITY,
    category: str = TEST_PRODUCT_CATEGORY,
    description: str = TEST_PRODUCT_DESCRIPTION,
) -> Dict[str, Any]:
    response = client.post(
        SELLER_PRODUCTS,
        json={
            'name': name,
            'description': description,
            'category': category,
            'price': price,
            'quantity': quantity,
            'image': 'https://cdn.example.com/product.jpg',
        },
        headers=auth_headers(seller_token),
    )
    assert_response_status(response, 201, 'Failed to create product')
    return response.json()


def create_approved_product(
    client: TestClient, seller_token: str, admin_token: str, **product_fields: Any
) -> Dict[str, Any]:
    product = create_product(client, seller_token, **product_fields)
    response = client.put(
        ADMIN_PRODUCT_APPROVE.format(product_id=product['id']), headers=auth_headers(admin_token)
    )
    assert_response_status(response, 200, 'Failed to approve product')
    return response.json()


def set_cart(client: TestClient, customer_token: str, items: list):
    return client.post(CUSTOMER_CART, json={'items': items}, headers=auth_headers(customer_token))


def place_order(client: TestClient, customer_token: str, address: str = TEST_ADDRESS):
    return client.post(
        CUSTOMER_ORDERS, json={'address': address}, headers=auth_headers(customer_token)
    )
