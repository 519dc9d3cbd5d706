"""Cart API tests."""

from decimal import Decimal

from marketplace.platform.constant.route_constant import (
    ADMIN_PRODUCT_DELETE,
    CUSTOMER_CART,
)
from tests.shared.utils import (
    assert_response_status,
    auth_headers,
    create_approved_product,
    create_approved_seller,
    create_product,
    login_admin,
    register_customer,
    set_cart,
)


class TestCart:
    def test_new_customer_has_empty_cart(self, client):
        token = register_customer(client)['token']

        response = client.get(CUSTOMER_CART, headers=auth_headers(token))

        assert_response_status(response, 200)
        assert response.json() == {'items': []}

    def test_replace_cart_returns_current_product_info(self, client):
        admin_token = login_admin(client)
        seller = create_approved_seller(client, admin_token)
        product = create_approved_product(client, seller['token'], admin_token)
        token = register_customer(client)['token']

        response = set_cart(
            client, token, [{'product_id': product['id'], 'quantity': 2, 'message': 'Gift wrap'}]
        )

        assert_response_status(response, 200)
        [line] = response.json()['items']
        assert line['quantity'] == 2
        assert line['message'] == 'Gift wrap'
        assert line['product']['name'] == product['name']
        assert Decimal(line['product']['price']) == Decimal('500.00')

        # Posting again replaces rather than merges
        set_cart(client, token, [{'product_id': product['id'], 'quantity': 1}])
        items = client.get(CUSTOMER_CART, headers=auth_headers(token)).json()['items']
        assert [(i['product_id'], i['quantity']) for i in items] == [(product['id'], 1)]

    def test_quantity_above_stock_is_rejected(self, client):
        admin_token = login_admin(client)
        seller = create_approved_seller(client, admin_token)
        product = create_approved_product(client, seller['token'], admin_token, quantity=2)
        token = register_customer(client)['token']

        response = set_cart(client, token, [{'product_id': product['id'], 'quantity': 3}])

        assert_response_status(response, 400)
        assert response.json()['message'] == f'Not enough quantity available for {product["name"]}'
        assert client.get(CUSTOMER_CART, headers=auth_headers(token)).json() == {'items': []}

    def test_pending_product_cannot_be_added(self, client):
        admin_token = login_admin(client)
        seller = create_approved_seller(client, admin_token)
        product = create_product(client, seller['token'])
        token = register_customer(client)['token']

        response = set_cart(client, token, [{'product_id': product['id'], 'quantity': 1}])

        assert_response_status(response, 400)
        assert 'is not available for purchase' in response.json()['message']

    def test_unknown_product(self, client):
        token = register_customer(client)['token']

        response = set_cart(client, token, [{'product_id': 424242, 'quantity': 1}])

        assert_response_status(response, 400)
        assert response.json()['message'] == 'Product with ID 424242 not found'

    def test_deleted_product_shows_placeholder(self, client):
        admin_token = login_admin(client)
        seller = create_approved_seller(client, admin_token)
        product = create_approved_product(client, seller['token'], admin_token)
        token = register_customer(client)['token']
        set_cart(client, token, [{'product_id': product['id'], 'quantity': 1}])
        client.delete(
            ADMIN_PRODUCT_DELETE.format(product_id=product['id']),
            headers=auth_headers(admin_token),
        )

        [line] = client.get(CUSTOMER_CART, headers=auth_headers(token)).json()['items']

        assert line['product']['name'] == 'Product not available'
        assert Decimal(line['product']['price']) == 0

    def test_seller_has_no_cart(self, client):
        seller = create_approved_seller(client, login_admin(client))

        response = client.get(CUSTOMER_CART, headers=auth_headers(seller['token']))

        assert_response_status(response, 403)
