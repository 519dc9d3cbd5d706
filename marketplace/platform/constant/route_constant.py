# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
CUSTOMER_REGISTER = f'{AUTH_BASE}/customer/register'
SELLER_REGISTER = f'{AUTH_BASE}/seller/register'
ADMIN_REGISTER = f'{AUTH_BASE}/admin/register'
ADMIN_LOGIN = f'{AUTH_BASE}/admin/login'
SELLER_LOGIN = f'{AUTH_BASE}/seller/login'
CUSTOMER_LOGIN = f'{AUTH_BASE}/customer/login'

# Role areas
ADMIN_BASE = f'{API_BASE}/admin'
SELLER_BASE = f'{API_BASE}/seller'
CUSTOMER_BASE = f'{API_BASE}/customer'

# Profile routes
SELLER_PROFILE = f'{SELLER_BASE}/profile'
CUSTOMER_PROFILE = f'{CUSTOMER_BASE}/profile'

# Seller management routes
ADMIN_SELLERS = f'{ADMIN_BASE}/sellers'
ADMIN_SELLER_GET = f'{ADMIN_SELLERS}/{{seller_id}}'
ADMIN_SELLER_UPDATE = f'{ADMIN_SELLERS}/{{seller_id}}'
ADMIN_SELLER_APPROVE = f'{ADMIN_SELLERS}/{{seller_id}}/approve'
ADMIN_SELLER_REJECT = f'{ADMIN_SELLERS}/{{seller_id}}/reject'
ADMIN_SELLER_DELETE = f'{ADMIN_SELLERS}/{{seller_id}}'

# Product routes
PRODUCT_BASE = f'{API_BASE}/products'
PRODUCT_LIST = PRODUCT_BASE
PRODUCT_SEARCH = f'{PRODUCT_BASE}/search'
PRODUCT_BY_CATEGORY = f'{PRODUCT_BASE}/category/{{category}}'
PRODUCT_GET = f'{PRODUCT_BASE}/{{product_id}}'
SELLER_PRODUCTS = f'{SELLER_BASE}/products'
SELLER_PRODUCT_UPDATE = f'{SELLER_PRODUCTS}/{{product_id}}'
SELLER_PRODUCT_DELETE = f'{SELLER_PRODUCTS}/{{product_id}}'
ADMIN_PRODUCTS = f'{ADMIN_BASE}/products'
ADMIN_PRODUCTS_PENDING = f'{ADMIN_PRODUCTS}/pending'
ADMIN_PRODUCT_APPROVE = f'{ADMIN_PRODUCTS}/{{product_id}}/approve'
ADMIN_PRODUCT_REJECT = f'{ADMIN_PRODUCTS}/{{product_id}}/reject'
ADMIN_PRODUCT_DELETE = f'{ADMIN_PRODUCTS}/{{product_id}}'

# Cart routes
CUSTOMER_CART = f'{CUSTOMER_BASE}/cart'

# Order routes
ORDER_BASE = f'{API_BASE}/orders'
ORDER_GET = f'{ORDER_BASE}/{{order_id}}'
CUSTOMER_ORDERS = f'{CUSTOMER_BASE}/orders'
CUSTOMER_ORDER_GET = f'{CUSTOMER_ORDERS}/{{order_id}}'
SELLER_ORDERS = f'{SELLER_BASE}/orders'
SELLER_ORDER_READY = f'{SELLER_ORDERS}/{{order_id}}/ready'
ADMIN_ORDERS = f'{ADMIN_BASE}/orders'
ADMIN_ORDERS_BY_STATUS = f'{ADMIN_ORDERS}/status/{{status}}'
ADMIN_ORDER_TRACKING = f'{ADMIN_ORDERS}/{{order_id}}/tracking'

# Dashboard routes
ADMIN_STATS = f'{ADMIN_BASE}/stats'
SELLER_STATS = f'{SELLER_BASE}/stats'
