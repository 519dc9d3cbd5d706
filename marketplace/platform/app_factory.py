"""
Shared FastAPI App Factory

Builds the marketplace app for production and tests.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.account.port import auth_controller, profile_controller, seller_admin_controller
from marketplace.cart.port import cart_controller
from marketplace.dashboard.port import stats_controller
from marketplace.order.port import order_controller
from marketplace.platform.config.core_setting import settings
from marketplace.platform.constant.route_constant import (
    ADMIN_ORDERS,
    ADMIN_PRODUCTS,
    ADMIN_SELLERS,
    ADMIN_STATS,
    AUTH_BASE,
    CUSTOMER_BASE,
    CUSTOMER_CART,
    CUSTOMER_ORDERS,
    ORDER_BASE,
    PRODUCT_BASE,
    SELLER_BASE,
    SELLER_ORDERS,
    SELLER_PRODUCTS,
    SELLER_STATS,
)
from marketplace.platform.exception.exception_handlers import register_exception_handlers
from marketplace.product.port import product_controller


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Marketplace connecting sellers with customers',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    # Auth and profiles
    app.include_router(auth_controller.router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(profile_controller.seller_router, prefix=SELLER_BASE, tags=['seller'])
    app.include_router(profile_controller.customer_router, prefix=CUSTOMER_BASE, tags=['customer'])
    app.include_router(seller_admin_controller.router, prefix=ADMIN_SELLERS, tags=['admin'])

    # Catalogue
    app.include_router(product_controller.router, prefix=PRODUCT_BASE, tags=['product'])
    app.include_router(product_controller.seller_router, prefix=SELLER_PRODUCTS, tags=['seller'])
    app.include_router(product_controller.admin_router, prefix=ADMIN_PRODUCTS, tags=['admin'])

    # Cart and orders
    app.include_router(cart_controller.router, prefix=CUSTOMER_CART, tags=['customer'])
    app.include_router(order_controller.router, prefix=ORDER_BASE, tags=['order'])
    app.include_router(order_controller.customer_router, prefix=CUSTOMER_ORDERS, tags=['customer'])
    app.include_router(order_controller.seller_router, prefix=SELLER_ORDERS, tags=['seller'])
    app.include_router(order_controller.admin_router, prefix=ADMIN_ORDERS, tags=['admin'])

    # Dashboards
    app.include_router(stats_controller.admin_router, prefix=ADMIN_STATS, tags=['admin'])
    app.include_router(stats_controller.seller_router, prefix=SELLER_STATS, tags=['seller'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
