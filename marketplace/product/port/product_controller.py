"""Product controllers: public catalog, seller listings and admin review."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from marketplace.account.use_case.role_auth_service import (
    get_optional_user,
    require_admin,
    require_seller,
)
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import Product
from marketplace.product.port.product_schema import (
    ProductCreateRequest,
    ProductDetailResponse,
    ProductResponse,
    ProductSellerInfo,
    ProductUpdateRequest,
)
from marketplace.product.use_case.product_use_case import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    ReviewProductUseCase,
    UpdateProductUseCase,
)


router = APIRouter()
seller_router = APIRouter()
admin_router = APIRouter()


def _to_responses(products: List[Product]) -> List[ProductResponse]:
    return [ProductResponse.model_validate(product) for product in products]


# === Public catalog ===


@router.get('', response_model=List[ProductResponse])
@Logger.io
async def list_products(
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> List[ProductResponse]:
    return _to_responses(await use_case.list_approved())


@router.get('/search', response_model=List[ProductResponse])
@Logger.io
async def search_products(
    query: Optional[str] = Query(None),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> List[ProductResponse]:
    return _to_responses(await use_case.search(query))


@router.get('/category/{category}', response_model=List[ProductResponse])
@Logger.io
async def list_products_by_category(
    category: str,
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> List[ProductResponse]:
    return _to_responses(await use_case.list_by_category(category))


@router.get('/{product_id}', response_model=ProductDetailResponse)
@Logger.io
async def get_product(
    product_id: int,
    viewer: Optional[CurrentUserInfo] = Depends(get_optional_user),
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductDetailResponse:
    product, seller_name = await use_case.get_with_seller(product_id, viewer=viewer)
    return ProductDetailResponse(
        **ProductResponse.model_validate(product).model_dump(),
        seller=ProductSellerInfo(id=product.seller_id, business_name=seller_name),
    )


# === Seller ===


@seller_router.get('', response_model=List[ProductResponse])
@Logger.io
async def list_my_products(
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> List[ProductResponse]:
    return _to_responses(await use_case.list_by_seller(current_user.user_id))


@seller_router.post('', response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductCreateRequest,
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.create(
        seller_id=current_user.user_id,
        name=request.name,
        description=request.description,
        category=request.category,
        price=request.price,
        quantity=request.quantity,
        image=request.image,
    )

    if product.id is None:
        raise ValueError('Product ID should not be None after creation.')

    return ProductResponse.model_validate(product)


@seller_router.put('/{product_id}', response_model=ProductResponse)
@Logger.io
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.update(
        product_id,
        seller_id=current_user.user_id,
        **request.model_dump(exclude_unset=True),
    )
    return ProductResponse.model_validate(product)


@seller_router.delete('/{product_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_my_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> None:
    await use_case.delete(product_id, seller_id=current_user.user_id)


# === Admin ===


@admin_router.get('/pending', response_model=List[ProductResponse])
@Logger.io
async def list_pending_products(
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: ReviewProductUseCase = Depends(ReviewProductUseCase.depends),
) -> List[ProductResponse]:
    return _to_responses(await use_case.list_pending())


@admin_router.put('/{product_id}/approve', response_model=ProductResponse)
@Logger.io
async def approve_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: ReviewProductUseCase = Depends(ReviewProductUseCase.depends),
) -> ProductResponse:
    return ProductResponse.model_validate(await use_case.approve(product_id))


@admin_router.put('/{product_id}/reject', response_model=ProductResponse)
@Logger.io
async def reject_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: ReviewProductUseCase = Depends(ReviewProductUseCase.depends),
) -> ProductResponse:
    return ProductResponse.model_validate(await use_case.reject(product_id))


@admin_router.delete('/{product_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> None:
    await use_case.delete(product_id)
