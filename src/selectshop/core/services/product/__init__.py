from .product_service import ProductRequest, ProductService

__all__ = ["ProductRequest", "ProductService"]
