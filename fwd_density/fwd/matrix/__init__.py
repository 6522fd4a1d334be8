# fwd/matrix/__init__.py

from .dot_product import dot_product, to_dual

__all__ = ["dot_product", "to_dual"]
