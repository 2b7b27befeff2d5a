from .productstore import ProductClient

__all__ = ["ProductClient"]
