from .client import ValidationClient, build_request

__all__ = ["ValidationClient", "build_request"]
