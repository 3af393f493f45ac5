from ._base_service import BaseService
from ._request_builder import build_request
from .api_client import ApiClient

__all__ = ["ApiClient", "BaseService", "build_request"]
