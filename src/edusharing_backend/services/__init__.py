"""
Service layer for the repository integration.
"""

from .edusharing_service import EduSharingService, RemoteCallError
from .redirect_url import DisplayMode, build_redirect_url, get_redirect_url
from .result import ErrorKind, OperationResult
from .usage_registrar import UsageRegistrar, post_process_edusharing_object

__all__ = [
    "EduSharingService",
    "RemoteCallError",
    "DisplayMode",
    "build_redirect_url",
    "get_redirect_url",
    "ErrorKind",
    "OperationResult",
    "UsageRegistrar",
    "post_process_edusharing_object",
]
