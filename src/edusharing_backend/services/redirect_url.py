"""
Construction of the rendering-proxy URL the browser is redirected to.
"""
import base64
import logging
from enum import Enum
from typing import Callable, List, Tuple
from urllib.parse import quote, quote_plus

from edusharing_backend.interface.context import RequestContext
from edusharing_backend.interface.edusharing import EdusharingResource
from edusharing_backend.settings import EdusharingSettings
from .auth_key import get_auth_key
from .encryption import encrypt_with_repo_key
from .identifiers import UnparsableReferenceError, get_object_id_from_url, get_repository_id_from_url
from .result import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

RENDERING_PROXY_PATH = "/renderingproxy"


class DisplayMode(str, Enum):
    DISPLAY = "window"
    INLINE = "inline"


def _value(value) -> str:
    return "" if value is None else str(value)


def _urlencode(value) -> str:
    # form encoding, "~" is escaped as well
    return quote_plus(_value(value), safe='').replace('~', '%7E')


def build_redirect_url(
    resource: EdusharingResource,
    context: RequestContext,
    settings: EdusharingSettings,
    display_mode: DisplayMode | str = DisplayMode.DISPLAY,
    encrypt: Callable[[str, str], bytes] = encrypt_with_repo_key,
) -> OperationResult[str]:
    """
    Build the redirect URL for ``resource``.

    Fails with ``UNPARSABLE_REFERENCE`` if the repository id cannot be taken
    from the object url. If the auth key cannot be encrypted the URL is still
    returned as value, with an empty token and ``ENCRYPTION_FAILURE``.
    """
    try:
        repository_id = get_repository_id_from_url(resource.object_url)
    except UnparsableReferenceError as e:
        logger.error(str(e))
        return OperationResult.failure(ErrorKind.UNPARSABLE_REFERENCE, str(e))

    if isinstance(display_mode, DisplayMode):
        display_mode = display_mode.value

    params: List[Tuple[str, str]] = [
        ("app_id", settings.application_appid),
        ("session", context.session_id),
        ("rep_id", repository_id),
        ("obj_id", get_object_id_from_url(resource.object_url)),
        ("resource_id", _value(resource.id)),
        ("course_id", _value(resource.course)),
    ]
    params.extend(("role", role) for role in context.roles)
    params.extend([
        ("display", display_mode),
        ("version", _value(resource.object_version)),
        # repository
        ("locale", context.language),
        # rendering service
        ("language", context.language),
    ])

    query = "&".join(f"{name}={_urlencode(value)}" for name, value in params)

    token = encrypt(get_auth_key(context, settings), settings.repository_public_key)
    query += "&u=" + quote(base64.b64encode(token).decode("ascii"), safe='')

    url = f"{settings.application_cc_gui_url}{RENDERING_PROXY_PATH}?{query}"
    if not token:
        return OperationResult(value=url, error=ErrorKind.ENCRYPTION_FAILURE, message="Empty auth token")
    return OperationResult.success(url)


def get_redirect_url(
    resource: EdusharingResource,
    context: RequestContext,
    settings: EdusharingSettings,
    display_mode: DisplayMode | str = DisplayMode.DISPLAY,
    encrypt: Callable[[str, str], bytes] = encrypt_with_repo_key,
) -> str:
    """Redirect URL for ``resource``, or an empty string if the object url is unparsable."""
    return build_redirect_url(resource, context, settings, display_mode, encrypt).value or ''
