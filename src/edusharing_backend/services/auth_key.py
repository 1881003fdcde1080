from edusharing_backend.interface.context import RequestContext
from edusharing_backend.settings import EdusharingSettings

DEFAULT_GUEST_ID = "esguest"


def get_auth_key(context: RequestContext, settings: EdusharingSettings) -> str:
    """
    Resolve the identity string the repository authenticates the caller with.

    SSO session data wins over guest mode, guest mode wins over the
    configured user attribute. Falls back to the username.
    """
    # Set by an external sso script
    if context.sso:
        value = context.sso.get(settings.EDU_AUTH_PARAM_NAME_USERID)
        return "" if value is None else str(value)

    if settings.edu_guest_option:
        return settings.edu_guest_guest_id or DEFAULT_GUEST_ID

    user = context.user
    auth_key = settings.EDU_AUTH_KEY

    if auth_key == "id":
        return user.id
    if auth_key == "idnumber":
        return user.idnumber or ""
    if auth_key == "email":
        return user.email or ""
    if auth_key in user.profile:
        return str(user.profile[auth_key])
    return user.username
