import pytest

from edusharing_backend.services.auth_key import DEFAULT_GUEST_ID, get_auth_key


class TestAuthKey:
    """Test resolution of the repository auth key"""

    def test_sso_wins_over_guest_and_field(self, request_context, edusharing_settings):
        request_context.sso = {"userid": "sso-user", "other": "x"}
        edusharing_settings.edu_guest_option = True
        edusharing_settings.edu_guest_guest_id = "guest"
        edusharing_settings.EDU_AUTH_KEY = "email"

        assert get_auth_key(request_context, edusharing_settings) == "sso-user"

    def test_sso_param_name_is_configurable(self, request_context, edusharing_settings):
        request_context.sso = {"uid": "u-1"}
        edusharing_settings.EDU_AUTH_PARAM_NAME_USERID = "uid"

        assert get_auth_key(request_context, edusharing_settings) == "u-1"

    def test_guest_id(self, request_context, edusharing_settings):
        edusharing_settings.edu_guest_option = True
        edusharing_settings.edu_guest_guest_id = "visitor"

        assert get_auth_key(request_context, edusharing_settings) == "visitor"

    def test_guest_default_id(self, request_context, edusharing_settings):
        edusharing_settings.edu_guest_option = True

        assert get_auth_key(request_context, edusharing_settings) == DEFAULT_GUEST_ID == "esguest"

    @pytest.mark.parametrize("auth_key,expected", [
        ("id", "7"),
        ("idnumber", "A-100"),
        ("email", "jdoe@example.org"),
        ("matrikel", "0815"),
        ("username", "jdoe"),
        ("unknown", "jdoe"),
        ("", "jdoe"),
    ])
    def test_user_field_selection(self, request_context, edusharing_settings, auth_key, expected):
        edusharing_settings.EDU_AUTH_KEY = auth_key

        assert get_auth_key(request_context, edusharing_settings) == expected

    def test_empty_sso_is_ignored(self, request_context, edusharing_settings):
        request_context.sso = {}

        assert get_auth_key(request_context, edusharing_settings) == "jdoe"
