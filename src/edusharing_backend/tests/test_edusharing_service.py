import json
import pytest
import httpx

from edusharing_backend.interface.usage import UsageRequest
from edusharing_backend.services.edusharing_service import EduSharingService, RemoteCallError


def make_service(settings, handler) -> EduSharingService:
    return EduSharingService(settings, transport=httpx.MockTransport(handler))


class TestCreateUsage:
    """Test the createUsage call"""

    def test_posts_usage_payload(self, edusharing_settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json={"usageId": "u-17", "nodeVersion": "1.4"})

        service = make_service(edusharing_settings, handler)
        usage = service.create_usage(UsageRequest(
            container_id=3,
            resource_id=11,
            node_id="abc-123",
            node_version="",
            ticket="TICKET_1",
        ))

        assert usage.usage_id == "u-17"
        assert usage.node_version == "1.4"

        request = seen["request"]
        assert request.method == "POST"
        assert str(request.url) == "https://repo.example.org/edu-sharing/rest/usage/v1/usages/repository/-home-"
        assert request.headers["Authorization"] == "EDU-TICKET TICKET_1"
        assert request.headers["X-Edu-App-Id"] == "moodle-app"
        assert json.loads(request.content) == {
            "appId": "moodle-app",
            "courseId": "3",
            "resourceId": "11",
            "nodeId": "abc-123",
            "nodeVersion": "",
        }

    def test_without_ticket_sends_no_authorization(self, edusharing_settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json={"usageId": 5})

        usage = make_service(edusharing_settings, handler).create_usage(
            UsageRequest(container_id=3, resource_id=1, node_id="n")
        )

        assert usage.usage_id == "5"
        assert usage.node_version is None
        assert "Authorization" not in seen["request"].headers

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 500, 502, 503, 418])
    def test_error_status_raises_remote_call_error(self, edusharing_settings, status_code):
        service = make_service(edusharing_settings, lambda request: httpx.Response(status_code, json={"error": "nope"}))

        with pytest.raises(RemoteCallError) as excinfo:
            service.create_usage(UsageRequest(container_id=3, resource_id=1, node_id="n"))

        assert excinfo.value.operation == "createUsage"

    def test_unreachable_repository(self, edusharing_settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RemoteCallError):
            make_service(edusharing_settings, handler).create_usage(
                UsageRequest(container_id=3, resource_id=1, node_id="n")
            )

    def test_malformed_response(self, edusharing_settings):
        service = make_service(edusharing_settings, lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(RemoteCallError):
            service.create_usage(UsageRequest(container_id=3, resource_id=1, node_id="n"))


class TestGetTicket:
    """Test the ticket call"""

    def test_returns_ticket(self, edusharing_settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"ticket": "TICKET_xyz"})

        assert make_service(edusharing_settings, handler).get_ticket("j doe") == "TICKET_xyz"
        assert seen["url"].endswith("/rest/authentication/v1/appauth/j%20doe")

    def test_missing_ticket_field(self, edusharing_settings):
        service = make_service(edusharing_settings, lambda request: httpx.Response(200, json={}))

        with pytest.raises(RemoteCallError):
            service.get_ticket("jdoe")
