"""
Client for the repository usage API.
"""
import logging
from typing import Optional
from urllib.parse import quote
from fastapi import HTTPException
from httpx import BaseTransport, Client, HTTPError, Response
from pydantic import ValidationError

from ..api.exceptions import response_to_http_exception
from ..interface.usage import TicketResponse, UsageRequest, UsageResponse
from ..settings import EdusharingSettings, settings as backend_settings

logger = logging.getLogger(__name__)

HOME_REPOSITORY = "-home-"
TICKET_AUTH_SCHEME = "EDU-TICKET"


class RemoteCallError(Exception):
    """Raised when the repository could not be reached or rejected the call."""

    def __init__(self, operation: str, reason: str, status_code: Optional[int] = None):
        super().__init__(f"Repository call '{operation}' failed: {reason}")
        self.operation = operation
        self.status_code = status_code


def raise_if_response_is_error(response: Response):
    if response.is_error:
        try:
            details = response.json()
        except ValueError:
            details = response.text
        response_exception = response_to_http_exception(response.status_code, details)
        if response_exception is not None:
            raise response_exception
        response.raise_for_status()


class EduSharingService:
    """Blocking calls against ``{application_cc_gui_url}/rest``. No retries."""

    def __init__(self, settings: EdusharingSettings, transport: Optional[BaseTransport] = None, timeout: Optional[float] = None):
        self.settings = settings
        self.client = Client(
            base_url=f"{settings.application_cc_gui_url}/rest/",
            timeout=timeout if timeout is not None else backend_settings.REPOSITORY_TIMEOUT,
            transport=transport,
            headers={"Accept": "application/json", "X-Edu-App-Id": settings.application_appid},
        )

    def _request(self, operation: str, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.client.request(method, url, **kwargs)
            raise_if_response_is_error(response)
            return response
        except HTTPException as e:
            raise RemoteCallError(operation, str(e.detail), e.status_code) from e
        except HTTPError as e:
            raise RemoteCallError(operation, str(e)) from e

    def create_usage(self, usage: UsageRequest) -> UsageResponse:
        """Register (or refresh) the usage of a node by a course resource."""
        headers = {}
        if usage.ticket:
            headers["Authorization"] = f"{TICKET_AUTH_SCHEME} {usage.ticket}"

        response = self._request(
            "createUsage",
            "POST",
            f"usage/v1/usages/repository/{HOME_REPOSITORY}",
            json=usage.payload(self.settings.application_appid),
            headers=headers,
        )

        try:
            result = UsageResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteCallError("createUsage", f"unexpected response: {e}") from e

        logger.info(f"Registered usage {result.usage_id} for node {usage.node_id} in course {usage.container_id}")
        return result

    def get_ticket(self, user_id: str) -> str:
        """Fetch a repository session ticket for ``user_id``."""
        response = self._request(
            "getTicket",
            "POST",
            f"authentication/v1/appauth/{quote(user_id, safe='')}",
        )

        try:
            return TicketResponse.model_validate(response.json()).ticket
        except (ValueError, ValidationError) as e:
            raise RemoteCallError("getTicket", f"unexpected response: {e}") from e

    def close(self):
        self.client.close()
