"""
Usage registration for embedded repository objects.

Creating or updating a resource record registers a usage at the repository.
The local record is kept consistent with the remote state: a failed
registration removes a freshly inserted record, or restores the snapshot
taken before an update.
"""
import logging
import time
from typing import Callable, Optional

from ..interface.context import RequestContext
from ..interface.edusharing import EdusharingResource
from ..interface.usage import UsageRequest
from ..repositories.base import RepositoryError
from ..repositories.edusharing import EdusharingRepository
from ..settings import EdusharingSettings
from .auth_key import get_auth_key
from .edusharing_service import EduSharingService, RemoteCallError
from .identifiers import get_object_id_from_url
from .result import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

LATEST_VERSION = "0"
VERSION_SHOW_CURRENT = "current"


def _requests_version_update(object_version: Optional[str]) -> bool:
    # "1" asks for the version the repository resolves during registration
    try:
        return int(float(str(object_version).strip())) == 1
    except (ValueError, OverflowError):
        return False


def _error_kind(exception: Exception) -> ErrorKind:
    if isinstance(exception, RemoteCallError):
        return ErrorKind.REMOTE_CALL_FAILURE
    return ErrorKind.STORE_FAILURE


def post_process_edusharing_object(resource: EdusharingResource, context: RequestContext, now: int) -> EdusharingResource:
    """
    Normalize timestamps and display flags of a resource in place.

    Force download, popup window and block display exclude each other.
    Applying it twice with the same ``now`` changes nothing.
    """
    if not resource.timecreated:
        resource.timecreated = now
    resource.timeupdated = now

    if resource.force_download:
        resource.force_download = 1
        resource.popup_window = 0
    elif resource.popup_window:
        resource.force_download = 0
        resource.options = ''
    else:
        if not resource.blockdisplay:
            resource.options = ''
        resource.popup_window = 0

    resource.tracking = resource.tracking or 0

    if not resource.course:
        resource.course = context.course_id

    return resource


class UsageRegistrar:
    """Creates and updates resource records together with their repository usage."""

    def __init__(
        self,
        repository: EdusharingRepository,
        service: EduSharingService,
        settings: EdusharingSettings,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.repository = repository
        self.service = service
        self.settings = settings
        self.clock = clock or (lambda: int(time.time()))

    def _usage_request(self, resource: EdusharingResource) -> UsageRequest:
        return UsageRequest(
            container_id=resource.course,
            resource_id=resource.id,
            node_id=get_object_id_from_url(resource.object_url),
            node_version=resource.object_version,
        )

    def add_instance(self, resource: EdusharingResource, context: RequestContext) -> OperationResult[int]:
        """
        Insert a new resource record and register its usage.

        Returns the new record id. If the registration fails the inserted
        record is deleted again.
        """
        now = self.clock()
        resource.timecreated = now
        resource.timemodified = now

        post_process_edusharing_object(resource, context, now)
        update_version = False

        # legacy editor integration: simple version handling
        if resource.editor_atto is not None:
            resource.introformat = 0
        elif resource.object_version is not None:
            if _requests_version_update(resource.object_version):
                update_version = True
                resource.object_version = ''
            else:
                resource.object_version = LATEST_VERSION
        elif resource.window_versionshow == VERSION_SHOW_CURRENT and resource.window_version:
            resource.object_version = resource.window_version
        else:
            resource.object_version = LATEST_VERSION

        try:
            record = self.repository.insert_resource(resource)
        except RepositoryError as e:
            logger.error(f"Could not insert edusharing resource: {e}")
            return OperationResult.failure(ErrorKind.STORE_FAILURE, str(e))

        resource.id = record.id

        try:
            usage = self.service.create_usage(self._usage_request(resource))
            resource.usage_id = usage.usage_id
            if update_version:
                resource.object_version = usage.node_version or ''
            self.repository.update_resource(resource)
        except (RemoteCallError, RepositoryError) as e:
            logger.error(f"Usage registration for edusharing resource {record.id} failed: {e}")
            try:
                self.repository.delete_by(id=record.id)
            except RepositoryError as delete_error:
                logger.error(f"Could not delete edusharing resource {record.id} after failed registration: {delete_error}")
            return OperationResult.failure(_error_kind(e), str(e))

        return OperationResult.success(record.id)

    def update_instance(self, resource: EdusharingResource, context: RequestContext) -> OperationResult[bool]:
        """
        Refresh the usage of an existing resource record and persist it.

        The persisted record is snapshotted first and written back if the
        registration fails.
        """
        # module edit forms submit the record id as "instance"
        if resource.instance:
            resource.id = resource.instance

        post_process_edusharing_object(resource, context, self.clock())
        resource.timemodified = resource.timeupdated

        try:
            memento = self.repository.get_resource(resource.id)
            if resource.course is None:
                resource.course = memento.course
            usage_request = self._usage_request(resource)
            usage_request.ticket = self.service.get_ticket(get_auth_key(context, self.settings))
        except (RemoteCallError, RepositoryError) as e:
            logger.error(f"Could not prepare usage update for edusharing resource {resource.id}: {e}")
            return OperationResult.failure(_error_kind(e), str(e))

        try:
            usage = self.service.create_usage(usage_request)
            resource.usage_id = usage.usage_id
            self.repository.update_resource(resource)
        except (RemoteCallError, RepositoryError) as e:
            logger.error(f"Usage update for edusharing resource {resource.id} failed: {e}")
            try:
                self.repository.restore_resource(memento)
            except RepositoryError as rollback_error:
                logger.error(f"Could not restore edusharing resource {resource.id}: {rollback_error}")
            return OperationResult.failure(_error_kind(e), str(e))

        return OperationResult.success(True)
