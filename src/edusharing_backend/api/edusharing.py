import logging
from typing import List
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from edusharing_backend.api.context import get_request_context
from edusharing_backend.api.exceptions import (
    BadRequestException,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException
)
from edusharing_backend.database import get_db
from edusharing_backend.interface.context import RequestContext
from edusharing_backend.interface.edusharing import (
    EdusharingCreate,
    EdusharingGet,
    EdusharingList,
    EdusharingQuery,
    EdusharingResource,
    EdusharingUpdate
)
from edusharing_backend.repositories.base import NotFoundError, RepositoryError
from edusharing_backend.repositories.edusharing import EdusharingRepository
from edusharing_backend.services.edusharing_service import EduSharingService
from edusharing_backend.services.redirect_url import DisplayMode, build_redirect_url
from edusharing_backend.services.result import ErrorKind, OperationResult
from edusharing_backend.services.usage_registrar import UsageRegistrar
from edusharing_backend.settings import EdusharingSettings, get_edusharing_settings

logger = logging.getLogger(__name__)

edusharing_router = APIRouter(prefix="/edusharing", tags=["edusharing"])


class EdusharingCreated(BaseModel):
    id: int

class EdusharingUpdated(BaseModel):
    updated: bool

class RedirectUrl(BaseModel):
    url: str


def get_settings(db: Session = Depends(get_db)) -> EdusharingSettings:
    try:
        return get_edusharing_settings(db)
    except (RepositoryError, ValidationError) as e:
        logger.error(f"Could not load edusharing settings: {e}")
        raise InternalServerException(detail="Could not load edusharing settings")

def get_edusharing_service(settings: EdusharingSettings = Depends(get_settings)):
    service = EduSharingService(settings)
    try:
        yield service
    finally:
        service.close()

def get_usage_registrar(
    db: Session = Depends(get_db),
    settings: EdusharingSettings = Depends(get_settings),
    service: EduSharingService = Depends(get_edusharing_service)
) -> UsageRegistrar:
    return UsageRegistrar(EdusharingRepository(db), service, settings)


def raise_for_result(result: OperationResult):
    if result:
        return
    if result.error == ErrorKind.REMOTE_CALL_FAILURE:
        raise ServiceUnavailableException(detail="Repository usage registration failed")
    if result.error == ErrorKind.UNPARSABLE_REFERENCE:
        raise BadRequestException(detail="Invalid object url")
    if result.error == ErrorKind.ENCRYPTION_FAILURE:
        raise InternalServerException(detail="Could not encrypt auth key with repository public key")
    raise InternalServerException(detail="Could not store edusharing resource")


def load_resource(db: Session, resource_id: int) -> EdusharingResource:
    try:
        return EdusharingRepository(db).get_resource(resource_id)
    except NotFoundError:
        raise NotFoundException(detail=f"Edusharing resource {resource_id} not found")
    except RepositoryError as e:
        logger.error(str(e))
        raise InternalServerException()


@edusharing_router.get("", response_model=List[EdusharingList])
def list_edusharing(params: EdusharingQuery = Depends(), db: Session = Depends(get_db)):
    try:
        return EdusharingRepository(db).search(params)
    except RepositoryError as e:
        logger.error(str(e))
        raise InternalServerException()


@edusharing_router.get("/{resource_id}", response_model=EdusharingGet)
def get_edusharing(resource_id: int, db: Session = Depends(get_db)):
    return load_resource(db, resource_id)


@edusharing_router.post("", response_model=EdusharingCreated, status_code=201)
def create_edusharing(
    payload: EdusharingCreate,
    context: RequestContext = Depends(get_request_context),
    registrar: UsageRegistrar = Depends(get_usage_registrar)
):
    result = registrar.add_instance(EdusharingResource(**payload.model_dump()), context)
    raise_for_result(result)
    return EdusharingCreated(id=result.value)


@edusharing_router.patch("/{resource_id}", response_model=EdusharingUpdated)
def update_edusharing(
    resource_id: int,
    payload: EdusharingUpdate,
    context: RequestContext = Depends(get_request_context),
    registrar: UsageRegistrar = Depends(get_usage_registrar),
    db: Session = Depends(get_db)
):
    resource = load_resource(db, resource_id)
    resource = resource.model_copy(update=payload.model_dump(exclude_unset=True))
    # the path id is the only write target
    resource.id = resource_id
    resource.instance = resource_id

    result = registrar.update_instance(resource, context)
    raise_for_result(result)
    return EdusharingUpdated(updated=True)


@edusharing_router.get("/{resource_id}/redirect", response_model=RedirectUrl)
def redirect_edusharing(
    resource_id: int,
    display: DisplayMode = Query(DisplayMode.INLINE),
    context: RequestContext = Depends(get_request_context),
    settings: EdusharingSettings = Depends(get_settings),
    db: Session = Depends(get_db)
):
    result = build_redirect_url(load_resource(db, resource_id), context, settings, display)
    raise_for_result(result)
    return RedirectUrl(url=result.value)
