from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from sqlalchemy.orm import Session
from edusharing_backend.interface.base import ListQuery
from edusharing_backend.model.edusharing import Edusharing

PERSISTED_FIELDS = tuple(column.name for column in Edusharing.__table__.columns)

def _version_to_str(v):
    if v is None:
        return v
    return str(v).strip()

class EdusharingCreate(BaseModel):
    course: Optional[int] = Field(None, description="Course id, defaults to the current course")
    name: Optional[str] = Field(None, max_length=255, description="Title shown in the course")
    intro: Optional[str] = Field(None, description="Description")
    introformat: Optional[int] = Field(None, description="Host text format of the description")
    object_url: str = Field(min_length=1, max_length=1024, description="Repository object reference (ccrep://repository/node)")
    object_version: Optional[str] = Field(None, description="Requested node version, '1' resolves the latest version")
    force_download: Optional[int] = Field(0, description="Offer the object as download")
    popup_window: Optional[int] = Field(0, description="Open the object in a popup window")
    tracking: Optional[int] = Field(0, description="Usage tracking flag")
    blockdisplay: Optional[int] = Field(0, description="Inline block display")
    options: Optional[str] = Field("", description="Display options")
    editor_atto: Optional[bool] = Field(None, description="Created from the legacy HTML editor integration")
    window_versionshow: Optional[str] = Field(None, description="'current' to pin window_version")
    window_version: Optional[str] = Field(None, description="Node version pinned by the form")

    @field_validator('object_version', 'window_version', mode='before')
    @classmethod
    def validate_version(cls, v):
        return _version_to_str(v)

    @field_validator('object_url')
    @classmethod
    def validate_object_url(cls, v):
        if not v.strip():
            raise ValueError('Object url cannot be empty or only whitespace')
        return v.strip()

class EdusharingUpdate(BaseModel):
    course: Optional[int] = None
    name: Optional[str] = Field(None, max_length=255)
    intro: Optional[str] = None
    introformat: Optional[int] = None
    object_url: Optional[str] = Field(None, min_length=1, max_length=1024)
    object_version: Optional[str] = None
    force_download: Optional[int] = None
    popup_window: Optional[int] = None
    tracking: Optional[int] = None
    blockdisplay: Optional[int] = None
    options: Optional[str] = None

    @field_validator('object_version', mode='before')
    @classmethod
    def validate_version(cls, v):
        return _version_to_str(v)

class EdusharingResource(EdusharingCreate):
    """
    Working copy of a resource record.

    Carries the persisted columns plus the transient form fields consumed while
    registering a usage.
    """
    id: Optional[int] = None
    instance: Optional[int] = None
    usage_id: Optional[str] = None
    module_id: Optional[int] = None
    section_id: Optional[int] = None
    timecreated: Optional[int] = None
    timemodified: Optional[int] = None
    timeupdated: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

    def column_values(self, exclude_none: bool = True) -> dict:
        """Values of the persisted columns, without the primary key."""
        return self.model_dump(include=set(PERSISTED_FIELDS) - {"id"}, exclude_none=exclude_none)

class EdusharingGet(BaseModel):
    id: int
    course: int
    name: Optional[str] = None
    intro: Optional[str] = None
    introformat: int = 0
    object_url: str
    object_version: str = ""
    usage_id: Optional[str] = None
    force_download: int = 0
    popup_window: int = 0
    tracking: int = 0
    blockdisplay: int = 0
    options: str = ""
    module_id: Optional[int] = None
    section_id: Optional[int] = None
    timecreated: int = 0
    timemodified: int = 0
    timeupdated: int = 0

    model_config = ConfigDict(from_attributes=True)

class EdusharingList(BaseModel):
    id: int
    course: int
    name: Optional[str] = None
    object_url: str
    object_version: str = ""
    usage_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class EdusharingQuery(ListQuery):
    id: Optional[int] = None
    course: Optional[int] = None
    object_url: Optional[str] = None
    usage_id: Optional[str] = None
    module_id: Optional[int] = None
    section_id: Optional[int] = None

def edusharing_search(db: Session, query, params: Optional[EdusharingQuery]):
    if params.id is not None:
        query = query.filter(Edusharing.id == params.id)
    if params.course is not None:
        query = query.filter(Edusharing.course == params.course)
    if params.object_url is not None:
        query = query.filter(Edusharing.object_url == params.object_url)
    if params.usage_id is not None:
        query = query.filter(Edusharing.usage_id == params.usage_id)
    if params.module_id is not None:
        query = query.filter(Edusharing.module_id == params.module_id)
    if params.section_id is not None:
        query = query.filter(Edusharing.section_id == params.section_id)
    return query
