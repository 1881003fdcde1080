from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

class UserIdentity(BaseModel):
    id: str = Field(description="Host user id")
    username: str = Field(description="Login name")
    idnumber: Optional[str] = Field(None, description="Alternate identifier")
    email: Optional[str] = Field(None, description="Email address")
    profile: Dict[str, Any] = Field(default_factory=dict, description="Custom profile fields")

    @field_validator('id', 'idnumber', mode='before')
    @classmethod
    def validate_identifier(cls, v):
        return None if v is None else str(v)

class RequestContext(BaseModel):
    """Request-scoped state supplied by the host application."""
    session_id: str = Field(description="Host session id")
    user: UserIdentity
    course_id: Optional[int] = Field(None, description="Current course")
    roles: List[str] = Field(default_factory=list, description="Role short names held in the course")
    sso: Optional[Dict[str, Any]] = Field(None, description="Session data set by an external SSO script")
    language: str = Field("en", description="Current language")
