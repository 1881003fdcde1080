from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class UsageRequest(BaseModel):
    container_id: int = Field(description="Course id the object is embedded in")
    resource_id: int = Field(description="Local resource record id")
    node_id: str = Field(description="Repository object id")
    node_version: Optional[str] = Field("", description="Requested node version, empty for latest")
    ticket: Optional[str] = Field(None, description="Repository session ticket")

    @field_validator('node_version', mode='before')
    @classmethod
    def validate_node_version(cls, v):
        return "" if v is None else str(v)

    def payload(self, app_id: str) -> dict:
        return {
            "appId": app_id,
            "courseId": str(self.container_id),
            "resourceId": str(self.resource_id),
            "nodeId": self.node_id,
            "nodeVersion": self.node_version,
        }

class UsageResponse(BaseModel):
    usage_id: str = Field(alias="usageId")
    node_version: Optional[str] = Field(None, alias="nodeVersion")

    @field_validator('usage_id', 'node_version', mode='before')
    @classmethod
    def validate_str(cls, v):
        return None if v is None else str(v)

    model_config = ConfigDict(populate_by_name=True)

class TicketResponse(BaseModel):
    ticket: str
