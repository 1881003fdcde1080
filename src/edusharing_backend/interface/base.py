from typing import Optional
from pydantic import BaseModel

class ListQuery(BaseModel):
    skip: Optional[int] = 0
    limit: Optional[int] = 100
