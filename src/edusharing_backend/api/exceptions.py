from fastapi import HTTPException, status
from typing import Any, Dict, Optional

class NotFoundException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_404_NOT_FOUND, detail or "Not found", headers)

class BadRequestException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail or "Bad request", headers)

class UnauthorizedException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_401_UNAUTHORIZED, detail or "Unauthorized", headers)

class ForbiddenException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_403_FORBIDDEN, detail or "Forbidden", headers)

class InternalServerException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail or "Internal server error", headers)

class BadGatewayException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_502_BAD_GATEWAY, detail or "Bad gateway", headers)

class ServiceUnavailableException(HTTPException):
    def __init__(self,detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, detail or "Service unavailable error", headers)

def response_to_http_exception(status_code: int, details: Any) -> Optional[HTTPException]:
    if status_code == status.HTTP_404_NOT_FOUND:
        return NotFoundException(detail=details)
    elif status_code == status.HTTP_403_FORBIDDEN:
        return ForbiddenException(detail=details)
    elif status_code == status.HTTP_400_BAD_REQUEST:
        return BadRequestException(detail=details)
    elif status_code == status.HTTP_401_UNAUTHORIZED:
        return UnauthorizedException(detail=details)
    elif status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        return InternalServerException(detail=details)
    elif status_code == status.HTTP_502_BAD_GATEWAY:
        return BadGatewayException(detail=details)
    elif status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        return ServiceUnavailableException(detail=details)
    else:
        return None
