import logging
import uvicorn
from edusharing_backend.settings import settings

if __name__ == "__main__":

    logging.basicConfig(level=logging.DEBUG if settings.DEBUG_MODE != "production" else logging.INFO)

    uvicorn.run("edusharing_backend.server:app", host="0.0.0.0", port=8000, log_level="debug", reload=settings.DEBUG_MODE != "production", workers=1)
