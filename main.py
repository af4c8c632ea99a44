import uvicorn

from mondo.config import settings
from mondo.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run("mondo.main:app", host=settings.host, port=settings.port, reload=settings.debug)
