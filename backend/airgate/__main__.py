import uvicorn

from airgate.config import settings

if __name__ == "__main__":
    uvicorn.run("airgate.main:app", host=settings.host, port=settings.port)
