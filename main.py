import uvicorn

from fastapi_lang.config import settings
from fastapi_lang.main import create_app
from fastapi_lang.middleware.logging import setup_structured_logging

setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)

app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
