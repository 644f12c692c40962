"""
Server launcher.
Runs the FastAPI application with uvicorn using the configured host and port.
"""
import uvicorn

from staff_api.config import settings


def main() -> None:
    uvicorn.run("staff_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
