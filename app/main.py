import uvicorn

from infrastructure.configuration import settings
from server import server

server_app = server.handler


def main():
    """Serve the application with uvicorn."""
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
