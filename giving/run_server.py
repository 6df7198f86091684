import uvicorn
from loguru import logger

from giving.config import settings


@logger.catch
def main() -> None:
    logger.bind(event="startup").info("Server listening on port {port}", port=settings.port)
    uvicorn.run("giving.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
