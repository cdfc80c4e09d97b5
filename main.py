import uvicorn

from inventory_system.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "inventory_system.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
