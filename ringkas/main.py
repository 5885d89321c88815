import uvicorn

from ringkas.api.app import create_app
from ringkas.config.settings import Settings
from ringkas.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Starting RingkasAI on {settings.host}:{settings.port}", env=settings.app_env)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
