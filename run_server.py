import uvicorn

from app.config import Settings, settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def warn_on_missing_keys(config: Settings) -> list[str]:
    """
    Log a warning for each provider key that is not configured.

    The server still starts; the matching proxy routes answer 400 and the
    clients serve demo data instead.
    """
    missing = []
    if not config.news_api_key:
        missing.append("NEWS_API_KEY")
        logger.warning("NEWS_API_KEY not set. /api/news endpoints will return 400.")
    if not config.tmdb_api_key:
        missing.append("TMDB_API_KEY")
        logger.warning("TMDB_API_KEY not set. /api/movies endpoints will return 400.")
    return missing


if __name__ == "__main__":
    setup_logging(level=settings.log_level, job_name="dashboard_gateway")
    warn_on_missing_keys(settings)
    logger.info(f"Proxy listening on port {settings.port}")

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
