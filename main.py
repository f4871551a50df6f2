import logging
import os
import functions_framework
from dotenv import load_dotenv
from config import Config
from constants import ENV_LOG_LEVEL
from refactoring.gemini import GeminiClient
from refactoring.handler import RequestHandler

load_dotenv()


def resolve_log_level(value):
    """Maps a level name to its number. Returns None for unknown names."""
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else None


log_level_name = os.getenv(ENV_LOG_LEVEL, "INFO")
log_level = resolve_log_level(log_level_name)

logging.basicConfig(
    level=log_level if log_level is not None else logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

if log_level is None:
    logger.warning(f"Unknown {ENV_LOG_LEVEL} '{log_level_name}', falling back to INFO")


def create_handler(config: Config) -> RequestHandler:
    """
    Builds the request handler once per process.

    Missing configuration or a client that fails to initialise does not stop
    the process; the returned handler answers every POST with a 500 instead.
    """
    missing_vars = config.missing_variables()
    if missing_vars:
        logger.error(f"Missing required environment variables: {', '.join(missing_vars)}")
        return RequestHandler(config)

    try:
        client = GeminiClient.from_config(config)
    except Exception:
        logger.exception("Error initializing Vertex AI client")
        return RequestHandler(config)

    logger.info(
        f"Environment: project={config.project_id} "
        f"location={config.location} model={config.model_name}"
    )
    return RequestHandler(config, client)


handler = create_handler(Config.from_env())


@functions_framework.http
def main(request):
    return handler(request)
