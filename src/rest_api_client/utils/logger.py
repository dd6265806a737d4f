'''
Logging configuration for the library.
Modules log through the shared Loguru `logger`, disabled for
`rest_api_client` on import. Applications call `configure_logging` once to
enable it and send records to a file and the console.
'''
import sys
from pathlib import Path
from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss,SSS} {level: <8} [{file}:{line}] {message}"


def configure_logging(level: str = "INFO",
                      log_file: str | None = "logs/rest_api_client.log") -> None:
    '''
    Replace Loguru's default handler with a rotating file handler (DEBUG)
    and a console handler at `level`.
    '''
    logger.enable("rest_api_client")

    # Remove any default handlers
    logger.remove()

    if log_file:
        # Ensure log directory exists
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        # File handler (10MB max, keep 5 backups)
        logger.add(
            log_file,
            rotation="10 MB",
            retention=5,
            level="DEBUG",
            format=LOG_FORMAT,
        )

    logger.add(sys.stdout, level=level, format=LOG_FORMAT)


__all__ = ["logger", "configure_logging"]
