'''
Run one login against the configured token endpoint: python -m rest_api_client
'''
import asyncio
import json
import sys

from rest_api_client.config import get_settings, masked_settings_dump
from rest_api_client.errors import ApiError
from rest_api_client.services import get_auth_service
from rest_api_client.utils.logger import configure_logging, logger


async def run_login() -> int:
    settings = get_settings()
    if not settings.AUTH_CLIENT_ID or not settings.AUTH_CLIENT_SECRET:
        logger.error("AUTH_CLIENT_ID and AUTH_CLIENT_SECRET must be set")
        return 2

    try:
        token = await get_auth_service().login(settings.AUTH_CLIENT_ID,
                                               settings.AUTH_CLIENT_SECRET)
    except ApiError as exc:
        logger.error(f"Login failed ({type(exc).__name__}): {exc}")
        return 1

    logger.info(f"Login succeeded: token_type={token.token_type} "
                f"expires_in={token.expires_in} scope={token.scope}")
    return 0


def main() -> int:
    settings = get_settings()
    configure_logging(level="DEBUG" if settings.DEBUG else "INFO",
                      log_file=settings.LOG_FILE)

    logger.info('**REST API client login started**')
    pretty_settings = json.dumps(masked_settings_dump(settings), indent=2)
    logger.info(f"Application Configuration: {pretty_settings}")

    return asyncio.run(run_login())


if __name__ == "__main__":
    sys.exit(main())
