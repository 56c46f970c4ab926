if __name__ != '__main__':
    raise ImportError('This is not a module. Please run app.py instead.')

import os
from dotenv import load_dotenv

# Check for production environment file first, then fallback to .env
if os.path.exists('prod.env'):
    load_dotenv('prod.env')
else:
    load_dotenv()

import uvicorn
from modules.logging_config import get_logger

logger = get_logger('hoopstats.main')
VERSION = '0.1.0'


def main():
    host = os.getenv('WEB_HOST', '127.0.0.1')
    port = int(os.getenv('WEB_PORT', 8080))
    debug = os.getenv('WEB_DEBUG', 'false').lower() == 'true'

    logger.info(f'Starting hoopstats v{VERSION} on {host}:{port}')
    if debug:
        logger.warning('WEB_DEBUG is enabled, error pages will include diagnostics')

    uvicorn.run(
        "web.web_server:app",
        host=host,
        port=port,
        log_level="debug" if debug else "info",
        access_log=True
    )


if __name__ == '__main__':
    main()
