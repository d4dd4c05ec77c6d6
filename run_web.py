#!/usr/bin/env python
"""
Start the Farm Connect FastAPI backend.
"""

import os
import sys
import argparse
import logging
import uvicorn

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from farm_connect.infra.config import get_config

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Start the Farm Connect API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_web.py                    # default settings
    python run_web.py --port 8080        # listen on 8080
    python run_web.py --llm google       # use Gemini instead of OpenAI
    python run_web.py --reload           # auto reload for development
        """
    )

    parser.add_argument(
        '--host',
        type=str,
        default='0.0.0.0',
        help='bind address (default: 0.0.0.0)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='port (default: FASTAPI_PORT or 8000)'
    )

    parser.add_argument(
        '--reload',
        action='store_true',
        help='enable auto reload'
    )

    parser.add_argument(
        '--llm',
        type=str,
        choices=['openai', 'google'],
        default=None,
        help='LLM provider (default: LLM_PROVIDER or openai)'
    )

    args = parser.parse_args()

    if args.llm:
        os.environ['LLM_PROVIDER'] = args.llm
        get_config.cache_clear()
    cfg = get_config()
    port = args.port or cfg.fastapi_port
    display_host = args.host if args.host != '0.0.0.0' else 'localhost'

    logger.info(f"Starting API server: http://{display_host}:{port}")
    logger.info(f"LLM provider: {cfg.llm_provider}")
    logger.info(f"API docs: http://{display_host}:{port}/docs")

    # Dashboards live in process memory, so a single worker only.
    uvicorn.run(
        "farm_connect.api.server:app",
        host=args.host,
        port=port,
        reload=args.reload,
        log_level="info"
    )


if __name__ == '__main__':
    main()
