#!/usr/bin/env python
"""
Start the Chainlit chat front end for the Farm Connect assistants.
"""

import os
import sys
import argparse
import logging
import subprocess

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Start the Farm Connect Chainlit app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_chainlit.py                              # expert guidance chat
    python run_chainlit.py --assistant scheme_assistant # scheme assistant chat
    python run_chainlit.py --port 8080 --no-watch
        """
    )

    parser.add_argument(
        '--host',
        type=str,
        default='localhost',
        help='bind address (default: localhost)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=8501,
        help='port (default: 8501)'
    )

    parser.add_argument(
        '--watch',
        dest='watch',
        action='store_true',
        default=True,
        help='reload on code changes (default)'
    )
    parser.add_argument(
        '--no-watch',
        dest='watch',
        action='store_false',
        help='disable reload'
    )

    parser.add_argument(
        '--headless',
        action='store_true',
        help='do not open a browser'
    )

    parser.add_argument(
        '--assistant',
        type=str,
        choices=['expert_guidance', 'scheme_assistant'],
        default='expert_guidance',
        help='assistant to chat with (default: expert_guidance)'
    )

    parser.add_argument(
        '--backend',
        type=str,
        default=None,
        help='API base URL (default: BACKEND_URL or http://localhost:8000)'
    )

    args = parser.parse_args()

    os.environ['CHAINLIT_ASSISTANT'] = args.assistant
    if args.backend:
        os.environ['BACKEND_URL'] = args.backend

    cmd = [
        'chainlit',
        'run',
        'chainlit_app.py',
        '--host', args.host,
        '--port', str(args.port),
    ]
    if args.watch:
        cmd.append('--watch')
    if args.headless:
        cmd.append('--headless')

    logger.info(f"Assistant: {args.assistant}")
    logger.info(f"Open: http://{args.host if args.host != '0.0.0.0' else 'localhost'}:{args.port}")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Stopped")
    except subprocess.CalledProcessError as e:
        logger.error(f"Chainlit exited with an error: {e}")
        sys.exit(1)
    except FileNotFoundError:
        logger.error("Chainlit is not installed, run: pip install chainlit")
        sys.exit(1)


if __name__ == '__main__':
    main()
