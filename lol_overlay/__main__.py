import argparse
import logging
import sys

from .channel import snapshot_channel
from .config import Settings
from .console import ConsoleOverlay
from .fetcher import start_fetcher
from .live_client import LiveClient
from .logging_config import setup_logging


def main(argv=None) -> int:
    settings = Settings.from_env()
    p = argparse.ArgumentParser(prog="lol_overlay", description="Print live League of Legends stats for the local player.")
    p.add_argument("--base-url", default=settings.base_url)
    p.add_argument("--timeout", type=float, default=settings.timeout_s, help="per-request timeout in seconds")
    p.add_argument("--refresh", type=float, default=settings.refresh_s, help="console refresh interval in seconds")
    p.add_argument("--log-level", default=logging.getLevelName(settings.log_level))
    args = p.parse_args(argv)

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger(__name__)
    logger.info("starting League of Legends overlay")

    client = LiveClient(args.base_url, timeout=args.timeout, verify=settings.verify_tls)
    sender, receiver = snapshot_channel()
    start_fetcher(client, sender)
    try:
        ConsoleOverlay(receiver).run(args.refresh)
    except KeyboardInterrupt:
        logger.info("interrupted, shutting down")
    finally:
        receiver.close()
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
