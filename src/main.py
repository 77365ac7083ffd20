import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

# Add src to path to allow imports if running directly
sys.path.append(str(Path(__file__).parent.parent))

from src.chain.processors import LogProcessor, build_chain
from src.config import AppConfig, MessageConfig, load_config, get_default_config_path
from src.ops.logger import setup_logger


@dataclass
class RuntimeContext:
    config: AppConfig
    chain: LogProcessor
    run_id: str


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Log processor chain demo")

    parser.add_argument(
        "--config",
        type=str,
        default=str(get_default_config_path()),
        help="Path to the YAML configuration file.",
    )

    return parser.parse_args(argv)


def bootstrap_runtime(args) -> RuntimeContext:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    temp_logger = logging.getLogger("bootstrap")

    try:
        config = load_config(args.config)
        temp_logger.debug("Configuration loaded from %s", args.config)
    except Exception as exc:
        temp_logger.error("Failed to load configuration: %s", exc)
        raise

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    logger = setup_logger(
        run_id,
        console_level=config.logging.console_level,
        logs_dir=config.logging.logs_dir,
    )
    logger.debug("Starting Run ID: %s", run_id)

    chain = build_chain(config.chain.order)

    return RuntimeContext(config=config, chain=chain, run_id=run_id)


def run_demo(chain: LogProcessor, messages: Iterable[MessageConfig]) -> int:
    """Send every configured message through the chain head; returns how many were sent."""
    sent = 0
    for message in messages:
        chain.log(message.level, message.text)
        sent += 1
    return sent


def main(argv=None):
    args = parse_args(argv)

    try:
        context = bootstrap_runtime(args)
    except Exception:
        sys.exit(1)

    logger = logging.getLogger("log-chain")
    sent = run_demo(context.chain, context.config.messages)
    logger.debug("Run %s complete. Messages sent: %d", context.run_id, sent)


if __name__ == "__main__":
    main()
