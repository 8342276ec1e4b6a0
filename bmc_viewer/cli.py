"""
Remote console viewer generator

Detects which remote management console (Dell iDRAC6/7, HP iLO or
SuperMicro) a host runs, logs in, and prints a JNLP descriptor that a Java
Web Start client can open.

Usage:
    bmc-viewer --host 10.0.0.5 -u root -p calvin            # Print descriptor
    bmc-viewer --host 10.0.0.5 -u root -p calvin -o         # Write 10.0.0.5.jnlp
    bmc-viewer --host 10.0.0.5 -V 7 -o viewer.jnlp          # Skip detection
    bmc-viewer --env-file prod.env --verbose                # Settings from .env
"""

import argparse
import logging
import os
import sys

from .config import AppConfig, load_environment, setup_logging, validate_config
from .exceptions import ConsoleError
from .models import ConsoleVersion
from .services import initialize_viewer_service, target_from_environment

logger = logging.getLogger(__name__)

WRITE_TO_HOST_FILE = ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Detect the console and print the descriptor
  bmc-viewer --host 10.0.0.5 -u root -p calvin

  # Write the descriptor to <host>.jnlp
  bmc-viewer --host 10.0.0.5 -u root -p calvin -o

  # Skip detection for a known iDRAC7
  bmc-viewer --host 10.0.0.5 -u root -p calvin --version 7

  # Read BMC_HOST, BMC_USERNAME, BMC_PASSWORD from a file
  bmc-viewer --env-file prod.env
        """
    )

    parser.add_argument(
        "--host", "-H",
        help="Console host name or address (default: BMC_HOST)"
    )

    parser.add_argument(
        "--username", "-u",
        help="Console user (default: BMC_USERNAME or root)"
    )

    parser.add_argument(
        "--password", "-p",
        help="Console password (default: BMC_PASSWORD)"
    )

    parser.add_argument(
        "--version", "-V",
        type=int,
        choices=[v.value for v in ConsoleVersion.known()],
        help="Console version, skips detection: 1 SuperMicro, 2 iLO, 6 iDRAC6, 7 iDRAC7"
    )

    parser.add_argument(
        "--output", "-o",
        nargs="?",
        const=WRITE_TO_HOST_FILE,
        help="Write the descriptor to a file instead of stdout (default name: <host>.jnlp)"
    )

    parser.add_argument(
        "--verify-tls",
        action="store_true",
        help="Verify the console TLS certificate (most consoles are self-signed)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Connect/read timeout in seconds (default: BMC_TIMEOUT or 5)"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with console settings"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def write_descriptor(descriptor: str, output: str, host: str) -> str:
    """
    Write a descriptor to a file.

    Args:
        descriptor: Descriptor text
        output: Target path, or WRITE_TO_HOST_FILE to derive it from the host
        host: Console host

    Returns:
        Path written
    """
    path = output or f"{host}{AppConfig.DESCRIPTOR_EXTENSION}"
    with open(path, "w") as fh:
        fh.write(descriptor)
    return path


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Load .env file first so LOG_LEVEL and LOG_FILE from it apply
    if args.env_file:
        load_environment(args.env_file)

    setup_logging(verbose=args.verbose)

    # Command line values override the environment
    if args.host:
        os.environ["BMC_HOST"] = args.host
    if args.timeout is not None:
        os.environ["BMC_TIMEOUT"] = str(args.timeout)
    if args.verify_tls:
        os.environ["BMC_VERIFY_TLS"] = "true"

    try:
        validate_config()
    except ValueError as e:
        logger.error(str(e))
        print(f"\n❌ {e}", file=sys.stderr)
        return 1

    target = target_from_environment(
        username=args.username,
        password=args.password,
        version=args.version
    )

    with initialize_viewer_service() as service:
        try:
            descriptor = service.get_viewer(target)
        except ConsoleError as e:
            logger.error(f"Failed to generate viewer for {target.host}: {e}")
            print(f"\n❌ {e}", file=sys.stderr)
            return 1

    if args.output is None:
        sys.stdout.write(descriptor)
    else:
        path = write_descriptor(descriptor, args.output, target.host)
        print(f"Wrote {ConsoleVersion(target.version).label} viewer to {path}", file=sys.stderr)

    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
