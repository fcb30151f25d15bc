"""
Command-line interface for resolving node classes from Kubernetes manifests.

Reads an EC2NodeClass, or an AWSNodeTemplate converted to one, out of a
directory of manifests and prints it as an EC2NodeClass manifest.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from ruamel.yaml import YAML

from src.core.context import RequestContext
from src.exceptions import (
    ContextCancelledError,
    NodeClassError,
    NotFoundError,
    StoreError,
)
from src.models.v1beta1 import EC2NodeClass
from src.nodeclass import NodeClassKey, get
from src.store import ManifestStore

MANIFESTS_ENV_VAR = "NODECLASS_MANIFESTS"

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_STORE_ERROR = 3  # 2 is argparse usage errors
EXIT_CANCELLED = 4
EXIT_UNEXPECTED = 9


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging with timestamps if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    # Logs go to stderr so the manifest on stdout stays clean.
    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def build_yaml() -> YAML:
    """YAML serializer configured for Kubernetes-style manifests."""
    yaml = YAML()
    yaml.indent(mapping=2, sequence=4, offset=2)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 4096
    return yaml


def write_manifest(node_class: EC2NodeClass, stream: TextIO) -> None:
    build_yaml().dump(node_class.to_manifest(), stream)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Resolve an EC2NodeClass from manifests, converting a legacy "
            "AWSNodeTemplate when asked to"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Print the EC2NodeClass named 'default'
  python -m src.main default --manifests manifests/

  # Convert the AWSNodeTemplate named 'default' and save it
  python -m src.main default --node-template --manifests manifests/ \\
    -o output/default.yaml

Environment:
  {MANIFESTS_ENV_VAR}  default for --manifests
        """,
    )
    parser.add_argument("name", help="Name of the object to resolve")
    parser.add_argument(
        "-m",
        "--manifests",
        type=Path,
        default=os.environ.get(MANIFESTS_ENV_VAR),
        help=f"Directory of manifests (default: ${MANIFESTS_ENV_VAR})",
    )
    parser.add_argument(
        "--node-template",
        action="store_true",
        help="Read a legacy AWSNodeTemplate and convert it",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the EC2NodeClass manifest here instead of stdout",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Abort the read after this many seconds",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable info-level logging"
    )

    args = parser.parse_args(argv)
    if args.manifests is None:
        parser.error(f"--manifests is required when ${MANIFESTS_ENV_VAR} is unset")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")
    return args


def run(args: argparse.Namespace) -> int:
    """Resolve the requested node class and write it out.

    Returns:
        Process exit code.
    """
    configure_logging(args.debug, args.verbose)
    logger = logging.getLogger(__name__)

    key = (
        NodeClassKey.node_template(args.name)
        if args.node_template
        else NodeClassKey.node_class(args.name)
    )
    ctx = (
        RequestContext.with_timeout(args.timeout)
        if args.timeout is not None
        else RequestContext.background()
    )
    logger.info(
        "Resolving %s '%s' from %s", key.variant.kind.value, key.name, args.manifests
    )

    try:
        node_class = get(ctx, ManifestStore(args.manifests), key)

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with args.output.open("w", encoding="utf-8") as fh:
                write_manifest(node_class, fh)
            logger.info("EC2NodeClass manifest saved to: %s", args.output)
        else:
            write_manifest(node_class, sys.stdout)
        return EXIT_OK

    except NotFoundError as e:
        logger.error(f"Not found: {e}")
        return EXIT_NOT_FOUND
    except StoreError as e:
        logger.error(f"Store error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_STORE_ERROR
    except ContextCancelledError as e:
        logger.error(f"Request aborted: {e.reason}")
        return EXIT_CANCELLED
    except NodeClassError as e:
        logger.error(f"NodeClass error: {e}")
        return EXIT_UNEXPECTED
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        return EXIT_STORE_ERROR
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        return EXIT_UNEXPECTED


def main(argv: list[str] | None = None) -> NoReturn:
    sys.exit(run(parse_arguments(argv)))


if __name__ == "__main__":
    main()
