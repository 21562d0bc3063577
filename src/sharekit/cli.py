"""
Command-line interface and entry points for sharekit.

Lets an operator replay a server-driven ``share`` action outside the UI, or
check that an action envelope decodes, without writing any Python.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sharekit.capability.platform import SharePlus
from sharekit.core.contracts import ActionContext
from sharekit.core.logger import configure_root_logger, get_logger
from sharekit.dispatcher import ActionDispatcher
from sharekit.models.share_config import ShareConfig
from sharekit.wiring import build_share_platform

logger = get_logger(__name__)


def load_document(path: str) -> Dict[str, Any]:
    """Read a JSON or YAML mapping from ``path``."""
    doc_file = Path(path)
    if not doc_file.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(doc_file, "r") as f:
        if doc_file.suffix == ".json":
            doc = json.load(f)
        elif doc_file.suffix in (".yaml", ".yml"):
            doc = yaml.safe_load(f)
        else:
            raise ValueError(
                f"Unsupported file format: {doc_file.suffix}. "
                "Use .json or .yaml"
            )

    if not isinstance(doc, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}")
    return doc


def main(
    action_path: Optional[str] = None,
    action_dict: Optional[Dict[str, Any]] = None,
    *,
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    log_level: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Dispatch one action envelope against the configured share platform.

    Args:
        action_path: Path to a JSON/YAML action envelope
        action_dict: Action envelope given directly
        config_path: Path to a JSON/YAML ShareConfig
        config_dict: ShareConfig given directly
        log_level: Overrides the configured log level when given

    Returns:
        Result with status, action type and the share outcome

    Raises:
        ValueError: If an action or config is missing
        Exception: If decoding or the share itself fails

    Example:
        >>> from sharekit.cli import main
        >>> main(
        ...     action_dict={"type": "share", "data": {"text": "hi"}},
        ...     config_dict={"platform": {"kind": "mailto"}},
        ... )
    """
    try:
        if action_dict is None:
            if not action_path:
                raise ValueError("Either action_path or action_dict must be provided")
            action_dict = load_document(action_path)
        if config_dict is None:
            if not config_path:
                raise ValueError("Either config_path or config_dict must be provided")
            config_dict = load_document(config_path)

        cfg = ShareConfig.model_validate(config_dict)
        configure_root_logger(log_level or cfg.log_level)
        SharePlus.configure(build_share_platform(cfg.platform))

        context = ActionContext(source="cli")
        result = ActionDispatcher().dispatch_sync(action_dict, context)

        logger.info("Action completed with status: success")
        return {
            "status": "success",
            "action_id": context.action_id,
            "action_type": action_dict.get("type"),
            "result": result.to_dict() if hasattr(result, "to_dict") else result,
        }

    except Exception as e:
        logger.error(f"Action failed: {str(e)}", exc_info=True)
        raise


def validate_action(action_path: str) -> Dict[str, Any]:
    """
    Decode an action envelope without invoking the share capability.

    Returns:
        The decoded model as JSON-friendly data

    Raises:
        Exception: If the envelope does not decode
    """
    try:
        action = load_document(action_path)
        logger.info(f"Validating action: {action_path}")
        model = ActionDispatcher().decode(action)
        logger.info("Action is valid")
        return model.to_json() if hasattr(model, "to_json") else model

    except Exception as e:
        logger.error(f"Action validation failed: {str(e)}")
        raise


def cli(argv: Optional[list] = None) -> None:
    """
    Command-line interface for sharekit.

    Usage:
        sharekit share /path/to/action.json --config /path/to/config.yaml
        sharekit validate /path/to/action.json
    """
    parser = argparse.ArgumentParser(
        prog="sharekit",
        description="Run server-driven share actions against a share platform"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    share_parser = subparsers.add_parser(
        "share",
        help="Dispatch a share action"
    )
    share_parser.add_argument(
        "action",
        help="Path to action envelope (JSON or YAML)"
    )
    share_parser.add_argument(
        "--config", "-c",
        required=True,
        help="Path to configuration file (JSON or YAML)"
    )
    share_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Decode an action envelope without sharing"
    )
    validate_parser.add_argument(
        "action",
        help="Path to action envelope (JSON or YAML)"
    )

    args = parser.parse_args(argv)

    if args.command == "share":
        configure_root_logger("DEBUG" if args.verbose else "INFO")
        try:
            result = main(
                action_path=args.action,
                config_path=args.config,
                log_level="DEBUG" if args.verbose else None,
            )
            print(json.dumps(result, indent=2))
            sys.exit(0 if result.get("status") == "success" else 1)
        except Exception:
            # Already logged by main()
            sys.exit(1)

    elif args.command == "validate":
        configure_root_logger("INFO")
        try:
            print(json.dumps(validate_action(args.action), indent=2))
            sys.exit(0)
        except Exception:
            # Already logged by validate_action()
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
