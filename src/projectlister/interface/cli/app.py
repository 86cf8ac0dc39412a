from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Plays the host role around the enumeration core: bootstraps logging,
resolves configuration (defaults, saved file, command-line overrides),
builds the project forest through an adapter and writes the report.
"""

import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from projectlister.adapters import Snapshot, load_source
from projectlister.adapters.remote import fetch_snapshot
from projectlister.core.report import build_report, write_report
from projectlister.core.validator import validate_config
from projectlister.core.walker import ProjectTreeWalker
from projectlister.domain.config import get_default_config, load_config, save_config
from projectlister.domain.errors import ProjectListerError
from projectlister.domain.models import ActiveDocumentInfo
from projectlister.infra.fs import normalize_path
from projectlister.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from projectlister.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SOURCE_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap
    log_file: Optional[str] = None
    if args.log_file is not None:
        log_file = args.log_file or get_default_log_path()
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))

    # 2. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(_persistable_config(conf, base_conf))

    # 3. Project source
    try:
        snapshot = _load_snapshot(conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except ProjectListerError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    if snapshot is None:
        return EXIT_SOURCE_ERROR

    active_document = _resolve_active_document(args.active_document, snapshot, conf)

    # 4. Enumeration and output
    walker = ProjectTreeWalker(
        guard_cycles=conf["guard_cycles"],
        include_containers=conf["include_containers"],
    )
    try:
        if args.json_output:
            if conf["print_report"]:
                _print_json(walker, snapshot, active_document)
            lines = None
        else:
            lines = build_report(snapshot.roots, active_document, walker=walker)
            if conf["print_report"]:
                print("\n".join(lines))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Report generation failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if conf["output_file"]:
        if lines is None:
            lines = build_report(snapshot.roots, active_document, walker=walker)
        if not write_report(lines, conf["output_file"]):
            print(f"ERROR: Could not write report to '{conf['output_file']}'.", file=sys.stderr)
            return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge restricted to known configuration keys."""
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _persistable_config(conf: Dict[str, Any], base: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare the effective configuration for ``--save-config``.

    The source path is stored absolute so later runs work from any directory,
    and ``--quiet`` stays a one-shot flag: the previously saved value is kept.
    """
    out = dict(conf)
    out["source_path"] = normalize_path(conf["source_path"])
    out["print_report"] = bool(base.get("print_report", True))
    return out

# -----------------------------------------------------------------------------
# SOURCE RESOLUTION
# -----------------------------------------------------------------------------

def _load_snapshot(conf: Dict[str, Any]) -> Optional[Snapshot]:
    """
    Build the snapshot from the configured path or URL.

    Returns None (after reporting on stderr) when no source is usable.
    """
    source_path = conf["source_path"]
    if source_path:
        path = normalize_path(source_path)
        if not os.path.exists(path):
            msg = f"Source does not exist: {path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return None
        logger.info(f"Reading projects from: {path}")
        return load_source(path)

    source_url = conf["source_url"]
    if source_url:
        snapshot = fetch_snapshot(source_url)
        if snapshot is None:
            print(f"ERROR: Could not fetch project snapshot from {source_url}", file=sys.stderr)
        return snapshot

    print("ERROR: No project source given. Use --source or --url.", file=sys.stderr)
    return None


def _resolve_active_document(
        cli_value: Optional[str],
        snapshot: Snapshot,
        conf: Dict[str, Any],
) -> Optional[ActiveDocumentInfo]:
    """Command line wins over the snapshot, which wins over the saved config."""
    if cli_value is not None:
        value = cli_value.strip()
        return ActiveDocumentInfo(path=value) if value else None
    if snapshot.active_document is not None:
        return snapshot.active_document
    if conf["active_document"]:
        return ActiveDocumentInfo(path=conf["active_document"])
    return None

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_json(
        walker: ProjectTreeWalker,
        snapshot: Snapshot,
        active_document: Optional[ActiveDocumentInfo],
) -> None:
    entries = walker.enumerate(snapshot.roots)
    payload = {
        "active_document": active_document.path if active_document else None,
        "projects": [{"name": e.name, "full_path": e.full_path} for e in entries],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    sys.exit(main())
