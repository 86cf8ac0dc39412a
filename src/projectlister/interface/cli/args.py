from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from projectlister.domain.constants import APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ProjectLister CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="projectlister",
        description=(
            "Print the active document and every project of a solution, "
            "including nested sub-projects and excluding solution folders."
        ),
    )

    # --- Project source ---
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-s", "--source",
        dest="source_path",
        default=None,
        help="Solution file (.sln) or JSON project snapshot.",
    )
    source.add_argument(
        "--url",
        dest="source_url",
        default=None,
        help="URL of a JSON project snapshot.",
    )
    p.add_argument(
        "-a", "--active-document",
        dest="active_document",
        default=None,
        help="Path of the document currently open in the editor.",
    )

    # --- Traversal policy ---
    p.add_argument(
        "--no-cycle-guard",
        action="store_true",
        help="Do not protect against cyclic project references.",
    )
    p.add_argument(
        "--include-containers",
        action="store_true",
        help="List solution folders as well (diagnostics).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Also write the report to this file.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the report to stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON instead of the text report.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        nargs="?",
        const="",
        default=None,
        help="Write logs to a rotating file (default location if no path is given).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually gave appear in the result.
    """
    overrides: Dict[str, Any] = {}

    for key in ("source_path", "source_url", "active_document", "output_file"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    # A path and a URL are exclusive on the command line; one replaces a saved other
    if "source_path" in overrides:
        overrides["source_url"] = ""
    elif "source_url" in overrides:
        overrides["source_path"] = ""

    if args.no_cycle_guard:
        overrides["guard_cycles"] = False
    if args.include_containers:
        overrides["include_containers"] = True
    if args.quiet:
        overrides["print_report"] = False

    return overrides
