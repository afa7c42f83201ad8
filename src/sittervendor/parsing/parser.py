# sittervendor/parsing/parser.py
from __future__ import annotations

import argparse

VERBS = {
    "download": "re-download the engine and every grammar, patching includes",
    "check-updates": "compare vendored versions with the latest upstream tags",
    "tag-grammars": "tag the current commit for every grammar version",
    "test": "run 'go test' for the engine and each grammar package",
}


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - The verb is a free positional so an unknown or missing verb can fall
          back to the help text instead of an argparse usage error.
        - Flags default to None; environment fallbacks are applied later by
          VendorConfig.from_env.
    """
    epilog = "verbs:\n" + "\n".join(f"  {name:<14} {desc}" for name, desc in VERBS.items())
    p = argparse.ArgumentParser(
        prog="sittervendor",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] VERB",
        description="sittervendor – vendored tree-sitter engine and grammar maintenance",
        epilog=epilog,
    )
    p.add_argument("verb", nargs="?", metavar="VERB", help="one of: " + ", ".join(VERBS))

    g_loc = p.add_argument_group("Locations")
    g_run = p.add_argument_group("Execution")
    g_out = p.add_argument_group("Output")

    g_loc.add_argument(
        "-d",
        "--dest",
        metavar="DIR",
        dest="dest",
        help=(
            "Root of the vendoring repository (engine sources land here, grammars in "
            "per-language subdirectories, tags are created here). "
            "Defaults to $SITTERVENDOR_DEST or the current directory."
        ),
    )
    g_loc.add_argument(
        "--raw-host",
        metavar="URL",
        dest="raw_host",
        help="Raw file host used for grammar downloads (default: $SITTERVENDOR_RAW_HOST or raw.githubusercontent.com).",
    )
    g_loc.add_argument(
        "--go-module",
        metavar="PATH",
        dest="go_module",
        help="Go module path used by the 'test' verb (default: $SITTERVENDOR_GO_MODULE).",
    )

    g_run.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=int,
        dest="jobs",
        help="Download up to N grammars concurrently (default 1, sequential).",
    )

    g_out.add_argument(
        "--format",
        choices=("text", "json"),
        dest="output_format",
        help="Report format for check-updates and tag-grammars.",
    )
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines on stderr (also enabled by SITTERVENDOR_JSON_LOGS=1).",
    )
    g_out.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p
