"""CLI entry point for bookmark manager tool.

Imports a CSV or HTML bookmark export, applies folder and bookmark edits
addressed by folder path, writes the result back as Netscape bookmark HTML and
validates that the written file reads back to the same bookmarks.
"""

from __future__ import annotations

# Standard library imports (alphabetical within groups)
import argparse
import datetime
import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

# Third-party imports
from dotenv import load_dotenv

# Internal imports
from bookmark_manager.errors import BookmarkImportError
from bookmark_manager.html_writer import write_bookmark_html
from bookmark_manager.importer import SourceFormat, import_summary, load_bookmarks
from bookmark_manager.mutations import (
    delete_bookmark,
    delete_folder,
    edit_bookmark,
    rename_folder,
)
from bookmark_manager.validator import validate_export

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from bookmark_manager.models import BookmarkFolder

STAGES: dict[int, str] = {
    1: "Import bookmark export",
    2: "Apply edits",
    3: "Export bookmark HTML",
    4: "Validation",
}

AUTO_FORMAT = "auto"


def configure_logging(*, verbose: bool) -> None:
    """Configure root logging (debug when verbose).

    verbose: when True, sets DEBUG level; otherwise INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def log_stage(stage_number: int, message: str, *args: object) -> None:
    """Log a message prefixed with a stage label."""
    stage_label = STAGES.get(stage_number, f"Stage {stage_number}")
    logger = logging.getLogger("bookmark_manager")
    logger.info("[%s] %s", stage_label, message % args if args else message)


def split_path(raw: str) -> list[str]:
    """Turn a ``/``-separated CLI folder path into segments; empty means the root."""
    return [segment.strip() for segment in raw.split("/") if segment.strip()]


def _default_html_output() -> str:
    return f"bookmarks-{datetime.date.today().isoformat()}.html"


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import, edit and re-export browser bookmarks")
    parser.add_argument(
        "--input",
        help=(
            "Path to the exported bookmarks CSV or HTML file. If omitted, the environment"
            " variable BOOKMARKS_IMPORT_FILE is used."
        ),
    )
    parser.add_argument(
        "--format",
        choices=(AUTO_FORMAT, *(fmt.value for fmt in SourceFormat)),
        default=AUTO_FORMAT,
        help="Export format; 'auto' picks it from the file suffix (.csv, .html, .htm)",
    )
    parser.add_argument(
        "--html-output",
        default=None,
        help="Path to emit the bookmarks HTML (default: bookmarks-YYYY-MM-DD.html)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Optional path to emit the bookmark tree as JSON",
    )
    parser.add_argument(
        "--edit-bookmark",
        nargs=4,
        action="append",
        default=[],
        metavar=("PATH", "OLD_URL", "NAME", "URL"),
        help="Change a bookmark's name and url (applied first)",
    )
    parser.add_argument(
        "--delete-bookmark",
        nargs=2,
        action="append",
        default=[],
        metavar=("PATH", "URL"),
        help="Delete a bookmark from the folder at PATH",
    )
    parser.add_argument(
        "--rename-folder",
        nargs=2,
        action="append",
        default=[],
        metavar=("PATH", "NAME"),
        help="Rename the folder at PATH",
    )
    parser.add_argument(
        "--delete-folder",
        action="append",
        default=[],
        metavar="PATH",
        help="Delete the folder at PATH with everything inside it (applied last)",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Do not re-read the written HTML to check every bookmark survived",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if any(not split_path(path) for path in args.delete_folder):
        parser.error("--delete-folder needs a non-empty folder path")
    return args


def _resolve_input(path_arg: str | None) -> Path:
    resolved = path_arg or os.getenv("BOOKMARKS_IMPORT_FILE")
    if not resolved:
        msg = (
            "No input file provided. Supply --input or set BOOKMARKS_IMPORT_FILE in env."
        )
        raise SystemExit(msg)
    return Path(resolved)


def _import(input_path: Path, format_arg: str) -> BookmarkFolder:
    log_stage(1, "Reading %s", input_path)
    source_format = None if format_arg == AUTO_FORMAT else SourceFormat(format_arg)
    try:
        tree = load_bookmarks(input_path, source_format)
    except BookmarkImportError as exc:
        raise SystemExit(str(exc)) from exc
    log_stage(1, import_summary(tree))
    return tree


def _apply_edits(tree: BookmarkFolder, args: argparse.Namespace) -> BookmarkFolder:
    logger = logging.getLogger("bookmark_manager")

    def _applied(before: BookmarkFolder, after: BookmarkFolder, description: str) -> None:
        if after is before:
            logger.warning("No change for %s", description)
        else:
            log_stage(2, "Applied %s", description)

    for raw_path, old_url, name, url in args.edit_bookmark:
        updated = edit_bookmark(tree, split_path(raw_path), old_url, name, url)
        _applied(tree, updated, f"edit of {old_url} in '{raw_path}'")
        tree = updated
    for raw_path, url in args.delete_bookmark:
        updated = delete_bookmark(tree, split_path(raw_path), url)
        _applied(tree, updated, f"deletion of {url} in '{raw_path}'")
        tree = updated
    for raw_path, name in args.rename_folder:
        updated = rename_folder(tree, split_path(raw_path), name)
        _applied(tree, updated, f"rename of '{raw_path}' to '{name}'")
        tree = updated
    for raw_path in args.delete_folder:
        updated = delete_folder(tree, split_path(raw_path))
        _applied(tree, updated, f"deletion of folder '{raw_path}'")
        tree = updated
    return tree


def _export(tree: BookmarkFolder, html_path: Path, json_path: Path | None) -> None:
    log_stage(3, "Writing bookmark HTML to %s", html_path)
    write_bookmark_html(tree, html_path)
    if json_path is not None:
        log_stage(3, "Writing bookmark tree JSON to %s", json_path)
        with json_path.open("w", encoding="utf-8") as fh:
            json.dump(tree.to_model().model_dump(), fh, indent=2, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the bookmark manager CLI."""
    load_dotenv()
    args = _parse_args(argv)
    input_path = _resolve_input(args.input)
    configure_logging(verbose=args.verbose)

    tree = _import(input_path, args.format)
    tree = _apply_edits(tree, args)

    html_path = Path(args.html_output or _default_html_output())
    _export(tree, html_path, args.json_output)

    if args.skip_validation:
        return
    log_stage(4, "Running validation checks")
    validate_export(tree, html_path)
    log_stage(4, "Workflow completed successfully")


if __name__ == "__main__":
    main()
