from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, default_config, load_config, load_reference_dataset
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import apply_config, log_summary, set_level, setup_logging
from ..models.config_models import ImportConfig
from ..models.record import NormalizedRecord
from ..services.orchestrator import ProcessingError, commit, preview, read_source_file
from ..services.preview import render_preview_table
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, config and the reference snapshot
- Read the CSV bytes and run the preview phase
- Print the SUMMARY line (and the preview table on request)
- Write row diagnostics to the JSON Lines log
- With --commit-to, hand accepted records to a JSON Lines sink

Exit codes: 0 every row accepted, 2 some rows rejected (or the file had no
data), 1 fatal startup error.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV_VAR = "CONSULTANT_IMPORT_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/import.yml")


class JsonLinesRecordSink:
    """Persistence collaborator writing one storage row per line."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __call__(self, records: list[NormalizedRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record.to_storage_dict(), ensure_ascii=False) + "\n")


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env with python-dotenv; failures only print a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Consultant CSV importer (preview / commit)")
    p.add_argument("file", type=Path, help="Semicolon separated CSV file")
    p.add_argument("--reference", type=Path, required=True, help="Reference snapshot (YAML or JSON)")
    p.add_argument("--config", type=Path, default=None, help="Config YAML (default config/import.yml)")
    p.add_argument("--commit-to", type=Path, default=None, help="Write accepted records as JSON Lines")
    p.add_argument("--show-preview", action="store_true", help="Print the per-row preview table")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(explicit: Path | None, logger: logging.Logger) -> ImportConfig:
    if explicit is not None:
        return load_config(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    logger.debug("no config file found, using defaults")
    return default_config()


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # read sys.argv only when no explicit list is given
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_level(logging.DEBUG)

    try:
        cfg = _resolve_config(args.config, logger)
        reference = load_reference_dataset(args.reference)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    # --debug wins over the configured level
    if not args.debug:
        apply_config(cfg)
    logger.debug(f"config: {cfg}")

    try:
        file_bytes = read_source_file(args.file)
    except ProcessingError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    logger.info(f"Importing {args.file.name}")
    error_log = ErrorLogBuffer(cfg.error_log_dir)
    result = preview(file_bytes, reference, cfg, file_name=args.file.name, error_log=error_log)

    if args.show_preview and not result.failed:
        print(render_preview_table(result, reference, max_rows=cfg.preview_rows))

    for message in result.summary.errors:
        logger.error(message)
    for message in result.summary.warnings:
        logger.warning(message)

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"diagnostics written to {log_path}")

    if args.commit_to is not None:
        committed = commit(result, JsonLinesRecordSink(args.commit_to))
        logger.info(f"committed={committed} target={args.commit_to}")

    summary_line = render_summary_line(result.summary, result.elapsed_seconds)
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed or result.summary.errors:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
