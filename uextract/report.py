#!/usr/bin/env python3
"""
Run summary reporting.
"""

from .core.filesystem_utils import FileSystemUtils


def summarize_outcomes(outcomes):
    """Count exported and failed identifiers and the bytes written."""
    exported = [o for o in outcomes if o.succeeded]
    failed = [o for o in outcomes if not o.succeeded]
    total_bytes = sum(o.path.stat().st_size for o in exported if o.path.exists())
    return {
        "matched": len(outcomes),
        "exported": len(exported),
        "failed": len(failed),
        "warnings": sum(len(o.warnings) for o in outcomes),
        "bytes_written": total_bytes,
        "failed_identifiers": [o.identifier for o in failed],
    }


def print_summary_report(outcomes, logger, execution_time=None):
    """Log a summary report of an export run."""
    s = summarize_outcomes(outcomes)
    written_fmt, _ = FileSystemUtils.get_file_size_formatted(s["bytes_written"])

    logger.info("=" * 80)
    logger.info("EXPORT SUMMARY REPORT")
    logger.info("=" * 80)
    logger.info(f"Matched:  {s['matched']}")
    logger.info(f"Exported: {s['exported']} ({written_fmt})")
    logger.info(f"Failed:   {s['failed']}")
    if s["warnings"]:
        logger.info(f"Warnings: {s['warnings']}")
    if execution_time is not None:
        minutes, seconds = divmod(execution_time, 60)
        logger.info(f"Execution time: {int(minutes)}m {seconds:.1f}s")

    if s["failed_identifiers"]:
        logger.info("\nFailed identifiers:")
        for identifier in s["failed_identifiers"]:
            logger.info(f"  - {identifier}")

    logger.info("=" * 80)
    return s
