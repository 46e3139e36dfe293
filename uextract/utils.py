#!/usr/bin/env python3
"""
Logging setup for uextract.
"""

import logging


def setup_logging(verbose=False, silent=False, debug=False):
    """
    Configure logging based on verbosity settings.

    Diagnostics go to stderr; stdout is reserved for the exported paths.
    Warnings and above are shown by default.
    """
    if silent:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True,
    )
    return logging.getLogger("uextract")


def log_effective_parameters(request, logger):
    """Log the effective parameters of an export request."""
    params_str = f"pak_directory={request.pak_directory}, output={request.output_directory}, " \
                 f"object={request.pattern!r}, mode={request.mode}, " \
                 f"unreal_version={request.unreal_version}"
    if request.texture_format:
        params_str += f", textures={request.texture_format}"
    logger.info(f"Using parameters: {params_str}")
