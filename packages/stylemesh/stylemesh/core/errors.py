"""stylemesh: Error Taxonomy and Logging
--------------------------------------

Exception types and the shared logger for stylemesh.

Error Hierarchy
---------------
- StyleMeshError: Base exception for all stylemesh errors
- StyleIOError: File access errors (100-199)
- StyleRegistryError: Registry misuse (400-499)
- StyleConfigError: Invalid options and configuration (500-599)
  - MissingShapeTypeError: No shape type in create options (510)
  - UnknownShapeError: Shape or arrow type with no registered creator (511-512)
- StyleMaterialError: Mutation of a frozen material or cached template (700-799)

Logging
-------
The shared logger is named "stylemesh" and can be configured for console and
file output with optional JSON formatting. Python warnings are captured into
logging with adjustable levels.
"""

import logging
import os

__all__ = [
    "StyleMeshError",
    "StyleIOError",
    "StyleRegistryError",
    "StyleConfigError",
    "MissingShapeTypeError",
    "UnknownShapeError",
    "StyleMaterialError",
    "get_logger",
    "configure_logging",
]


# =============================================================================
# Exception Hierarchy
# =============================================================================


class StyleMeshError(Exception):
    """Base exception for all stylemesh errors.

    Examples
    --------
    >>> try:
    ...     factory.create(cache, options, {})
    ... except StyleMeshError as e:
    ...     print(f"styling failed: {e}")

    """

    pass


class StyleIOError(StyleMeshError):
    """File access errors (Code 100-199).

    Raised when a config file or style sheet cannot be found or read.
    """

    pass


class StyleRegistryError(StyleMeshError):
    """Registry errors (Code 400-499).

    Raised when a registration is malformed, e.g. a non-callable creator.
    Lookups never raise this; a missing entry is reported by the caller.
    """

    pass


class StyleConfigError(StyleMeshError):
    """Configuration-related errors (Code 500-599).

    Raised when element options, create options, or the render config fail
    validation or cannot be resolved.
    """

    pass


class MissingShapeTypeError(StyleConfigError, TypeError):
    """Create options without ``shape.type`` (Code 510)."""

    pass


class UnknownShapeError(StyleConfigError, TypeError):
    """Shape or arrow type with no registered creator (Code 511-512).

    The message always carries the offending type string.
    """

    pass


class StyleMaterialError(StyleMeshError):
    """Material errors (Code 700-799).

    Raised on any attempt to change a frozen material descriptor [700] or a
    template that has been stored in a cache [701].
    """

    pass


# =============================================================================
# Logger Configuration
# =============================================================================

_logger: logging.Logger | None = None

_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","msg":"%(message)s"}'
)


def get_logger() -> logging.Logger:
    """Get the shared stylemesh logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named "stylemesh" configured at INFO level by
        default with a console handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'stylemesh'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("stylemesh")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(_PLAIN_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
    suppress_warnings: bool = False,
) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs. Invalid paths are reported on the
        console handler and otherwise ignored.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.
    suppress_warnings : bool, default False
        Route Python warnings into logging and raise their level to ERROR when
        True; otherwise capture warnings at WARNING level.

    Examples
    --------
    >>> configure_logging(verbose=True, as_json=False)  # doctest: +SKIP
    >>> logger = get_logger()
    >>> logger.level in (logging.INFO, logging.DEBUG)
    True

    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(_JSON_FORMAT if as_json else _PLAIN_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            logger.warning(f"[101] Cannot open log file {log_file}: {e}")
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )
