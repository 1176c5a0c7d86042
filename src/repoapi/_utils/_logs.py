import logging
import sys

logger: logging.Logger = logging.getLogger("repoapi")

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(
    logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
)


def setup_logging(should_debug: bool | None = None) -> None:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level, so the facade and the CLI can both
    call it without duplicating output.
    """
    level = logging.DEBUG if should_debug else logging.INFO
    logger.setLevel(level)

    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(level if should_debug else logging.WARNING)
