"""
Debug logging for CMDLEX.

Everything cmdlex logs goes through `LOG`: implicit root synthesis, alias
normalization, prefix policy changes and errors caught at the input and
command layers. Records go to stderr so that one-shot token output on
stdout stays clean for pipes.

`CMDLEX_BEQUIET=true` silences all of it; the flag is read on every call,
so `appsettings.beQuiet` can be flipped at runtime.

Example:
    from cmdlex.lib.log import LOG
    LOG(f"Normalized {count} symbol(s)")
"""

from loguru import logger
from typing import Any, Final
import sys

app_logger = logger.bind(app="CMDLEX")

LOG_FORMAT: Final[str] = (
    "<green>{time:HH:mm:ss.SSS}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >24}</yellow>:<cyan>{function}</cyan>:<cyan>{line}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()
app_logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG")


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Emit a debug record unless `appsettings.beQuiet` is set.

    :param args: Message and format arguments, as for `logger.debug`.
    :param kwargs: Format keyword arguments, as for `logger.debug`.
    """
    try:
        from cmdlex.config.settings import appsettings  # late: import cycle via configuration

        if appsettings.beQuiet:
            return
        app_logger.opt(depth=1).debug(*args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}", file=sys.stderr)
