from __future__ import annotations
import logging, sys
from .settings import Settings

_LOGGER_INITIALIZED = False

def init_logging(cfg: Settings, level: str | None = None) -> logging.Logger:
    global _LOGGER_INITIALIZED
    logger = logging.getLogger("avalanche_installer")
    if _LOGGER_INITIALIZED:
        return logger
    level_name = (level or cfg.log_level).upper()
    lvl = getattr(logging, level_name, logging.INFO)
    logger.setLevel(lvl)

    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    if cfg.log_console:
        # stdout is reserved for the stdio protocol stream
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        ch.setLevel(lvl)
        logger.addHandler(ch)
    if cfg.log_file:
        try:
            fh = logging.FileHandler(cfg.log_file, encoding="utf-8")
            fh.setFormatter(fmt)
            fh.setLevel(lvl)
            logger.addHandler(fh)
        except Exception as e:
            logger.warning("Failed to open log file %s: %s", cfg.log_file, e)
    _LOGGER_INITIALIZED = True
    logger.debug("Logging initialized (level=%s, file=%s, console=%s)",
                 level_name, cfg.log_file, cfg.log_console)
    return logger
