"""Logging setup shared by the package and the demo app."""

import logging

# Custom TRACE level
TRACE = 5
logging.TRACE = TRACE
logging.addLevelName(TRACE, "TRACE")


# Add trace method to standard Logger class for all instances
def trace_method(self, msg, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)


logging.Logger.trace = trace_method


def configure_logging(level_name: str = "INFO") -> None:
    """Configure the root logger once; later calls are no-ops."""
    log_level_str = level_name.upper()
    if log_level_str == "TRACE":
        log_level = TRACE
    else:
        log_level = getattr(logging, log_level_str, logging.INFO)
        if not isinstance(log_level, int):
            log_level = logging.INFO

    if logging.getLogger().hasHandlers():
        return

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)-8s - %(message)s'
    )
    root = logging.getLogger()

    # VERBOSE keeps the root at DEBUG but shows resolver traces
    if log_level_str == "VERBOSE":
        root.setLevel(logging.DEBUG)
        logging.getLogger("realip").setLevel(TRACE)
        root.info("VERBOSE mode enabled: resolver traces active for debugging.")
    elif log_level_str == "TRACE":
        root.setLevel(TRACE)
        logging.getLogger("realip").setLevel(TRACE)
        root.trace("Trace logging enabled at startup (verbose details).")
    else:
        root.setLevel(log_level)
        root.debug("Debug logging enabled at startup.")
