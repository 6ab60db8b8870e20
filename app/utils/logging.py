import logging

LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"
HANDLER_NAME = "review-service-console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a single console handler to the root logger.
    Safe to call more than once (e.g. when the app factory runs again in tests).
    """
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root
