import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO"):
    """Root logger setup, called once when the app is created."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn access lines duplicate our own request logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
