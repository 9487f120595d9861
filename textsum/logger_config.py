import logging

import uvicorn

FORMAT = "%(levelprefix)s %(asctime)s [%(name)s] %(message)s"
ROOT_LOGGER = "textsum"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    # Handler lives on the package logger; module loggers propagate to it.
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.INFO)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        formatter = uvicorn.logging.DefaultFormatter(
            FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return logging.getLogger(name)
