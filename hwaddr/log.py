import logging

from hwaddr.config import config


def init_log() -> None:
    logging.basicConfig(
        level=config.log_level.value.upper(),
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler()]
        + (
            [logging.FileHandler(config.log_file)]
            if config.log_file is not None
            else []
        ),
    )
