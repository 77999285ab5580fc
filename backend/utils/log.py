import logging

from configs.env import SECURE_SHARE_LOG_FILE

log_fmt = (
    "%(levelname)s %(asctime)s.%(msecs)03d [%(process)d-%(threadName)s] "
    "(%(funcName)s@%(filename)s:%(lineno)03d) %(message)s"
)
date_fmt = "%Y-%m-%d %H:%M:%S"
logging.basicConfig(
    format=log_fmt,
    datefmt=date_fmt,
    level=logging.INFO,
    handlers=[logging.FileHandler(SECURE_SHARE_LOG_FILE), logging.StreamHandler()],
)
logging.info("init logging module")
