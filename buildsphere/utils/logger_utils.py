from loguru import logger
import sys
import os

from buildsphere.config import log_config


class LogConfig:
    LOGGING_LEVEL = log_config["LOG_LEVEL"]
    LOGGING_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
    LOGS_DIR = log_config["LOG_DIR"]
    LOG_FILE_PATH = os.path.join(LOGS_DIR, "buildsphere.log")
    LOG_TO_FILE = log_config["LOG_TO_FILE"]

    @staticmethod
    def configure_global_logging():
        logger.remove()  # loguru의 기본 stderr 핸들러 제거

        logger.add(
            sys.stderr,
            format=LogConfig.LOGGING_FORMAT,
            level=LogConfig.LOGGING_LEVEL,
        )

        if LogConfig.LOG_TO_FILE:
            os.makedirs(LogConfig.LOGS_DIR, exist_ok=True)
            logger.add(
                LogConfig.LOG_FILE_PATH,
                rotation="10 MB",
                retention="30 days",
                format=LogConfig.LOGGING_FORMAT,
                level=LogConfig.LOGGING_LEVEL,
                mode="a",
            )


LogConfig.configure_global_logging()
