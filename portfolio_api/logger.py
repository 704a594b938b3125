"""
로깅 설정

모든 모듈은 get_logger(__name__)로 "portfolio_api" 하위 로거를 받아 사용
"""
import logging
from typing import Optional

from portfolio_api import config


class LoggingConfig:
    """로그 출력 on/off 스위치 (싱글톤)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._enabled = True
        return cls._instance

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)

    @classmethod
    def reset(cls) -> None:
        """기본 상태로 초기화 (테스트용)"""
        cls._instance = None


class LogFilter(logging.Filter):
    """LoggingConfig가 꺼져 있으면 출력하지 않음"""

    def filter(self, record):
        return LoggingConfig().enabled


class PortfolioLogger:
    """프로젝트 공용 로거"""

    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        로거 조회 (최초 1회 핸들러 구성)

        Args:
            name: 하위 로거 이름 (None이면 루트 "portfolio_api")

        Returns:
            설정된 로거
        """
        if cls._instance is None:
            logger = logging.getLogger("portfolio_api")
            logger.setLevel(config.LOG_LEVEL)
            logger.propagate = False

            if not logger.handlers:
                handler = logging.StreamHandler()
                handler.setLevel(config.LOG_LEVEL)
                handler.setFormatter(
                    logging.Formatter(
                        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                    )
                )
                handler.addFilter(LogFilter())
                logger.addHandler(handler)

            cls._instance = logger

        if name:
            # "portfolio_api.services.x" → "portfolio_api" 하위로 중복 없이 연결
            if name.startswith("portfolio_api."):
                name = name[len("portfolio_api."):]
            return cls._instance.getChild(name)

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """로거 초기화 (테스트용)"""
        cls._instance = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """PortfolioLogger.get_logger 단축 함수"""
    return PortfolioLogger.get_logger(name)
