"""
fortune-first configuration

Endpoints, timeouts, pacing delays and download locations live here.
Environment variables override defaults for deployment flexibility.
"""

import os
from dataclasses import dataclass, field


@dataclass
class ApiConfig:
    """Where leads and newsletter signups are sent"""
    base_url: str = os.getenv("FORTUNE_FIRST_API_URL", "http://localhost:5000")
    timeout_seconds: float = float(os.getenv("LEADS_API_TIMEOUT", "5.0"))  # httpx default


@dataclass
class QuizConfig:
    """Quiz pacing"""
    # Pause between picking an option and showing the next step
    advance_delay_seconds: float = float(os.getenv("QUIZ_ADVANCE_DELAY", "0.8"))


@dataclass
class DownloadConfig:
    """Where downloaded guides are written"""
    download_dir: str = os.getenv("DOWNLOAD_DIR", ".")


@dataclass
class Config:
    """Master config: import this"""
    api: ApiConfig = field(default_factory=ApiConfig)
    quiz: QuizConfig = field(default_factory=QuizConfig)
    downloads: DownloadConfig = field(default_factory=DownloadConfig)

    @classmethod
    def fast_mode(cls) -> "Config":
        """For development/testing: no pacing delays"""
        cfg = cls()
        cfg.quiz.advance_delay_seconds = 0.0
        return cfg


# Singleton
config = Config()
