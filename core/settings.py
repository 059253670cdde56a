"""Application settings and environment configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os
from datetime import timedelta
from functools import lru_cache


_TRUTHY = {"1", "true", "yes", "on"}
_PERMISSIONS = ("granted", "denied", "undetermined")


@dataclass
class Settings:
    """Runtime configuration resolved from environment variables."""

    notification_mode: str = "memory"
    notification_permission: str = "undetermined"
    reminder_lead_hours: float = 24.0
    seed_demo_data: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        env_mode = os.getenv("STUDYMATE_NOTIFICATIONS")
        env_permission = os.getenv("STUDYMATE_NOTIFICATION_PERMISSION")
        env_lead = os.getenv("STUDYMATE_REMINDER_LEAD_HOURS")
        env_seed = os.getenv("STUDYMATE_SEED_DEMO")
        env_log_level = os.getenv("STUDYMATE_LOG_LEVEL")
        if env_mode:
            self.notification_mode = env_mode.strip().lower()
        if env_permission:
            self.notification_permission = env_permission.strip().lower()
        if env_lead:
            try:
                self.reminder_lead_hours = float(env_lead)
            except ValueError:
                raise ValueError(
                    f"STUDYMATE_REMINDER_LEAD_HOURS must be a number of hours, got {env_lead!r}"
                ) from None
        if env_seed is not None:
            self.seed_demo_data = env_seed.strip().lower() in _TRUTHY
        if env_log_level:
            self.log_level = env_log_level.upper()
        if self.reminder_lead_hours <= 0:
            raise ValueError(
                f"STUDYMATE_REMINDER_LEAD_HOURS must be positive, got {self.reminder_lead_hours}"
            )
        if self.notification_permission not in _PERMISSIONS:
            raise ValueError(
                "STUDYMATE_NOTIFICATION_PERMISSION must be one of "
                f"{', '.join(_PERMISSIONS)}, got {self.notification_permission!r}"
            )

    @property
    def resolved_notification_mode(self) -> str:
        """Choose between the in-memory centre or the APScheduler-backed one."""

        if self.notification_mode in ("memory", "local"):
            return self.notification_mode
        return "memory"

    @property
    def reminder_lead(self) -> timedelta:
        return timedelta(hours=self.reminder_lead_hours)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
