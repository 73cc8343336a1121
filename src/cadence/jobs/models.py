"""Pydantic models for the persisted job settings of the admin console."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from cadence.config.constants import DEFAULT_AUTO_PUBLISH_CRON, DEFAULT_CRON_EXPRESSION
from cadence.schedule.expression import generate_cron_expression, parse_cron_expression
from cadence.schedule.models import ScheduleConfig


class AssignmentAlgorithm(str, Enum):
    """How generated posts are assigned to interpreter authors."""

    ROUND_ROBIN = "round_robin"  # fewest total posts first
    SPECIALTY_FIRST = "specialty_first"
    RANDOM = "random"


class CronAutoGenerateConfig(BaseModel):
    """Turn pending keywords into blog content on a schedule."""

    enabled: bool = True
    batch_size: int = Field(default=3, ge=1, le=10)  # keywords per run
    schedule: str = DEFAULT_CRON_EXPRESSION
    include_rag: bool = True
    include_images: bool = True
    image_count: int = Field(default=3, ge=1, le=5)
    auto_publish: bool = False
    priority_threshold: int = Field(default=0, ge=0, le=10)  # 0 = every keyword


class CronAutoPublishConfig(BaseModel):
    """Publish draft content on a schedule."""

    enabled: bool = True
    schedule: str = DEFAULT_AUTO_PUBLISH_CRON
    max_publish_per_run: int = Field(default=10, ge=1, le=50)
    min_quality_score: int = Field(default=0, ge=0)


class AuthorAssignmentConfig(BaseModel):
    algorithm: AssignmentAlgorithm = AssignmentAlgorithm.ROUND_ROBIN
    prefer_specialty_match: bool = True
    fallback_to_any: bool = True


SETTINGS_MODELS: dict[str, type[BaseModel]] = {
    "cron_auto_generate": CronAutoGenerateConfig,
    "cron_auto_publish": CronAutoPublishConfig,
    "author_assignment": AuthorAssignmentConfig,
}

# Groups that carry a cron schedule
SCHEDULED_KEYS = ("cron_auto_generate", "cron_auto_publish")


class SystemSettings(BaseModel):
    """All persisted job settings, one attribute per settings key."""

    cron_auto_generate: CronAutoGenerateConfig = Field(default_factory=CronAutoGenerateConfig)
    cron_auto_publish: CronAutoPublishConfig = Field(default_factory=CronAutoPublishConfig)
    author_assignment: AuthorAssignmentConfig = Field(default_factory=AuthorAssignmentConfig)

    def group(self, key: str) -> BaseModel:
        """Return the settings group stored under *key*."""
        if key not in SETTINGS_MODELS:
            raise KeyError(key)
        return getattr(self, key)

    def schedule_config(self, key: str) -> ScheduleConfig:
        """Parse the cron schedule of a scheduled job into an editable config."""
        if key not in SCHEDULED_KEYS:
            raise KeyError(key)
        return parse_cron_expression(getattr(self, key).schedule)

    def with_schedule(self, key: str, config: ScheduleConfig) -> SystemSettings:
        """Return a copy whose *key* job runs on the schedule *config* describes."""
        if key not in SCHEDULED_KEYS:
            raise KeyError(key)
        group = getattr(self, key).model_copy(
            update={"schedule": generate_cron_expression(config)}
        )
        return self.model_copy(update={key: group})
