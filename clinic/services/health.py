"""
Point-in-time health report for the application and its database.

The database is probed with one lightweight read through the vet
repository.  A failing probe is reported as ``DOWN`` immediately and is
never retried.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone

from ..repositories import VetRepository

logger = logging.getLogger(__name__)


class HealthStatus(str, enum.Enum):
    UP = 'UP'
    DOWN = 'DOWN'


@dataclass(frozen=True)
class ComponentHealth:
    status: HealthStatus
    details: str

    def is_up(self) -> bool:
        return self.status == HealthStatus.UP


@dataclass(frozen=True)
class HealthReport:
    status: HealthStatus
    timestamp: datetime
    components: dict[str, ComponentHealth] = field(default_factory=dict)

    @property
    def http_status(self) -> int:
        return 200 if self.status == HealthStatus.UP else 503


class HealthChecker:
    def __init__(self, vet_repository: VetRepository):
        self.vet_repository = vet_repository

    def check(self) -> HealthReport:
        components = {
            'database': self.check_database(),
            # a running process cannot observe itself as down
            'application': ComponentHealth(HealthStatus.UP, 'Application is running'),
        }
        overall = HealthStatus.UP if all(c.is_up() for c in components.values()) else HealthStatus.DOWN
        return HealthReport(status=overall, timestamp=timezone.now(), components=components)

    def check_database(self) -> ComponentHealth:
        try:
            self.vet_repository.find_all()
        except Exception as exc:
            logger.error('Database health check failed', exc_info=True)
            return ComponentHealth(HealthStatus.DOWN, f'Database connection failed: {exc}')
        return ComponentHealth(HealthStatus.UP, 'Database connection is healthy')
