# SPDX-License-Identifier: Apache-2.0

"""
Environment configuration for the contact API.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


def _csv(name: str) -> List[str]:
    raw = os.getenv(name, '')
    return [item.strip() for item in raw.split(',') if item.strip()]


@dataclass
class Settings:
    """Runtime settings, read from the environment by from_env()."""
    environment: str = 'development'
    service_name: str = 'contact-api'
    service_version: str = '1.0.0'
    port: int = 5000
    otel_enabled: bool = True
    trust_proxy: bool = False
    log_level: Optional[str] = None
    cors_allowed_origins: List[str] = field(default_factory=list)
    frontend_url: Optional[str] = None
    team_notification_emails: List[str] = field(default_factory=list)

    @property
    def debug(self) -> bool:
        return self.environment == 'development'

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            environment=os.getenv('ENVIRONMENT', 'development'),
            service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
            port=int(os.getenv('PORT', 5000)),
            otel_enabled=_flag('OTEL_ENABLED', 'true'),
            trust_proxy=_flag('TRUST_PROXY', 'false'),
            log_level=os.getenv('LOG_LEVEL'),
            cors_allowed_origins=_csv('CORS_ALLOWED_ORIGINS'),
            frontend_url=os.getenv('FRONTEND_URL'),
            team_notification_emails=_csv('TEAM_NOTIFICATION_EMAILS'),
        )
