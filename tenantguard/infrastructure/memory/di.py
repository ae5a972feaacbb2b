"""DI provider wiring the in-memory adapters to the domain ports."""

from dishka import Provider, provide

from tenantguard.domain.auth.port.notifier import UserNotifier
from tenantguard.domain.auth.port.repository import AuditLogRepository, UserRepository
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.domain.team.port.repository import BillingGateway, TeamRepository
from tenantguard.infrastructure.memory.notifier import LoggingNotifier
from tenantguard.infrastructure.memory.repository import (
    MemoryAuditLogRepository,
    MemoryBillingGateway,
    MemoryStore,
    MemoryTeamRepository,
    MemoryUnitOfWork,
    MemoryUserRepository,
)
from tenantguard.util.di.scope import Scope


class MemoryProvider(Provider):
    @provide(scope=Scope.APP)
    def get_store(self) -> MemoryStore:
        return MemoryStore()

    @provide(scope=Scope.APP)
    def get_notifier(self) -> UserNotifier:
        return LoggingNotifier()

    user_repo = provide(MemoryUserRepository, provides=UserRepository, scope=Scope.UOW)
    team_repo = provide(MemoryTeamRepository, provides=TeamRepository, scope=Scope.UOW)
    audit_repo = provide(MemoryAuditLogRepository, provides=AuditLogRepository, scope=Scope.UOW)
    billing = provide(MemoryBillingGateway, provides=BillingGateway, scope=Scope.UOW)
    uow = provide(MemoryUnitOfWork, provides=UnitOfWork, scope=Scope.UOW)
