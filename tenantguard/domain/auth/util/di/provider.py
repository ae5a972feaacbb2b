"""DI provider for auth domain."""

import logging

from dishka import Provider, from_context, provide

from tenantguard.config import Config
from tenantguard.domain.auth.command.user_admin import ChangeUserStatusHandler, UpdateUserHandler
from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.port.notifier import UserNotifier
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.auth.service.status import StatusManagementService
from tenantguard.domain.auth.service.user_update import UserUpdateService
from tenantguard.domain.shared.authorization.policy_set import POLICY_SET, PolicySet
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.util.di.scope import Scope

logger = logging.getLogger(__name__)


class AuthProvider(Provider):
    """DI provider for auth domain services and handlers."""

    config = from_context(provides=Config, scope=Scope.APP)
    actor = from_context(provides=Actor, scope=Scope.UOW)

    # Command Handlers
    change_user_status_handler = provide(ChangeUserStatusHandler, scope=Scope.UOW)
    update_user_handler = provide(UpdateUserHandler, scope=Scope.UOW)

    # Services
    audit_log_service = provide(AuditLogService, scope=Scope.UOW)
    user_update_service = provide(UserUpdateService, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_policy_set(self, config: Config) -> PolicySet:
        """Provide the application PolicySet, checking rule coverage if configured."""
        if config.policy.validate_on_startup:
            POLICY_SET.validate_coverage()
            logger.info("Policy coverage validated for all actions")
        return POLICY_SET

    @provide(scope=Scope.UOW)
    def get_status_service(
        self,
        user_repo: UserRepository,
        audit: AuditLogService,
        notifier: UserNotifier,
        uow: UnitOfWork,
        policy_set: PolicySet,
    ) -> StatusManagementService:
        """Provide StatusManagementService."""
        return StatusManagementService(
            _user_repo=user_repo,
            _audit=audit,
            _notifier=notifier,
            _uow=uow,
            _policy_set=policy_set,
        )
