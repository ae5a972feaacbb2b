"""DI provider for team domain."""

from dishka import Provider, provide

from tenantguard.config import Config, TeamConfig
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.shared.authorization.policy_set import PolicySet
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.domain.team.command.create_team import CreateTeamHandler
from tenantguard.domain.team.port.repository import BillingGateway, TeamRepository
from tenantguard.domain.team.service.creation import TeamCreationService
from tenantguard.util.di.scope import Scope


class TeamProvider(Provider):
    """DI provider for team provisioning."""

    create_team_handler = provide(CreateTeamHandler, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_team_config(self, config: Config) -> TeamConfig:
        return config.teams

    @provide(scope=Scope.UOW)
    def get_creation_service(
        self,
        team_repo: TeamRepository,
        user_repo: UserRepository,
        billing: BillingGateway,
        audit: AuditLogService,
        uow: UnitOfWork,
        team_config: TeamConfig,
        policy_set: PolicySet,
    ) -> TeamCreationService:
        """Provide TeamCreationService."""
        return TeamCreationService(
            _team_repo=team_repo,
            _user_repo=user_repo,
            _billing=billing,
            _audit=audit,
            _uow=uow,
            _config=team_config,
            _policy_set=policy_set,
        )
