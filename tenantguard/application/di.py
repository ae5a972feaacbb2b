from dishka import AsyncContainer, make_async_container

from tenantguard.config import Config
from tenantguard.domain.auth.util.di import AuthProvider
from tenantguard.domain.team.util.di import TeamProvider
from tenantguard.infrastructure.memory.di import MemoryProvider
from tenantguard.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        MemoryProvider(),
        AuthProvider(),
        TeamProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
