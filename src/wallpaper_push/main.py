from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import httpx
import typer

from wallpaper_push.config import AppConfig, ConfigError, load_config
from wallpaper_push.core import DispatchScheduler
from wallpaper_push.dispatch import RefreshDispatcher
from wallpaper_push.messaging import CredentialsError, FcmTransport, ServiceAccountTokenProvider
from wallpaper_push.observability import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from wallpaper_push.messaging import AccessTokenProvider

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Push silent wallpaper refresh messages to subscribed devices."""


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    config: AppConfig
    client: httpx.AsyncClient
    dispatcher: RefreshDispatcher
    scheduler: DispatchScheduler


def build_token_provider(config: AppConfig) -> ServiceAccountTokenProvider:
    credentials_file = config.firebase.credentials_file
    if credentials_file is not None:
        return ServiceAccountTokenProvider.from_file(Path(credentials_file))
    return ServiceAccountTokenProvider.from_env()


@asynccontextmanager
async def create_application(
    config_path: Path,
    *,
    token_provider: AccessTokenProvider | None = None,
) -> AsyncIterator[ApplicationComponents]:
    config = load_config(config_path)
    if token_provider is None:
        token_provider = build_token_provider(config)

    client = httpx.AsyncClient(timeout=httpx.Timeout(10.0))
    transport = FcmTransport(client=client, config=config.firebase, token_provider=token_provider)
    dispatcher = RefreshDispatcher(transport)
    scheduler = DispatchScheduler(interval_seconds=config.schedule.interval_seconds, dispatcher=dispatcher)

    try:
        yield ApplicationComponents(
            config=config,
            client=client,
            dispatcher=dispatcher,
            scheduler=scheduler,
        )
    finally:
        await client.aclose()


@app.command()
def run(
    config: Annotated[Path, typer.Option("--config", "-c")],
    once: Annotated[bool, typer.Option("--once", help="Dispatch a single refresh and exit.")] = False,
) -> None:
    configure_logging()
    try:
        if once:
            asyncio.run(_run_once(config))
        else:
            asyncio.run(_run_scheduler(config))
    except (ConfigError, CredentialsError) as exc:
        logger.error("startup_failed", error=str(exc))
        raise typer.Exit(code=1) from exc


async def _run_once(config_path: Path) -> None:
    async with create_application(config_path) as app_state:
        await app_state.dispatcher.dispatch()


async def _run_scheduler(config_path: Path) -> None:
    async with create_application(config_path) as app_state:
        await app_state.scheduler.start()
        logger.info(
            "scheduler_started",
            interval_minutes=app_state.config.schedule.interval_minutes,
            timezone=app_state.config.schedule.timezone,
            project_id=app_state.config.firebase.project_id,
        )
        try:
            await asyncio.Event().wait()
        finally:
            await app_state.scheduler.shutdown()


if __name__ == "__main__":
    app()
