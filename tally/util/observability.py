"""Logfire setup.

Domain code logs through logfire directly (spans around votes, guarded
writes and propagation). This module only configures where that output goes
and hooks SQL tracing onto the engine.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from tally.config import ObservabilitySettings, Settings


def _should_send(observability: ObservabilitySettings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire output for the process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire cloud, or
    OBSERVABILITY__SEND_TO_LOGFIRE=false to keep it on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name="tally",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        vote_relations=len(settings.voting.relations),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued by the engine, including guarded updates."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info(
        "SQLAlchemy instrumented",
        database=engine.url.render_as_string(hide_password=True),
    )
