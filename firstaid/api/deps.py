"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends

from firstaid.chat.triggers import TriggerTable, get_trigger_table
from firstaid.core.config import Settings, get_settings


def get_active_triggers(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> TriggerTable:
    """Get the trigger table for the configured ruleset."""
    return get_trigger_table(app_settings.trigger_ruleset)


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
ActiveTriggers = Annotated[TriggerTable, Depends(get_active_triggers)]
