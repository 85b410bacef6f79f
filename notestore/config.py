"""Store configuration, read from ``NOTESTORE_*`` environment variables."""
from __future__ import annotations
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .actions import INIT_ACTION_TYPE


class StoreSettings(BaseSettings):
    """Settings shared by every store.

    Props:
        init_action_type: Type of the action dispatched on store creation.
        thread_safe: Serialize store operations behind a reentrant lock.
        log_actions: Log dispatched action types at INFO rather than DEBUG.
    """

    model_config = SettingsConfigDict(env_prefix="NOTESTORE_", frozen=True)

    init_action_type: str = INIT_ACTION_TYPE
    thread_safe: bool = True
    log_actions: bool = False


@lru_cache()
def get_settings() -> StoreSettings:
    """Get the process-wide settings."""
    return StoreSettings()
