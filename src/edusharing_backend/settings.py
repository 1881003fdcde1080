import os
import threading
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

SETTINGS_PLUGIN = "edusharing"
ENV_PREFIX = "EDUSHARING_"

class BackendSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.DEBUG_MODE = os.environ.get("DEBUG_MODE","development")
        self.DATABASE_URL = os.environ.get("DATABASE_URL","sqlite:///edusharing.db")
        self.REPOSITORY_TIMEOUT = float(os.environ.get("EDUSHARING_REPOSITORY_TIMEOUT", "10"))

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(BackendSettings, cls).__new__(cls)
        return cls._instance

settings = BackendSettings()


class EdusharingSettings(BaseModel):
    """Named plugin settings consumed by the repository integration."""
    application_cc_gui_url: str = Field("", description="Base URL of the repository web application")
    application_appid: str = Field("", description="Application id registered at the repository")
    repository_public_key: str = Field("", description="Repository public key (PEM)")
    edu_guest_option: bool = Field(False, description="Authenticate every user as guest")
    edu_guest_guest_id: str = Field("", description="Guest id sent when guest mode is enabled")
    EDU_AUTH_KEY: str = Field("username", description="User attribute used as auth key")
    EDU_AUTH_PARAM_NAME_USERID: str = Field("userid", description="SSO session field holding the user id")

    @field_validator('edu_guest_option', mode='before')
    @classmethod
    def validate_guest_option(cls, v):
        # any value but "" and "0" enables guest mode
        if isinstance(v, str):
            return v not in ("", "0")
        return bool(v)

    @field_validator('application_cc_gui_url')
    @classmethod
    def validate_gui_url(cls, v):
        return v.rstrip('/')


def _settings_from_environment() -> dict:
    values = {}
    for name in EdusharingSettings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            values[name] = value
    return values


def get_edusharing_settings(db: Optional[Session] = None) -> EdusharingSettings:
    """
    Load plugin settings.

    Environment variables (``EDUSHARING_<NAME>``) provide the defaults, rows of
    the host's plugin settings table override them when a session is given.
    """
    values = _settings_from_environment()

    if db is not None:
        from edusharing_backend.repositories.plugin_settings import PluginSettingRepository

        stored = PluginSettingRepository(db).get_plugin_settings(SETTINGS_PLUGIN)
        values.update({k: v for k, v in stored.items() if k in EdusharingSettings.model_fields})

    return EdusharingSettings(**values)
