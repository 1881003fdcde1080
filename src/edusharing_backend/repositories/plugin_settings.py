from typing import Dict
from sqlalchemy.orm import Session

from .base import BaseRepository
from ..model.edusharing import PluginSetting


class PluginSettingRepository(BaseRepository[PluginSetting]):
    """Access to the host's plugin settings table."""

    def __init__(self, db: Session):
        super().__init__(db, PluginSetting)

    def get_plugin_settings(self, plugin: str) -> Dict[str, str]:
        return {row.name: row.value for row in self.find_by(plugin=plugin)}

    def set_plugin_setting(self, plugin: str, name: str, value: str) -> PluginSetting:
        existing = self.find_by(plugin=plugin, name=name)
        if existing:
            return self.update(existing[0].id, {"value": value})
        return self.create({"plugin": plugin, "name": name, "value": value})
