from sqlalchemy import BigInteger, Column, Index, Integer, String, Text, text

from .base import Base


class Edusharing(Base):
    __tablename__ = 'edusharing'
    __table_args__ = (
        Index('edusharing_course_idx', 'course'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    course = Column(Integer, nullable=False)
    name = Column(String(255))
    intro = Column(Text)
    introformat = Column(Integer, nullable=False, server_default=text("0"))
    object_url = Column(String(1024), nullable=False)
    object_version = Column(String(255), nullable=False, server_default=text("''"))
    usage_id = Column(String(255))
    force_download = Column(Integer, nullable=False, server_default=text("0"))
    popup_window = Column(Integer, nullable=False, server_default=text("0"))
    tracking = Column(Integer, nullable=False, server_default=text("0"))
    blockdisplay = Column(Integer, nullable=False, server_default=text("0"))
    options = Column(String(255), nullable=False, server_default=text("''"))
    module_id = Column(Integer)
    section_id = Column(Integer)
    timecreated = Column(BigInteger, nullable=False, server_default=text("0"))
    timemodified = Column(BigInteger, nullable=False, server_default=text("0"))
    timeupdated = Column(BigInteger, nullable=False, server_default=text("0"))


class PluginSetting(Base):
    """Row of the host's plugin settings table."""
    __tablename__ = 'config_plugins'
    __table_args__ = (
        Index('config_plugins_plugin_name_key', 'plugin', 'name', unique=True),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plugin = Column(String(100), nullable=False)
    name = Column(String(100), nullable=False)
    value = Column(Text, nullable=False, server_default=text("''"))
