"""Settings repository - Database operations for process-wide settings"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import AppSetting
from ...shared.store import commit_or_raise

WELCOME_PACK_FEE_KEY = "welcome_pack_fee"


class SettingsRepository:
    """Repository for key/value settings"""

    @staticmethod
    def get_value(db: Session, key: str) -> Optional[str]:
        """Get a raw setting value, None if never stored"""
        setting = db.query(AppSetting).filter(AppSetting.key == key).first()
        return setting.value if setting else None

    @staticmethod
    def set_value(db: Session, key: str, value: str) -> None:
        """Insert or update a setting"""
        setting = db.query(AppSetting).filter(AppSetting.key == key).first()
        if setting:
            setting.value = value
        else:
            db.add(AppSetting(key=key, value=value))
        commit_or_raise(db)
