"""
SQLAlchemy Implementation of Site Setting Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func

from cybersite.domain.models.site_setting import SiteSetting
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.infrastructure.repositories.base_repository import (
    SQLAlchemyRepository,
    dialect_insert,
)

UPSERT_FIELDS = ("key", "value", "type", "description", "is_public", "updated_by")


class SQLAlchemySiteSettingRepository(SQLAlchemyRepository[SiteSetting], SiteSettingRepository):
    """Site setting repository implementation using SQLAlchemy."""

    def get_by_key(self, key: str) -> Optional[SiteSetting]:
        return self.db.query(SiteSetting).filter(SiteSetting.key == key).first()

    def list_ordered(self, public_only: bool = False) -> List[SiteSetting]:
        query = self.db.query(SiteSetting)
        if public_only:
            query = query.filter(SiteSetting.is_public.is_(True))
        return query.order_by(SiteSetting.key.asc()).all()

    def upsert(self, data: Dict[str, Any]) -> SiteSetting:
        values = {field: data.get(field) for field in UPSERT_FIELDS if field in data}
        insert = dialect_insert(self.db)
        stmt = insert(SiteSetting).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SiteSetting.key],
            set_={**{k: v for k, v in values.items() if k != "key"}, "updated_at": func.now()},
        )
        self.db.execute(stmt)
        self._save()
        return (
            self.db.query(SiteSetting)
            .filter(SiteSetting.key == values["key"])
            .populate_existing()
            .one()
        )

    def delete_by_key(self, key: str) -> Optional[SiteSetting]:
        setting = self.get_by_key(key)
        if setting:
            self.db.delete(setting)
            self._save()
        return setting
