"""Setting service — typed key/value site settings.

The declared ``type`` governs the stored JSON value: writes are normalised to
that type and rejected when they cannot be, reads coerce again so rows written
by other tools still come out typed.
"""

import json
import math
from typing import Any, Dict, List, Optional

import structlog

from cybersite.core.exceptions import BadRequestException, EntityNotFoundException
from cybersite.domain.enums import SettingType
from cybersite.domain.models.site_setting import SiteSetting
from cybersite.domain.repositories.setting_repository import SiteSettingRepository
from cybersite.domain.schemas.setting import SiteSettingUpsert

logger = structlog.get_logger(__name__)

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off"}


def _to_number(value: Any):
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            number = float(text)
    else:
        raise ValueError(f"cannot convert {type(value).__name__} to number")
    if isinstance(number, float) and not math.isfinite(number):
        raise ValueError("number must be finite")
    return number


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    raise ValueError(f"cannot convert {value!r} to boolean")


def _to_string(value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise ValueError("objects and arrays are not strings")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_container(value: Any, expected: type):
    if isinstance(value, str):
        value = json.loads(value)
    if not isinstance(value, expected):
        raise ValueError(f"expected {expected.__name__}")
    return value


def coerce_setting_value(value: Any, type_: str) -> Any:
    """Convert a raw JSON value to the declared setting type. Raises ValueError."""
    if value is None:
        return None
    if type_ == SettingType.NUMBER:
        return _to_number(value)
    if type_ == SettingType.BOOLEAN:
        return _to_boolean(value)
    if type_ == SettingType.OBJECT:
        return _to_container(value, dict)
    if type_ == SettingType.ARRAY:
        return _to_container(value, list)
    return _to_string(value)


def list_settings(repo: SiteSettingRepository) -> List[SiteSetting]:
    return repo.list_ordered()


def get_public_settings(repo: SiteSettingRepository) -> Dict[str, Any]:
    public = {}
    for setting in repo.list_ordered(public_only=True):
        try:
            public[setting.key] = coerce_setting_value(setting.value, setting.type)
        except ValueError as exc:
            logger.warning(
                "Skipping public setting with invalid value",
                key=setting.key,
                type=setting.type,
                error=str(exc),
            )
    return public


def upsert_setting(
    repo: SiteSettingRepository, data: SiteSettingUpsert, user_id: Optional[str] = None
) -> SiteSetting:
    try:
        value = coerce_setting_value(data.value, data.type)
    except ValueError as exc:
        raise BadRequestException(
            f"Value is not a valid {data.type}",
            {"key": data.key, "type": data.type, "reason": str(exc)},
        )

    values = data.model_dump()
    values.update(value=value, updated_by=user_id)
    return repo.upsert(values)


def delete_setting(repo: SiteSettingRepository, key: str) -> SiteSetting:
    setting = repo.get_by_key(key)
    if setting is None:
        raise EntityNotFoundException("Setting not found")
    repo.delete_by_key(key)
    return setting
