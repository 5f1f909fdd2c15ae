"""Enumerations shared by models and schemas. Values are stored as plain strings."""

import enum


class UserRole(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    EDITOR = "editor"
    VIEWER = "viewer"


ADMIN_ROLES = frozenset({UserRole.SUPER_ADMIN.value, UserRole.EDITOR.value})


class LayoutType(str, enum.Enum):
    DEFAULT = "default"
    CARDS = "cards"
    PRICING = "pricing"
    GRID = "grid"
    TIMELINE = "timeline"


class BillingCycle(str, enum.Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


class SettingType(str, enum.Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class ContactPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class ContactStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class AuditAction(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
