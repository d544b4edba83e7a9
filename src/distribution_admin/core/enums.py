from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored by the backend for one employee on one day."""

    PRESENT = "PRESENT"
    LEAVE = "LEAVE"
    SICK = "SICK"
    ABSENT = "ABSENT"


class BatchAction(str, Enum):
    UPDATE = "update"
    DELETE = "delete"


class EditorMode(str, Enum):
    VIEW = "view"
    EDIT = "edit"


class EmployeeRole(str, Enum):
    WAREHOUSE_HEAD = "WAREHOUSE_HEAD"
    SALES = "SALES"
    DRIVER = "DRIVER"
    HELPER = "HELPER"
    TREASURER = "TREASURER"
    STAFF = "STAFF"


class UserRole(str, Enum):
    """Roles of dashboard accounts (not employees)."""

    SUPER_ADMIN = "SUPER_ADMIN"
    OWNER = "OWNER"
    WAREHOUSE_HEAD = "WAREHOUSE_HEAD"
    TREASURER = "TREASURER"


class VehicleType(str, Enum):
    PICKUP = "PICKUP"
    TRONTON = "TRONTON"
    TRUCK = "TRUCK"
