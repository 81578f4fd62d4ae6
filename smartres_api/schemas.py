"""
Request bodies.

One model per endpoint body. Field names are snake_case in Python and
camelCase on the wire; anything not declared here is rejected.
"""
from __future__ import annotations

from datetime import date
from typing import Annotated, ClassVar, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

Text = Annotated[str, Field(min_length=1)]
Percent = Annotated[float, Field(ge=0, le=100)]
Money = Annotated[float, Field(ge=0)]

EmployeeAvailability = Literal["available", "busy", "unavailable"]
EquipmentAvailability = Literal["available", "busy", "maintenance"]
MaintenanceState = Literal["due", "current"]
ProjectStatus = Literal["planning", "active", "completed", "on-hold"]
ProjectPriority = Literal["high", "medium", "low"]
GroupType = Literal["welders", "pipe-fitters", "electricians", "laborers", "other"]
ResourceMasterType = Literal["manpower", "equipment"]
AssignmentStatus = Literal["active", "completed"]

# Fields a client may echo back from a GET; never writable.
READ_ONLY_FIELDS = ("_id", "id", "type", "createdAt", "updatedAt", "isDeleted", "memberCount")


class Body(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # optional on update, but an explicit null is rejected
    NOT_NULL: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _not_null(self):
        for f in self.NOT_NULL:
            if f in self.model_fields_set and getattr(self, f) is None:
                raise ValueError(f"{to_camel(f)} cannot be null")
        return self

    @classmethod
    def parse(cls, data, read_only=READ_ONLY_FIELDS):
        """Validate a JSON body after dropping read-only echoes."""
        if not isinstance(data, dict):
            data = {}
        data = {k: v for k, v in data.items() if k not in read_only}
        return cls.model_validate(data)

    def changes(self) -> dict:
        """Only the fields the client actually sent (snake_case keys)."""
        return self.model_dump(exclude_unset=True)


# ---------- employees ----------
class Avatar(Body):
    initials: Text
    color: Text


class EmployeeCreate(Body):
    name: Text
    position: Text
    employee_number: Optional[str] = None
    government_id: Optional[str] = None
    tier: Optional[Annotated[int, Field(ge=1, le=5)]] = None
    skills: List[str] = []
    certifications: List[str] = []
    availability: EmployeeAvailability = "available"
    utilization: Percent = 0
    location: Optional[str] = None
    experience: Annotated[float, Field(ge=0)] = 0
    avatar: Optional[Avatar] = None
    wage: Money = 0
    cost_per_hour: Money = 0
    is_indirect: bool = False
    resource_master_id: Optional[str] = None


class EmployeeUpdate(Body):
    NOT_NULL = ("name", "position", "skills", "certifications", "availability", "utilization",
                "experience", "wage", "cost_per_hour", "is_indirect")

    name: Optional[Text] = None
    position: Optional[Text] = None
    employee_number: Optional[str] = None
    government_id: Optional[str] = None
    tier: Optional[Annotated[int, Field(ge=1, le=5)]] = None
    skills: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    availability: Optional[EmployeeAvailability] = None
    utilization: Optional[Percent] = None
    location: Optional[str] = None
    experience: Optional[Annotated[float, Field(ge=0)]] = None
    avatar: Optional[Avatar] = None
    wage: Optional[Money] = None
    cost_per_hour: Optional[Money] = None
    is_indirect: Optional[bool] = None
    resource_master_id: Optional[str] = None


# ---------- equipment ----------
class EquipmentCreate(Body):
    name: Text
    make: Text
    model: Text
    availability: EquipmentAvailability = "available"
    utilization: Percent = 0
    location: Optional[str] = None
    year: Optional[int] = None
    last_maintenance: Optional[date] = None
    next_maintenance: Optional[date] = None
    maintenance: MaintenanceState = "current"
    value: Money = 0
    cost_per_hour: Money = 0
    depreciation_rate: Percent = 0
    resource_master_id: Optional[str] = None


class EquipmentUpdate(Body):
    NOT_NULL = ("name", "make", "model", "availability", "utilization", "last_maintenance",
                "next_maintenance", "maintenance", "value", "cost_per_hour", "depreciation_rate")

    name: Optional[Text] = None
    make: Optional[Text] = None
    model: Optional[Text] = None
    availability: Optional[EquipmentAvailability] = None
    utilization: Optional[Percent] = None
    location: Optional[str] = None
    year: Optional[int] = None
    last_maintenance: Optional[date] = None
    next_maintenance: Optional[date] = None
    maintenance: Optional[MaintenanceState] = None
    value: Optional[Money] = None
    cost_per_hour: Optional[Money] = None
    depreciation_rate: Optional[Percent] = None
    resource_master_id: Optional[str] = None


# ---------- projects ----------
class ResourceRequirement(Body):
    resource_master_id: Text
    quantity: Annotated[int, Field(ge=0)] = 1
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def as_json(self) -> dict:
        return {
            "resourceMasterId": self.resource_master_id,
            "quantity": self.quantity,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }


def _check_range(start, end):
    if start and end and end < start:
        raise ValueError("endDate cannot be before startDate")


class ProjectCreate(Body):
    name: Text
    start_date: date
    end_date: date
    description: str = ""
    status: ProjectStatus = "planning"
    priority: ProjectPriority = "medium"
    location: Optional[str] = None
    progress: Percent = 0
    budget: Money = 0
    actual_cost: Money = 0
    resource_requirements: List[ResourceRequirement] = []
    assigned_resources: List[str] = []

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.end_date)
        return self


class ProjectUpdate(Body):
    NOT_NULL = ("name", "start_date", "end_date", "description", "status", "priority",
                "progress", "budget", "actual_cost", "resource_requirements", "assigned_resources")

    name: Optional[Text] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    priority: Optional[ProjectPriority] = None
    location: Optional[str] = None
    progress: Optional[Percent] = None
    budget: Optional[Money] = None
    actual_cost: Optional[Money] = None
    resource_requirements: Optional[List[ResourceRequirement]] = None
    assigned_resources: Optional[List[str]] = None

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.end_date)
        return self


# ---------- business centers ----------
class BusinessCenterCreate(Body):
    name: Text
    type: Text
    capacity: Annotated[int, Field(ge=0)] = 0
    current_occupancy: Annotated[int, Field(ge=0)] = 0
    manager: Optional[str] = None
    contact: Optional[str] = None
    location: Optional[str] = None


class BusinessCenterUpdate(Body):
    NOT_NULL = ("name", "type", "capacity", "current_occupancy")

    name: Optional[Text] = None
    type: Optional[Text] = None
    capacity: Optional[Annotated[int, Field(ge=0)]] = None
    current_occupancy: Optional[Annotated[int, Field(ge=0)]] = None
    manager: Optional[str] = None
    contact: Optional[str] = None
    location: Optional[str] = None


# business centers have a real "type" column, so it is not a read-only echo there
BUSINESS_CENTER_READ_ONLY = tuple(f for f in READ_ONLY_FIELDS if f != "type")


# ---------- resource groups ----------
class ResourceGroupCreate(Body):
    name: Text
    group_type: GroupType
    description: str = ""
    member_ids: List[str] = []
    average_cost_per_hour: Money = 0
    total_capacity: Annotated[float, Field(ge=0)] = 0
    location: Optional[str] = None


class ResourceGroupUpdate(Body):
    NOT_NULL = ("name", "group_type", "description", "member_ids", "average_cost_per_hour", "total_capacity")

    name: Optional[Text] = None
    group_type: Optional[GroupType] = None
    description: Optional[str] = None
    member_ids: Optional[List[str]] = None
    average_cost_per_hour: Optional[Money] = None
    total_capacity: Optional[Annotated[float, Field(ge=0)]] = None
    location: Optional[str] = None


# ---------- resource masters ----------
# the business key of a resource master is "resourceId"
RESOURCE_MASTER_READ_ONLY = READ_ONLY_FIELDS + ("resourceId",)


class ResourceMasterCreate(Body):
    resource_name: Text
    resource_type: ResourceMasterType
    description: str = ""


class ResourceMasterUpdate(Body):
    NOT_NULL = ("resource_name", "resource_type", "description")

    resource_name: Optional[Text] = None
    resource_type: Optional[ResourceMasterType] = None
    description: Optional[str] = None


# ---------- assignments ----------
class AssignmentCreate(Body):
    project_id: Text
    resource_id: Text
    resource_type: Literal["employee", "equipment", "worker"]
    start_date: date
    end_date: date

    @field_validator("resource_type")
    @classmethod
    def _worker_alias(cls, v):
        return "employee" if v == "worker" else v

    @model_validator(mode="after")
    def _dates(self):
        _check_range(self.start_date, self.end_date)
        return self


class ScheduleEntry(Body):
    start_date: date
    end_date: date
    status: AssignmentStatus = "active"


class ScheduleRevision(Body):
    id: Text
    schedule: Annotated[List[ScheduleEntry], Field(min_length=1)]
