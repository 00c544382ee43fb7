"""WorkOS Directory Sync operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, Field, model_validator

from ._params import path_segment, require_exactly_one
from .common import Timestamps
from .known_or_unknown import KnownOrUnknown
from .pagination import PaginatedList, PaginationParams
from .roles import RoleSlug

if TYPE_CHECKING:
    from .client import WorkOS


class DirectoryUserState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class DirectoryUserEmail(BaseModel):
    primary: Optional[bool] = None
    type: Optional[str] = None
    value: Optional[str] = None


class DirectoryGroup(Timestamps):
    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    name: str


class DirectoryUser(Timestamps):
    """A user provisioned from a directory provider."""

    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    emails: list[DirectoryUserEmail] = Field(default_factory=list)
    groups: list[DirectoryGroup] = Field(default_factory=list)
    state: KnownOrUnknown[DirectoryUserState]
    custom_attributes: dict[str, Any] = Field(default_factory=dict)
    role: Optional[RoleSlug] = None

    def primary_email(self) -> str | None:
        for email in self.emails:
            if email.primary:
                return email.value
        return None


class ListDirectoryUsersParams(PaginationParams):
    """Users of one directory, or members of one group."""

    directory: Optional[str] = None
    group: Optional[str] = None

    @model_validator(mode="after")
    def _check_filter(self) -> ListDirectoryUsersParams:
        require_exactly_one(self, "directory", "group")
        return self


class ListDirectoryGroupsParams(PaginationParams):
    """Groups of one directory, or groups one user belongs to."""

    directory: Optional[str] = None
    user: Optional[str] = None

    @model_validator(mode="after")
    def _check_filter(self) -> ListDirectoryGroupsParams:
        require_exactly_one(self, "directory", "user")
        return self


class DirectorySync:
    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    async def get_directory_user(self, directory_user_id: str) -> DirectoryUser:
        return await self.workos.call(
            "GET", f"/directory_users/{path_segment(directory_user_id)}", DirectoryUser
        )

    async def list_directory_users(
        self, params: ListDirectoryUsersParams
    ) -> PaginatedList[DirectoryUser]:
        return await self.workos.call(
            "GET", "/directory_users", PaginatedList[DirectoryUser], params=params.to_query()
        )

    async def get_directory_group(self, directory_group_id: str) -> DirectoryGroup:
        return await self.workos.call(
            "GET", f"/directory_groups/{path_segment(directory_group_id)}", DirectoryGroup
        )

    async def list_directory_groups(
        self, params: ListDirectoryGroupsParams
    ) -> PaginatedList[DirectoryGroup]:
        return await self.workos.call(
            "GET", "/directory_groups", PaginatedList[DirectoryGroup], params=params.to_query()
        )
