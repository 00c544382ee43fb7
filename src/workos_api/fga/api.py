"""WorkOS Fine-Grained Authorization operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .._params import path_segment, request_body
from ..errors import OperationError
from ..pagination import PaginatedList
from ..response import classify_response, decode_response
from .models import (
    BatchCheckParams,
    CheckParams,
    CheckResult,
    CreatePolicyParams,
    CreateResourceParams,
    CreateResourceTypeParams,
    CreateWarrantParams,
    DeleteWarrantParams,
    ListPoliciesParams,
    ListResourcesParams,
    ListResourceTypesParams,
    ListWarrantsParams,
    Policy,
    QueryParams,
    QueryResult,
    Resource,
    ResourceType,
    ResourceWrite,
    Schema,
    UpdatePolicyParams,
    UpdateResourceParams,
    UpdateResourceTypeParams,
    Warrant,
)

if TYPE_CHECKING:
    from ..client import WorkOS

BASE_PATH = "/fga/v1"


class CheckNotAllowedError(OperationError):
    """Raised when a check response carries no ``allowed`` verdict."""

    def __init__(self) -> None:
        super().__init__("not_allowed: subject does not have the relation on the resource")


class Fga:
    """Fine-Grained Authorization: resource types, resources, warrants, policies."""

    def __init__(self, workos: WorkOS) -> None:
        self.workos = workos

    # Checks and queries

    async def check(self, params: CheckParams) -> bool:
        """Return whether ``params.subject`` has ``params.relation`` on ``params.resource``."""
        response = classify_response(
            await self.workos.send("POST", f"{BASE_PATH}/check", json=request_body(params))
        )
        result = decode_response(response, dict[str, Any])
        allowed = result.get("allowed")
        if not isinstance(allowed, bool):
            raise CheckNotAllowedError()
        return allowed

    async def batch_check(self, params: BatchCheckParams) -> list[CheckResult]:
        return await self.workos.call(
            "POST", f"{BASE_PATH}/check/batch", list[CheckResult], json=request_body(params)
        )

    async def query(
        self, params: QueryParams, token: str | None = None
    ) -> PaginatedList[QueryResult]:
        """Run a query-language request.

        ``params.warrant_token`` is sent as ``Warrant-Token`` so reads observe
        a prior write. ``token`` replaces the API key for this request only.
        """
        headers = {"Warrant-Token": params.warrant_token} if params.warrant_token else None
        return await self.workos.call(
            "GET",
            f"{BASE_PATH}/query",
            PaginatedList[QueryResult],
            params=params.to_query(),
            headers=headers,
            token=token,
        )

    # Schema

    async def apply_schema(self, schema: str) -> None:
        await self.workos.call(
            "PUT",
            f"{BASE_PATH}/schema",
            content=schema,
            headers={"Content-Type": "text/plain"},
        )

    async def get_schema(self) -> Schema:
        return await self.workos.call("GET", f"{BASE_PATH}/schema", Schema)

    # Resource types

    async def create_resource_type(self, params: CreateResourceTypeParams) -> ResourceType:
        return await self.workos.call(
            "POST", f"{BASE_PATH}/resource-types", ResourceType, json=request_body(params)
        )

    async def get_resource_type(self, resource_type: str) -> ResourceType:
        return await self.workos.call(
            "GET", f"{BASE_PATH}/resource-types/{path_segment(resource_type)}", ResourceType
        )

    async def update_resource_type(self, params: UpdateResourceTypeParams) -> ResourceType:
        return await self.workos.call(
            "PUT",
            f"{BASE_PATH}/resource-types/{path_segment(params.type)}",
            ResourceType,
            json=request_body(params),
        )

    async def delete_resource_type(self, resource_type: str) -> None:
        await self.workos.call("DELETE", f"{BASE_PATH}/resource-types/{path_segment(resource_type)}")

    async def list_resource_types(
        self, params: ListResourceTypesParams | None = None
    ) -> PaginatedList[ResourceType]:
        params = params or ListResourceTypesParams()
        return await self.workos.call(
            "GET",
            f"{BASE_PATH}/resource-types",
            PaginatedList[ResourceType],
            params=params.to_query(),
        )

    async def apply_resource_types(
        self, resource_types: Sequence[ResourceType]
    ) -> list[ResourceType]:
        """Replace the environment's resource types with ``resource_types``."""
        payload = {"resource_types": [request_body(item) for item in resource_types]}
        return await self.workos.call(
            "PUT", f"{BASE_PATH}/resource-types", list[ResourceType], json=payload
        )

    # Resources

    async def create_resource(self, params: CreateResourceParams) -> Resource:
        return await self.workos.call(
            "POST", f"{BASE_PATH}/resources", Resource, json=request_body(params)
        )

    async def get_resource(self, resource_type: str, resource_id: str) -> Resource:
        return await self.workos.call(
            "GET",
            f"{BASE_PATH}/resources/{path_segment(resource_type)}/{path_segment(resource_id)}",
            Resource,
        )

    async def update_resource(self, params: UpdateResourceParams) -> Resource:
        return await self.workos.call(
            "PUT",
            f"{BASE_PATH}/resources/{path_segment(params.resource_type)}/{path_segment(params.resource_id)}",
            Resource,
            json={"metadata": params.metadata},
        )

    async def delete_resource(self, resource_type: str, resource_id: str) -> None:
        await self.workos.call(
            "DELETE",
            f"{BASE_PATH}/resources/{path_segment(resource_type)}/{path_segment(resource_id)}",
        )

    async def list_resources(
        self, params: ListResourcesParams | None = None
    ) -> PaginatedList[Resource]:
        params = params or ListResourcesParams()
        return await self.workos.call(
            "GET", f"{BASE_PATH}/resources", PaginatedList[Resource], params=params.to_query()
        )

    async def batch_write_resources(self, writes: Sequence[ResourceWrite]) -> None:
        await self.workos.call(
            "POST",
            f"{BASE_PATH}/resources/batch",
            json={"writes": [request_body(write) for write in writes]},
        )

    # Warrants

    async def create_warrant(self, params: CreateWarrantParams) -> Warrant:
        return await self.workos.call("POST", f"{BASE_PATH}/warrants", Warrant, json=request_body(params))

    async def delete_warrant(self, params: DeleteWarrantParams) -> None:
        await self.workos.call("DELETE", f"{BASE_PATH}/warrants", json=request_body(params))

    async def batch_write_warrants(self, writes: Sequence[CreateWarrantParams]) -> None:
        await self.workos.call(
            "POST",
            f"{BASE_PATH}/warrants/batch",
            json={"writes": [request_body(write) for write in writes]},
        )

    async def list_warrants(self, params: ListWarrantsParams | None = None) -> PaginatedList[Warrant]:
        params = params or ListWarrantsParams()
        return await self.workos.call(
            "GET", f"{BASE_PATH}/warrants", PaginatedList[Warrant], params=params.to_query()
        )

    # Policies

    async def create_policy(self, params: CreatePolicyParams) -> Policy:
        return await self.workos.call("POST", f"{BASE_PATH}/policies", Policy, json=request_body(params))

    async def get_policy(self, name: str) -> Policy:
        return await self.workos.call("GET", f"{BASE_PATH}/policies/{path_segment(name)}", Policy)

    async def update_policy(self, params: UpdatePolicyParams) -> Policy:
        return await self.workos.call(
            "PUT", f"{BASE_PATH}/policies/{path_segment(params.name)}", Policy, json=request_body(params)
        )

    async def delete_policy(self, name: str) -> None:
        await self.workos.call("DELETE", f"{BASE_PATH}/policies/{path_segment(name)}")

    async def list_policies(self, params: ListPoliciesParams | None = None) -> PaginatedList[Policy]:
        params = params or ListPoliciesParams()
        return await self.workos.call(
            "GET", f"{BASE_PATH}/policies", PaginatedList[Policy], params=params.to_query()
        )
