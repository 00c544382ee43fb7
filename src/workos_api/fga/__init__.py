"""WorkOS Fine-Grained Authorization."""

from .api import CheckNotAllowedError, Fga
from .models import (
    BatchCheckParams,
    CheckParams,
    CheckResult,
    CheckTuple,
    CreatePolicyParams,
    CreateResourceParams,
    CreateResourceTypeParams,
    CreateWarrantParams,
    DeleteWarrantParams,
    InheritFrom,
    InheritRule,
    ListPoliciesParams,
    ListResourcesParams,
    ListResourceTypesParams,
    ListWarrantsParams,
    Policy,
    PolicyParameter,
    QueryParams,
    QueryResult,
    RelationRule,
    Resource,
    ResourceType,
    ResourceWrite,
    Schema,
    Subject,
    ThisRule,
    UnionRule,
    UpdatePolicyParams,
    UpdateResourceParams,
    UpdateResourceTypeParams,
    Warrant,
)

__all__ = [
    "BatchCheckParams",
    "CheckNotAllowedError",
    "CheckParams",
    "CheckResult",
    "CheckTuple",
    "CreatePolicyParams",
    "CreateResourceParams",
    "CreateResourceTypeParams",
    "CreateWarrantParams",
    "DeleteWarrantParams",
    "Fga",
    "InheritFrom",
    "InheritRule",
    "ListPoliciesParams",
    "ListResourceTypesParams",
    "ListResourcesParams",
    "ListWarrantsParams",
    "Policy",
    "PolicyParameter",
    "QueryParams",
    "QueryResult",
    "RelationRule",
    "Resource",
    "ResourceType",
    "ResourceWrite",
    "Schema",
    "Subject",
    "ThisRule",
    "UnionRule",
    "UpdatePolicyParams",
    "UpdateResourceParams",
    "UpdateResourceTypeParams",
    "Warrant",
]
