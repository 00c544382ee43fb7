"""Models for WorkOS Fine-Grained Authorization."""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..pagination import PaginationParams


class Subject(BaseModel):
    """The subject a warrant grants a relation to."""

    resource_type: str
    resource_id: str


class Warrant(BaseModel):
    """Grants a subject a relation on a resource."""

    resource_type: str
    resource_id: str
    relation: str
    subject: Subject
    policy: Optional[str] = None


class Resource(BaseModel):
    """A resource instance.

    Accepts both the ``resource_type``/``resource_id`` and the shorter
    ``type``/``id`` key pairs the API returns from different endpoints.
    """

    model_config = ConfigDict(populate_by_name=True)

    resource_type: str = Field(validation_alias=AliasChoices("resource_type", "type"))
    resource_id: str = Field(validation_alias=AliasChoices("resource_id", "id"))
    meta: Optional[dict[str, Any]] = Field(
        default=None, validation_alias=AliasChoices("meta", "metadata")
    )


class ThisRule(BaseModel):
    """Grant attached directly to the resource."""

    this: Any


class InheritFrom(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    relation: str
    from_: str = Field(alias="from")


class InheritRule(BaseModel):
    """Inherit ``relation`` from the resource type named in ``from``."""

    inherit: InheritFrom


class UnionRule(BaseModel):
    """Any of several rules."""

    union: list[RelationRule]


# Shapes overlap only on partial data; decoding tries this, inherit, union in
# that order and keeps the first match.
RelationRule = Annotated[
    Union[ThisRule, InheritRule, UnionRule], Field(union_mode="left_to_right")
]

UnionRule.model_rebuild()


class ResourceType(BaseModel):
    """A resource-type definition and its relation rules."""

    type: str
    relations: dict[str, RelationRule] = Field(default_factory=dict)


class PolicyParameter(BaseModel):
    name: str
    type: str


class Policy(BaseModel):
    """An access-control policy."""

    name: str
    description: Optional[str] = None
    language: str
    parameters: list[PolicyParameter] = Field(default_factory=list)
    expression: str
    metadata: Optional[dict[str, Any]] = None


class Schema(BaseModel):
    resource_types: list[ResourceType] = Field(default_factory=list)
    policies: list[Policy] = Field(default_factory=list)


class CheckParams(BaseModel):
    subject: str
    relation: str
    resource: str


class CheckTuple(CheckParams):
    pass


class BatchCheckParams(BaseModel):
    checks: list[CheckTuple]


class CheckResult(BaseModel):
    subject: str
    relation: str
    resource: str
    allowed: bool


class QueryParams(PaginationParams):
    """Query-language request; ``warrant_token`` travels as a header."""

    q: str
    context: Optional[str] = None
    warrant_token: Optional[str] = Field(default=None, exclude=True)


class QueryResult(BaseModel):
    """A resource matched by a query, with the warrant that matched it."""

    resource_type: str
    resource_id: str
    relation: str
    warrant: Warrant
    is_implicit: bool
    meta: Optional[Any] = None


class CreateResourceTypeParams(BaseModel):
    type: str
    relations: dict[str, RelationRule] = Field(default_factory=dict)


class UpdateResourceTypeParams(BaseModel):
    """``type`` only selects the path; the body carries the relations."""

    type: str = Field(exclude=True)
    relations: dict[str, RelationRule] = Field(default_factory=dict)


class ListResourceTypesParams(PaginationParams):
    pass


class CreateResourceParams(BaseModel):
    resource_type: str
    resource_id: str
    meta: Optional[dict[str, Any]] = None


class UpdateResourceParams(BaseModel):
    resource_type: str
    resource_id: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class ResourceWrite(BaseModel):
    """One entry of a batch resource write."""

    model_config = ConfigDict(populate_by_name=True)

    resource_type: str = Field(serialization_alias="type")
    resource_id: str = Field(serialization_alias="id")
    metadata: Optional[dict[str, Any]] = None
    create: bool = True


class ListResourcesParams(PaginationParams):
    resource_type: Optional[str] = None


class CreateWarrantParams(BaseModel):
    resource_type: str
    resource_id: str
    relation: str
    subject: Subject
    policy: Optional[str] = None


class DeleteWarrantParams(BaseModel):
    resource_type: str
    resource_id: str
    relation: str
    subject: Subject


class ListWarrantsParams(PaginationParams):
    subject_type: Optional[str] = None
    subject_id: Optional[str] = None
    relation: Optional[str] = None
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None


class CreatePolicyParams(BaseModel):
    name: str
    description: Optional[str] = None
    language: str
    parameters: Optional[list[PolicyParameter]] = None
    expression: str
    metadata: Optional[dict[str, Any]] = None


class UpdatePolicyParams(CreatePolicyParams):
    pass


class ListPoliciesParams(PaginationParams):
    pass
