"""
Endpoint descriptor models.

Each hypermedia document the server returns (service root, node,
relationship) advertises its own set of URLs. These models capture them as
read-only values; the server omits optional links freely, so every field
defaults to an empty value (also when sent as null) and unknown fields are
ignored.
"""

from typing import Any, Dict

from pydantic import ConfigDict, Field

from .base import DocumentModel


class _Links(DocumentModel):
  model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class ServiceRootLinks(_Links):
  """URLs advertised by the root document."""

  node_url: str = Field("", alias="node", description="Node creation URL")
  reference_node_url: str = Field(
    "", alias="reference_node", description="Reference node, absent once deleted"
  )
  node_index_url: str = Field("", alias="node_index")
  relationship_index_url: str = Field("", alias="relationship_index")
  extensions_info_url: str = Field("", alias="extensions_info")
  relationship_types_url: str = Field("", alias="relationship_types")
  batch_url: str = Field("", alias="batch")
  cypher_url: str = Field("", alias="cypher")
  neo4j_version: str = Field("", alias="neo4j_version")


class NodeLinks(_Links):
  """URLs advertised by a node document."""

  self_url: str = Field("", alias="self")
  paged_traverse_url: str = Field("", alias="paged_traverse")
  outgoing_relationships_url: str = Field("", alias="outgoing_relationships")
  traverse_url: str = Field("", alias="traverse")
  all_typed_relationships_url: str = Field("", alias="all_typed_relationships")
  all_relationships_url: str = Field("", alias="all_relationships")
  outgoing_typed_relationships_url: str = Field(
    "", alias="outgoing_typed_relationships"
  )
  properties_url: str = Field("", alias="properties")
  property_url: str = Field("", alias="property")
  incoming_relationships_url: str = Field("", alias="incoming_relationships")
  incoming_typed_relationships_url: str = Field(
    "", alias="incoming_typed_relationships"
  )
  create_relationship_url: str = Field("", alias="create_relationship")
  data: Dict[str, Any] = Field(
    default_factory=dict, description="Properties at the time of the fetch"
  )


class RelationshipLinks(_Links):
  """URLs advertised by a relationship document."""

  self_url: str = Field("", alias="self")
  type: str = Field("", description="Relationship type name")
  start_url: str = Field("", alias="start")
  end_url: str = Field("", alias="end")
  property_url: str = Field("", alias="property")
  properties_url: str = Field("", alias="properties")
  data: Dict[str, Any] = Field(
    default_factory=dict, description="Properties at the time of the fetch"
  )
