"""
Entity façade.

Each operation is a single round trip: a method, a URL taken from the
entity's endpoint descriptor (optionally with one appended segment), a body,
and the shape the response is decoded into.
"""

from typing import Any, Dict, List, Optional, Sequence

import httpx

from neorest.models import NodeLinks, RelationshipLinks, ServiceRootLinks
from .base import GraphRestClient, append_segment, join_types
from .codec import Shape
from .config import GraphRestConfig
from .exceptions import EntityNotFound

Properties = Dict[str, Any]


def _id_from_url(url: str) -> int:
  """Numeric ID from the last path segment, or -1 if there is none."""
  last = url.rstrip("/").rsplit("/", 1)[-1]
  try:
    return int(last)
  except ValueError:
    return -1


class _Entity:
  """Shared property operations for nodes and relationships."""

  def __init__(self, client: GraphRestClient, links):
    self._client = client
    self._links = links

  @property
  def client(self) -> GraphRestClient:
    return self._client

  @property
  def self_url(self) -> str:
    return self._links.self_url

  @property
  def id(self) -> int:
    """Server-assigned identifier, -1 if it cannot be determined."""
    return _id_from_url(self._links.self_url)

  @property
  def data(self) -> Properties:
    """Properties embedded in the document this entity was decoded from."""
    return dict(self._links.data)

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, _Entity) or type(other) is not type(self):
      return NotImplemented
    return self.self_url == other.self_url

  def __hash__(self) -> int:
    return hash((type(self).__name__, self.self_url))

  def __repr__(self) -> str:
    return f"{type(self).__name__}(id={self.id}, self_url={self.self_url!r})"

  def get_properties(self) -> Properties:
    """Fetch the full property map."""
    return self._client.request(
      "GET", self._links.properties_url, shape=Shape.PROPERTY_MAP
    )

  def get_property(self, key: str) -> Any:
    """Fetch a single property value."""
    return self._client.request(
      "GET", append_segment(self._links.properties_url, key), shape=Shape.VALUE
    )

  def set_property(self, key: str, value: Any) -> None:
    """Set one property; the body is the raw value."""
    self._client.request("PUT", append_segment(self._links.properties_url, key), value)

  def set_properties(self, properties: Properties) -> None:
    """Replace all properties."""
    self._client.request("PUT", self._links.properties_url, properties or {})

  def delete_properties(self) -> None:
    """Remove all properties."""
    self._client.request("DELETE", self._links.properties_url)

  def delete_property(self, key: str) -> None:
    """Remove one property."""
    self._client.request("DELETE", append_segment(self._links.properties_url, key))

  def delete(self) -> None:
    """Delete the entity itself."""
    self._client.request("DELETE", self._links.self_url)


class Node(_Entity):
  """A node and the URLs the server advertised for it."""

  def __init__(self, client: GraphRestClient, links: NodeLinks):
    super().__init__(client, links)

  @property
  def links(self) -> NodeLinks:
    return self._links

  def refresh(self) -> "Node":
    """Fetch the current document for this node."""
    links = self._client.request(
      "GET", self._links.self_url, shape=Shape.SINGLE_ENTITY, model=NodeLinks
    )
    return Node(self._client, links)

  def create_relationship(
    self, to: "Node", rel_type: str, properties: Optional[Properties] = None
  ) -> "Relationship":
    """Create a relationship from this node to ``to``."""
    body = {
      "to": to.self_url,
      "type": rel_type,
      "data": properties or {},
    }
    links = self._client.request(
      "POST",
      self._links.create_relationship_url,
      body,
      shape=Shape.SINGLE_ENTITY,
      model=RelationshipLinks,
    )
    return Relationship(self._client, links)

  def _relationships(self, url: str) -> List["Relationship"]:
    items = self._client.request(
      "GET", url, shape=Shape.ENTITY_LIST, model=RelationshipLinks
    )
    return [Relationship(self._client, links) for links in items]

  def get_incoming_relationships(self) -> List["Relationship"]:
    return self._relationships(self._links.incoming_relationships_url)

  def get_outgoing_relationships(self) -> List["Relationship"]:
    return self._relationships(self._links.outgoing_relationships_url)

  def get_all_relationships(self) -> List["Relationship"]:
    return self._relationships(self._links.all_relationships_url)

  def get_typed_relationships(
    self, types: Sequence[str], direction: str = "all"
  ) -> List["Relationship"]:
    """
    Fetch relationships of the given types.

    Args:
        types: Relationship type names
        direction: "all", "in" or "out"

    Returns:
        Matching relationships
    """
    urls = {
      "all": self._links.all_relationships_url,
      "in": self._links.incoming_relationships_url,
      "out": self._links.outgoing_relationships_url,
    }
    if direction not in urls:
      raise ValueError(f"direction must be one of {sorted(urls)}, got {direction!r}")
    if not types:
      raise ValueError("types must not be empty")

    url = f"{urls[direction].rstrip('/')}/{join_types(types)}"
    return self._relationships(url)


class Relationship(_Entity):
  """A relationship and the URLs the server advertised for it."""

  def __init__(self, client: GraphRestClient, links: RelationshipLinks):
    super().__init__(client, links)

  @property
  def links(self) -> RelationshipLinks:
    return self._links

  @property
  def type(self) -> str:
    return self._links.type

  def _node(self, url: str) -> Node:
    links = self._client.request(
      "GET", url, shape=Shape.SINGLE_ENTITY, model=NodeLinks
    )
    return Node(self._client, links)

  def start_node(self) -> Node:
    return self._node(self._links.start_url)

  def end_node(self) -> Node:
    return self._node(self._links.end_url)


class ServiceRoot:
  """The root document: entry point for node creation, lookup and queries."""

  def __init__(self, client: GraphRestClient, links: ServiceRootLinks):
    self._client = client
    self._links = links

  @property
  def client(self) -> GraphRestClient:
    return self._client

  @property
  def links(self) -> ServiceRootLinks:
    return self._links

  @property
  def neo4j_version(self) -> str:
    return self._links.neo4j_version

  def close(self) -> None:
    """Close the underlying client handle."""
    self._client.close()

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    self.close()

  def _node(self, method: str, url: str, body: Any = None) -> Node:
    links = self._client.request(
      method, url, body, shape=Shape.SINGLE_ENTITY, model=NodeLinks
    )
    return Node(self._client, links)

  def relationship_types(self) -> List[str]:
    """List the relationship types in use."""
    return self._client.request(
      "GET", self._links.relationship_types_url, shape=Shape.STRING_LIST
    )

  def cypher(self, query: str, params: Optional[Properties] = None) -> Dict[str, Any]:
    """
    Run a Cypher query.

    The query and parameters are passed through unchanged; the result
    mapping's structure depends on the query.
    """
    body = {"query": query, "params": params or {}}
    return self._client.request(
      "POST", self._links.cypher_url, body, shape=Shape.PROPERTY_MAP
    )

  def create_node(self, properties: Optional[Properties] = None) -> Node:
    return self._node("POST", self._links.node_url, properties)

  def get_reference_node(self) -> Node:
    if not self._links.reference_node_url:
      raise EntityNotFound("Server does not advertise a reference node")
    return self._node("GET", self._links.reference_node_url)

  def get_node(self, node_id: int) -> Node:
    return self._node("GET", append_segment(self._links.node_url, int(node_id)))

  def delete_node(self, node_id: int) -> None:
    self._client.request(
      "DELETE", append_segment(self._links.node_url, int(node_id))
    )


def open_database(
  address: Optional[str] = None,
  config: Optional[GraphRestConfig] = None,
  http_client: Optional[httpx.Client] = None,
) -> ServiceRoot:
  """
  Bootstrap a client from the server's root document.

  Args:
      address: Root document URL, defaults to the config's base_url
      config: Client configuration
      http_client: Preconfigured httpx client

  Returns:
      ServiceRoot bound to a new client handle

  Raises:
      TransportFailure, ServerError, DecodingError: If the root document
      cannot be fetched
  """
  client = GraphRestClient(
    base_url=address or None, config=config, http_client=http_client
  )
  try:
    links = client.request(
      "GET", client.config.base_url, shape=Shape.SINGLE_ENTITY, model=ServiceRootLinks
    )
  except Exception:
    client.close()
    raise
  return ServiceRoot(client, links)
