import json
import re
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

import httpx
import pytest

from neorest.client.base import GraphRestClient
from neorest.client.config import GraphRestConfig

ROOT_URL = "http://h/db/data/"


def error_envelope(exception: str, message: str) -> Dict[str, Any]:
  return {
    "message": message,
    "exception": exception,
    "fullname": f"org.neo4j.server.rest.web.{exception}",
    "stacktrace": [
      f"org.neo4j.server.rest.web.DatabaseActions.handle(DatabaseActions.java:{n})"
      for n in (101, 202)
    ],
  }


class FakeGraphServer:
  """In-memory stand-in for the hypermedia REST server."""

  def __init__(self, with_reference_node: bool = True):
    self.nodes: Dict[int, Dict[str, Any]] = {}
    self.relationships: Dict[int, Dict[str, Any]] = {}
    self.requests: List[httpx.Request] = []
    self._next_node = 0
    self._next_rel = 0
    if with_reference_node:
      self._create_node({})

  # ------------------------------------------------------------------
  # documents
  # ------------------------------------------------------------------

  def root_doc(self) -> Dict[str, Any]:
    doc = {
      "node": ROOT_URL + "node",
      "node_index": ROOT_URL + "index/node",
      "relationship_index": ROOT_URL + "index/relationship",
      "extensions_info": ROOT_URL + "ext",
      "relationship_types": ROOT_URL + "relationship/types",
      "batch": ROOT_URL + "batch",
      "cypher": ROOT_URL + "cypher",
      "neo4j_version": "1.8.M01",
      "extensions": {},
    }
    if 0 in self.nodes:
      doc["reference_node"] = ROOT_URL + "node/0"
    return doc

  def node_doc(self, node_id: int) -> Dict[str, Any]:
    base = f"{ROOT_URL}node/{node_id}"
    return {
      "self": base,
      "data": dict(self.nodes[node_id]),
      "properties": base + "/properties",
      "property": base + "/properties/{key}",
      "create_relationship": base + "/relationships",
      "all_relationships": base + "/relationships/all",
      "incoming_relationships": base + "/relationships/in",
      "outgoing_relationships": base + "/relationships/out",
      "all_typed_relationships": base + "/relationships/all/{-list|&|types}",
      "incoming_typed_relationships": base + "/relationships/in/{-list|&|types}",
      "outgoing_typed_relationships": base + "/relationships/out/{-list|&|types}",
      "traverse": base + "/traverse/{returnType}",
      "paged_traverse": base + "/paged/traverse/{returnType}{?pageSize,leaseTime}",
      "extensions": {},
    }

  def relationship_doc(self, rel_id: int) -> Dict[str, Any]:
    rel = self.relationships[rel_id]
    base = f"{ROOT_URL}relationship/{rel_id}"
    return {
      "self": base,
      "type": rel["type"],
      "start": f"{ROOT_URL}node/{rel['start']}",
      "end": f"{ROOT_URL}node/{rel['end']}",
      "data": dict(rel["data"]),
      "properties": base + "/properties",
      "property": base + "/properties/{key}",
      "extensions": {},
    }

  # ------------------------------------------------------------------
  # helpers
  # ------------------------------------------------------------------

  def _create_node(self, properties: Dict[str, Any]) -> int:
    node_id = self._next_node
    self._next_node += 1
    self.nodes[node_id] = dict(properties)
    return node_id

  @staticmethod
  def _json(status: int, data: Any) -> httpx.Response:
    return httpx.Response(status, json=data)

  @staticmethod
  def _not_found(exception: str, message: str) -> httpx.Response:
    return httpx.Response(404, json=error_envelope(exception, message))

  @staticmethod
  def _body(request: httpx.Request) -> Any:
    content = request.read()
    if not content:
      return None
    return json.loads(content)

  def _properties(
    self, request: httpx.Request, store: Dict[str, Any], key: Optional[str]
  ) -> httpx.Response:
    if key is None:
      if request.method == "GET":
        if not store:
          return httpx.Response(204)
        return self._json(200, store)
      if request.method == "PUT":
        store.clear()
        store.update(self._body(request) or {})
        return httpx.Response(204)
      if request.method == "DELETE":
        store.clear()
        return httpx.Response(204)
    else:
      key = unquote(key)
      if request.method == "GET":
        if key not in store:
          return self._not_found(
            "NoSuchPropertyException", f"Could not find property [{key}]."
          )
        return self._json(200, store[key])
      if request.method == "PUT":
        store[key] = self._body(request)
        return httpx.Response(204)
      if request.method == "DELETE":
        if key not in store:
          return self._not_found(
            "NoSuchPropertyException", f"Could not find property [{key}]."
          )
        del store[key]
        return httpx.Response(204)
    return httpx.Response(405)

  # ------------------------------------------------------------------
  # routing
  # ------------------------------------------------------------------

  def __call__(self, request: httpx.Request) -> httpx.Response:
    self.requests.append(request)
    path = request.url.raw_path.decode("ascii").split("?", 1)[0]
    prefix = "/db/data"
    if not path.startswith(prefix):
      return httpx.Response(404, text="Not Found")
    path = path[len(prefix):].rstrip("/")

    if path == "" and request.method == "GET":
      return self._json(200, self.root_doc())

    if path == "/relationship/types" and request.method == "GET":
      types = sorted({r["type"] for r in self.relationships.values()})
      return self._json(200, types)

    if path == "/cypher" and request.method == "POST":
      body = self._body(request)
      if not body or "query" not in body:
        return self._json(
          400, error_envelope("BadInputException", "You have to provide the 'query'")
        )
      return self._json(
        200, {"columns": ["query", "params"], "data": [[body["query"], body["params"]]]}
      )

    if path == "/node" and request.method == "POST":
      node_id = self._create_node(self._body(request) or {})
      return self._json(201, self.node_doc(node_id))

    match = re.fullmatch(r"/node/(\d+)(.*)", path)
    if match:
      return self._node_route(request, int(match.group(1)), match.group(2))

    match = re.fullmatch(r"/relationship/(\d+)(.*)", path)
    if match:
      return self._relationship_route(request, int(match.group(1)), match.group(2))

    return httpx.Response(404, text="Not Found")

  def _node_route(
    self, request: httpx.Request, node_id: int, rest: str
  ) -> httpx.Response:
    if node_id not in self.nodes:
      return self._not_found("NodeNotFoundException", f"Cannot find node with id [{node_id}] in database.")

    if rest == "":
      if request.method == "GET":
        return self._json(200, self.node_doc(node_id))
      if request.method == "DELETE":
        del self.nodes[node_id]
        return httpx.Response(204)

    match = re.fullmatch(r"/properties(?:/([^/]+))?", rest)
    if match:
      return self._properties(request, self.nodes[node_id], match.group(1))

    if rest == "/relationships" and request.method == "POST":
      body = self._body(request)
      end_id = int(body["to"].rstrip("/").rsplit("/", 1)[-1])
      if end_id not in self.nodes:
        return self._json(
          400, error_envelope("StartNodeNotFoundException", "End node not found")
        )
      rel_id = self._next_rel
      self._next_rel += 1
      self.relationships[rel_id] = {
        "start": node_id,
        "end": end_id,
        "type": body["type"],
        "data": dict(body.get("data") or {}),
      }
      return self._json(201, self.relationship_doc(rel_id))

    match = re.fullmatch(r"/relationships/(all|in|out)(?:/([^/]+))?", rest)
    if match and request.method == "GET":
      direction, types = match.groups()
      wanted = {unquote(t) for t in types.split("%26")} if types else None
      found = []
      for rel_id, rel in sorted(self.relationships.items()):
        if direction == "out" and rel["start"] != node_id:
          continue
        if direction == "in" and rel["end"] != node_id:
          continue
        if direction == "all" and node_id not in (rel["start"], rel["end"]):
          continue
        if wanted is not None and rel["type"] not in wanted:
          continue
        found.append(self.relationship_doc(rel_id))
      return self._json(200, found)

    return httpx.Response(405)

  def _relationship_route(
    self, request: httpx.Request, rel_id: int, rest: str
  ) -> httpx.Response:
    if rel_id not in self.relationships:
      return self._not_found(
        "RelationshipNotFoundException", f"Relationship [{rel_id}] not found."
      )

    if rest == "":
      if request.method == "GET":
        return self._json(200, self.relationship_doc(rel_id))
      if request.method == "DELETE":
        del self.relationships[rel_id]
        return httpx.Response(204)

    match = re.fullmatch(r"/properties(?:/([^/]+))?", rest)
    if match:
      return self._properties(
        request, self.relationships[rel_id]["data"], match.group(1)
      )

    return httpx.Response(405)


@pytest.fixture
def make_fake_server():
  """Factory for fake servers with non-default root documents."""
  return FakeGraphServer


@pytest.fixture
def fake_server():
  """In-memory graph server with a reference node."""
  return FakeGraphServer()


@pytest.fixture
def http_client(fake_server):
  """httpx client routed to the fake server."""
  client = httpx.Client(transport=httpx.MockTransport(fake_server))
  yield client
  client.close()


@pytest.fixture
def rest_client(http_client):
  """Client handle bound to the fake server."""
  return GraphRestClient(config=GraphRestConfig(base_url=ROOT_URL), http_client=http_client)
