"""
GraphQL Playground IDE page
"""

import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

PLAYGROUND_VERSION = "1.7.42"

PLAYGROUND_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="user-scalable=no, initial-scale=1.0, minimum-scale=1.0, maximum-scale=1.0, minimal-ui">
  <title>GraphQL Playground</title>
  <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/graphql-playground-react@{version}/build/static/css/index.css" />
  <link rel="shortcut icon" href="https://cdn.jsdelivr.net/npm/graphql-playground-react@{version}/build/favicon.png" />
  <script src="https://cdn.jsdelivr.net/npm/graphql-playground-react@{version}/build/static/js/middleware.js"></script>
</head>
<body>
  <div id="root"></div>
  <script>
    window.addEventListener("load", function () {{
      var root = document.getElementById("root");
      var subscriptionPath = {subscription_path};
      var protocol = window.location.protocol === "https:" ? "wss://" : "ws://";
      GraphQLPlayground.init(root, {{
        endpoint: {query_path},
        subscriptionEndpoint: protocol + window.location.host + subscriptionPath
      }});
    }});
  </script>
</body>
</html>
"""


def render_playground(query_path: str, subscription_path: str) -> str:
    return PLAYGROUND_HTML.format(
        version=PLAYGROUND_VERSION,
        query_path=json.dumps(query_path),
        subscription_path=json.dumps(subscription_path),
    )


def create_playground_router(path: str, query_path: str, subscription_path: str) -> APIRouter:
    """Serve the Playground IDE at ``path`` pointing at the GraphQL endpoint."""
    router = APIRouter()
    page = render_playground(query_path, subscription_path)

    @router.get(path, response_class=HTMLResponse, include_in_schema=False)
    async def playground() -> HTMLResponse:  # pyright: ignore [reportUnusedFunction]
        return HTMLResponse(page)

    return router
