"""HTTP API: routers, middleware and OpenAPI documentation."""
