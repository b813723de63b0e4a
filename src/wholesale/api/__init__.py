"""HTTP surface: routers, schemas and dependencies."""
