"""HTTP API for recstore."""

from recstore.api.endpoints.records import create_app, create_records_router

__all__ = ["create_app", "create_records_router"]
