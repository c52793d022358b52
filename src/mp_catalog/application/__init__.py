"""Application layer – CQRS, middleware pipeline, export and product use cases."""
