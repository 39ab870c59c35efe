"""Presentation layer: HTTP routers, dependencies, and the WebSocket hub."""
