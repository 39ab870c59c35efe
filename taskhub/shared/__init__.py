"""Shared cross-cutting helpers: telemetry, logging, utilities."""
