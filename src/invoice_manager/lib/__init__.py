"""
Local library modules shared across the Invoice Manager.

Modules:
    logs: Logging utilities
    objects: JSON serialization
    paths: Path utilities
    storage: String key/value persistence media
    clock: Injectable current-date capability
    ids: Identifier generation
"""

from invoice_manager.lib import clock, ids, logs, objects, paths, storage

__all__ = ["clock", "ids", "logs", "objects", "paths", "storage"]
