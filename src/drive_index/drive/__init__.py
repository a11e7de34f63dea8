from drive_index.drive.graph import GraphDriveProvider, GraphRouteVerifier, encode_drive_path
from drive_index.drive.memory import (
    DEMO_ITEMS,
    DEMO_PASSWORDS,
    InMemoryDriveProvider,
    InMemoryRouteVerifier,
)

__all__ = [
    "DEMO_ITEMS",
    "DEMO_PASSWORDS",
    "GraphDriveProvider",
    "GraphRouteVerifier",
    "InMemoryDriveProvider",
    "InMemoryRouteVerifier",
    "encode_drive_path",
]
