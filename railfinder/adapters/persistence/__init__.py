from .local_json_repository import LocalJsonRepository
from .s3_json_repository import S3JsonRepository
from .snapshot_repository import SnapshotRepository

__all__ = [
    "LocalJsonRepository",
    "S3JsonRepository",
    "SnapshotRepository",
]
