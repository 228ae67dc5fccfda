from .history import GuessHistory
from .core import replay, replay_batch
from .io import write_csv, write_manifest

__all__ = ["GuessHistory", "replay", "replay_batch", "write_csv", "write_manifest"]
