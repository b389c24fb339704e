from .core import play_script
from .io import write_csv, write_manifest

__all__ = ["play_script", "write_csv", "write_manifest"]
