"""Allow running bucket-glob with ``python -m bucket_glob``."""

from .cli import run

run()
