"""CLI commands for forma."""

from .exercises import exercises
from .generate import generate
from .hash_cmd import hash_params
from .ingest import ingest
from .init import init
from .serve import serve

__all__ = [
    "exercises",
    "generate",
    "hash_params",
    "ingest",
    "init",
    "serve",
]
