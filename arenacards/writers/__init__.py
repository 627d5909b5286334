from arenacards.writers.jsonl import read_jsonl, write_jsonl

__all__ = [
    "read_jsonl",
    "write_jsonl",
]
