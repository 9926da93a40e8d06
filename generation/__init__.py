from generation.generator import (
    Generator,
    generate_id,
    generate_ids,
    get_generator,
    next_id,
    now_millis,
    parse_id,
)
from generation.layout import IdFields, pack, unpack

__all__ = [
    "Generator",
    "IdFields",
    "generate_id",
    "generate_ids",
    "get_generator",
    "next_id",
    "now_millis",
    "pack",
    "parse_id",
    "unpack",
]
