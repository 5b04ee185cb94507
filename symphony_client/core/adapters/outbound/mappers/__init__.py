"""Mappers between pod wire models and domain entities."""

from .entity_mapper import (
    keywords_from_wire,
    keywords_to_wire,
    room_detail_from_wire,
    room_from_wire,
    room_search_criteria_to_wire,
    room_search_results_from_wire,
    room_to_wire,
    stream_from_wire,
    stream_id_from_wire,
)

__all__ = [
    "keywords_from_wire",
    "keywords_to_wire",
    "stream_id_from_wire",
    "stream_from_wire",
    "room_from_wire",
    "room_detail_from_wire",
    "room_to_wire",
    "room_search_criteria_to_wire",
    "room_search_results_from_wire",
]
