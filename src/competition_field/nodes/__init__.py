"""Periodic nodes for competition_field."""

from competition_field.nodes.field_publisher import FieldPublisherNode

__all__ = ["FieldPublisherNode"]
