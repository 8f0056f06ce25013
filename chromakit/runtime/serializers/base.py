# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

import json
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def dump_json(data: dict, format: SerializerFormat = SerializerFormat.JSON) -> str:
    """Render ``data`` compact or indented according to ``format``."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
