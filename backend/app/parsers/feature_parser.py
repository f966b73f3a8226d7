"""Comma-separated feature parsing and validation."""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List

from app.config import FEATURE_COUNT
from app.errors import EmptyInputError, ParseError, RangeError, ShapeError
from app.schemas import FeatureVector

from .base import BaseParser

LOGGER = logging.getLogger(__name__)

# Plain ASCII decimal or scientific notation.
_NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class FeatureParser(BaseParser):
    """Turn ``"0.02, 0.0371, ..."`` into a :class:`FeatureVector`.

    In strict mode the vector must hold exactly ``expected_length`` values,
    each within [0, 1]. Lenient mode only requires finite numbers and forwards
    vectors of any non-zero length unchanged.
    """

    def __init__(self, strict: bool = True, expected_length: int = FEATURE_COUNT) -> None:
        self.strict = strict
        self.expected_length = expected_length

    def parse(self, source: str) -> FeatureVector:
        if source is None or not source.strip():
            raise EmptyInputError()

        values: List[float] = []
        for position, raw_token in enumerate(source.split(","), start=1):
            token = raw_token.strip()
            if not _NUMBER_PATTERN.fullmatch(token):
                raise ParseError(token, position)
            value = float(token)
            if not math.isfinite(value):
                raise ParseError(token, position)
            values.append(value)

        return self.validate(values)

    def validate(self, values: Iterable[float]) -> FeatureVector:
        """Check shape and range of already numeric values."""
        values = [float(value) for value in values]
        if not values:
            raise EmptyInputError()

        for position, value in enumerate(values, start=1):
            if not math.isfinite(value):
                raise ParseError(repr(value), position)

        if self.strict:
            if len(values) != self.expected_length:
                raise ShapeError(self.expected_length, len(values))
            for position, value in enumerate(values, start=1):
                if value < 0.0 or value > 1.0:
                    raise RangeError(position, value)

        LOGGER.debug("Parsed feature vector with %d values (strict=%s)", len(values), self.strict)
        return FeatureVector(values=values)
