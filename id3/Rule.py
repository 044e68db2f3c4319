#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from dataclasses import dataclass, field
from enum import Enum

from id3.Errors import MalformedInputError


class RuleType(Enum):
	EQUALS = "="
	LESS_OR_EQUAL = "<="
	GREATER_THAN = ">"

	@property
	def symbol(self) -> str:
		return self.value



def to_float(text: str) -> float:
	try:
		return float(text)
	except (TypeError, ValueError):
		raise MalformedInputError(f"'{text}' is not a number") from None


@dataclass(frozen=True)
class Rule:
	"""
	Condition on the edge between a node and one of its children.

	`value` keeps the text it was written with (e.g. "2.50") so that a rule
	prints back exactly as it was read; `threshold` is the parsed number for
	the two numeric comparators.
	"""
	type: RuleType
	value: str
	threshold: float | None = field(default=None, compare=False)

	@classmethod
	def equals(cls, value: str) -> "Rule":
		return cls(RuleType.EQUALS, value)

	@classmethod
	def parse(cls, text: str) -> "Rule":
		"""Parse "=v", "<=x" or ">x"."""
		for typ in (RuleType.LESS_OR_EQUAL, RuleType.GREATER_THAN, RuleType.EQUALS):
			if text.startswith(typ.symbol):
				value = text[len(typ.symbol):]
				if typ is RuleType.EQUALS:
					return cls(typ, value)
				return cls(typ, value, to_float(value))
		raise MalformedInputError(f"'{text}' is not a rule")

	@property
	def is_numeric(self) -> bool:
		return self.type is not RuleType.EQUALS

	def matches(self, value: str) -> bool:
		if self.type is RuleType.EQUALS:
			return value == self.value
		if self.type is RuleType.LESS_OR_EQUAL:
			return to_float(value) <= self.threshold
		return to_float(value) > self.threshold

	def __str__(self):
		return self.type.symbol + self.value
