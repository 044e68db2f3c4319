#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
from dataclasses import dataclass, field

from id3.Errors import AttributeLookupError

CONTINUOUS = "continuous"
IGNORE = "ignore"


@dataclass
class Attribute:
	"""
	An attribute name and its ordered domain. Also used to hold the class
	attribute and its possible classes.

	For a continuous attribute the domain is empty until the discretizer
	replaces it with the two labels "<=X" and ">X".
	"""
	name: str
	values: list[str] = field(default_factory=list)

	def __post_init__(self):
		self.values = list(self.values)


@dataclass
class Tuple:
	"""A record: attribute values addressable by name, and its class ("" until classified)."""
	attribute_values: dict[str, str] = field(default_factory=dict)
	cls: str = ""

	@classmethod
	def from_row(cls, attribute_names, values, tuple_class: str = ""):
		return cls(dict(zip(attribute_names, values)), tuple_class)

	def value(self, name: str) -> str:
		try:
			return self.attribute_values[name]
		except KeyError:
			raise AttributeLookupError(name) from None


@dataclass
class TrainingSet:
	attributes: list[Attribute]
	class_attribute: Attribute
	tuples: list[Tuple]
	continuous: list[str] = field(default_factory=list)
	ignored: list[str] = field(default_factory=list)

	@property
	def attribute_names(self) -> list[str]:
		return [a.name for a in self.attributes]

	def attribute(self, name: str) -> Attribute:
		for a in self.attributes:
			if a.name == name:
				return a
		raise AttributeLookupError(name)
