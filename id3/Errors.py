#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #


class DecisionTreeError(Exception):
	"""Base class of every error raised while training, loading or classifying."""


class MalformedInputError(DecisionTreeError, ValueError):
	"""
	Input that does not follow the expected format: wrong token counts,
	non numeric values for a continuous attribute, values outside of a
	declared domain or unreadable classifier lines.
	"""

	def __init__(self, message: str, line: int | None = None):
		if line is not None:
			message = f"line {line}: {message}"
		super().__init__(message)
		self.line = line


class AttributeLookupError(DecisionTreeError, KeyError):
	"""A tuple has no value for an attribute tested by the tree."""

	def __init__(self, attribute: str):
		super().__init__(attribute)
		self.attribute = attribute

	def __str__(self):
		return f"tuple has no value for attribute '{self.attribute}'"
