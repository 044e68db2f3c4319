#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
import logging
import numpy as np

from id3.Data import Attribute, Tuple, TrainingSet
from id3.Entropy import expected_info_with_partition
from id3.Errors import MalformedInputError
from id3.Rule import RuleType

log = logging.getLogger(__name__)


def split_labels(split: float) -> list[str]:
	"""The two discrete values replacing a continuous attribute, "<=" first."""
	return [f"{RuleType.LESS_OR_EQUAL.symbol}{split:.2f}", f"{RuleType.GREATER_THAN.symbol}{split:.2f}"]


def numeric_values(tuples: list[Tuple], name: str) -> np.ndarray:
	out = np.empty(len(tuples), dtype=np.float64)
	for i, t in enumerate(tuples):
		raw = t.value(name)
		try:
			out[i] = float(raw)
		except ValueError:
			raise MalformedInputError(f"continuous attribute '{name}' has non numeric value '{raw}'") from None
	return out


def find_split_point(tuples: list[Tuple], name: str, class_attribute: Attribute) -> tuple[float, float]:
	"""
	Searches the split point of a continuous attribute minimizing the
	expected information of the binary partition (<= split, > split).

	Candidates are the midpoints between consecutive sorted values
	(duplicates included). The first minimum wins.

	Returns (split, expected_info). With fewer than two tuples there is no
	midpoint: the only value (0.0 without tuples) is returned, and every
	tuple falls on the "<=" side.
	"""
	values = numeric_values(tuples, name)
	if values.size < 2:
		split = float(values[0]) if values.size else 0.0
		return split, 0.0

	xs = np.sort(values)
	midpoints = (xs[:-1] + xs[1:]) / 2.0

	best_split, min_info = float("nan"), float("inf")
	for split in midpoints:
		mask = values <= split
		left = [t for t, m in zip(tuples, mask) if m]
		right = [t for t, m in zip(tuples, mask) if not m]
		info = expected_info_with_partition(tuples, (left, right), class_attribute)
		if info < min_info:
			min_info = info
			best_split = float(split)
	return best_split, min_info


def discretize_attribute(attribute: Attribute, tuples: list[Tuple], class_attribute: Attribute) -> float:
	"""Rewrites the values of `attribute` in every tuple to "<=X" / ">X" and replaces its domain."""
	split, info = find_split_point(tuples, attribute.name, class_attribute)
	le, gt = split_labels(split)
	values = numeric_values(tuples, attribute.name)
	for t, v in zip(tuples, values):
		t.attribute_values[attribute.name] = le if v <= split else gt
	attribute.values = [le, gt]
	log.debug(f"{attribute.name}: split point {split:.2f} (Info={info:.4f})")
	return split


def discretize(training_set: TrainingSet) -> dict[str, float]:
	"""Discretizes every continuous attribute once, before the tree is built."""
	splits = {}
	for name in training_set.continuous:
		attribute = training_set.attribute(name)
		splits[name] = discretize_attribute(attribute, training_set.tuples, training_set.class_attribute)
	return splits
