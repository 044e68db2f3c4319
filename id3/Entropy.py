#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
import numpy as np
from collections import Counter

from id3.Data import Attribute, Tuple


def class_counts(tuples: list[Tuple], class_attribute: Attribute) -> np.ndarray:
	"""Number of tuples of each class, in the declared order of the classes."""
	counter = Counter(t.cls for t in tuples)
	return np.array([counter[c] for c in class_attribute.values], dtype=np.int64)


def expected_info(tuples: list[Tuple], class_attribute: Attribute) -> float:
	"""
	Info(D) = - sum_i p_i * log2(p_i), with p_i = |C_i,D| / |D|.

	Entropy (in bits) of the classes of `tuples`. Classes that do not
	appear are skipped. `tuples` must not be empty.
	"""
	assert len(tuples) > 0, "entropy of an empty partition"
	cnt = class_counts(tuples, class_attribute)
	p = cnt[cnt > 0].astype(np.float64) / len(tuples)
	return float(-np.sum(p * np.log2(p)))


def expected_info_with_partition(full_tuples: list[Tuple], partitions, class_attribute: Attribute) -> float:
	"""
	Info_A(D) = sum_j |D_j| / |D| * Info(D_j)

	Weighted entropy of a partition of `full_tuples`. Empty partitions
	weigh 0 and are not passed to `expected_info`.
	"""
	total = len(full_tuples)
	info = 0.0
	for part in partitions:
		if len(part) > 0:
			info += len(part) / total * expected_info(part, class_attribute)
	return info


def information_gain(full_tuples: list[Tuple], partitions, class_attribute: Attribute) -> float:
	return expected_info(full_tuples, class_attribute) - expected_info_with_partition(full_tuples, partitions, class_attribute)
