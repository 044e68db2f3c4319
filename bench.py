#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import copy
import numpy as np
import pandas as pd
from time import perf_counter
from contextlib import contextmanager
from typing import Dict, Any

from id3.Data import Tuple
from id3.DecisionTree import DecisionTree
from id3.Errors import AttributeLookupError


@contextmanager
def timer(name: str, store: Dict[str, float] | None = None):
	t0 = perf_counter()
	try:
		yield
	finally:
		dt = perf_counter() - t0
		if store is not None:
			store[name] = dt

def accuracy(y_true, y_pred) -> float:
	y_true, y_pred = np.asarray(y_true), np.asarray(y_pred)
	if y_true.size == 0:
		return 0.0
	return float((y_true == y_pred).mean())

def confusion(y_true, y_pred) -> pd.DataFrame:
	"""Confusion matrix, actual classes as rows and predicted classes as columns."""
	return pd.crosstab(pd.Series(list(y_true), name="Actual"), pd.Series(list(y_pred), name="Predicted"))

def pop_class_column(tuples: list[Tuple], class_column: str) -> tuple[list[Tuple], list[str]]:
	"""Copies of `tuples` without `class_column`, and the values of that column."""
	if tuples and class_column not in tuples[0].attribute_values:
		raise AttributeLookupError(class_column)
	stripped, labels = [], []
	for t in tuples:
		values = dict(t.attribute_values)
		labels.append(values.pop(class_column))
		stripped.append(Tuple(values))
	return stripped, labels


# ---------- Benchmark helper ----------
def benchmark_classification(model: DecisionTree, tuples: list[Tuple], class_column: str = "class",
							 default: str | None = None, training_set=None) -> Dict[str, Any]:
	"""
	Classifies labeled `tuples` (their class in `class_column`) and measures
	the times. When `training_set` is given the model is fitted on it first.
	"""
	times: Dict[str, float] = {}
	if training_set is not None:
		with timer("fit", store=times):
			model.fit(copy.deepcopy(training_set))

	to_classify, y_true = pop_class_column(tuples, class_column)
	with timer("predict", store=times):
		y_pred = model.predict(to_classify, default=default)

	return {
		"model": model,
		"y_true": y_true,
		"y_pred": y_pred,
		"times": times,
		"acc": accuracy(y_true, y_pred),
		"unclassified": sum(1 for p in y_pred if not p),
		"confusion": confusion(y_true, y_pred),
	}
