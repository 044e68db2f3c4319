#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import copy
import logging
import numpy as np

from id3.Data import Attribute, Tuple, TrainingSet
from id3.Discretizer import discretize
from id3.Entropy import class_counts, expected_info_with_partition
from id3.Errors import MalformedInputError
from id3.Rule import Rule
from id3.TreeNode import Tree, TreeNode
from id3 import Classifier, Deserializer, Serializer

log = logging.getLogger(__name__)

# Class given to a node reached by no tuple. build() never creates such a node.
NO_SUCH_TUPLES = "No such tuples."


def partition(tuples: list[Tuple], attribute: Attribute) -> list[tuple[str, list[Tuple]]]:
	"""Splits `tuples` on `attribute`: (value, sublist) pairs in the declared order of the values."""
	parts = [(v, []) for v in attribute.values]
	index = {v: i for i, v in enumerate(attribute.values)}
	for t in tuples:
		v = t.value(attribute.name)
		if v not in index:
			raise MalformedInputError(f"value '{v}' is not in the domain of attribute '{attribute.name}'")
		parts[index[v]][1].append(t)
	return parts


def majority_class(tuples: list[Tuple], class_attribute: Attribute) -> str:
	"""Most frequent class, ties going to the first class in declared order."""
	cnt = class_counts(tuples, class_attribute)
	return class_attribute.values[int(np.argmax(cnt))]


def same_class(tuples: list[Tuple]) -> bool:
	first = tuples[0].cls
	return all(t.cls == first for t in tuples)


def select_attribute(tuples, attributes, class_attribute, ignored_names):
	"""
	Attribute whose partition has the lowest expected information, i.e. the
	highest information gain. Only a strictly lower value replaces the
	current best, so ties go to the first attribute of the list.

	Returns (attribute, partitions).
	"""
	best, best_parts = None, None
	min_info = float("inf")
	for attr in attributes:
		if attr.name in ignored_names:
			continue
		parts = partition(tuples, attr)
		info = expected_info_with_partition(tuples, [p for _, p in parts], class_attribute)
		if info < min_info:
			min_info = info
			best, best_parts = attr, parts
	return best, best_parts


def build(tuples: list[Tuple], node: TreeNode, attributes: list[Attribute], class_attribute: Attribute,
		  continuous_names, ignored_names) -> None:
	"""
	ID3 recursion. Fills `node` and the subtree below it from the tuples
	reaching it and the attributes not yet used on the path from the root.

	1. no tuples                   : NO_SUCH_TUPLES (never happens, see 4.)
	2. no attribute left to split  : majority class of the tuples
	3. all tuples of the same class: that class
	4. split on the best attribute : one child per value with tuples, in
	   the declared order of the values; empty partitions get no child.
	"""
	if not tuples:
		log.warning("node reached by no tuple")
		node.next_attribute = NO_SUCH_TUPLES
		return

	if not any(a.name not in ignored_names for a in attributes):
		node.next_attribute = majority_class(tuples, class_attribute)
		return

	if same_class(tuples):
		node.next_attribute = tuples[0].cls
		return

	best, parts = select_attribute(tuples, attributes, class_attribute, ignored_names)
	node.next_attribute = best.name
	log.debug(f"split on {best.name} ({len(tuples)} tuples)")

	# the siblings share this list, it is never modified
	remaining = [a for a in attributes if a is not best]
	for value, sub in parts:
		if not sub:
			continue
		# continuous values already hold their comparator ("<=X" / ">X")
		rule = Rule.parse(value) if best.name in continuous_names else Rule.equals(value)
		child = node.add_child(rule)
		build(sub, child, remaining, class_attribute, continuous_names, ignored_names)


class DecisionTree:
	"""
	ID3 decision tree classifier.

	Parameters
	----------
	indent : str
		Indentation marker written once per depth level when the tree is
		saved. It is cosmetic: loading does not read it.

	Attributes
	----------
	tree : Tree or None
		The trained (or loaded) tree.
	split_points : dict
		Split point chosen for each continuous attribute during `fit`.
	"""

	def __init__(self, indent: str = "\t"):
		self.indent = indent
		self.tree: Tree | None = None
		self.split_points: dict[str, float] = {}

	def fit(self, training_set: TrainingSet):
		"""
		Discretizes the continuous attributes and builds the tree. Works on a
		copy: the tuples of `training_set` keep their numeric values.
		"""
		ts = copy.deepcopy(training_set)
		log.info("Discretizing continuous attributes...")
		self.split_points = discretize(ts)
		log.info("Building the decision tree...")
		self.tree = Tree()
		build(ts.tuples, self.tree.root, ts.attributes, ts.class_attribute, set(ts.continuous), set(ts.ignored))
		log.info(f"Tree built: depth={self.tree.root.depth()}, leaves={self.tree.root.n_leaves()}")
		return self

	def _check_fitted(self):
		if self.tree is None:
			raise RuntimeError("DecisionTree not trained: call fit or load first.")

	def classify(self, t: Tuple) -> str:
		self._check_fitted()
		Classifier.classify(self.tree.root, t)
		return t.cls

	def predict(self, tuples: list[Tuple], default: str | None = None) -> list[str]:
		self._check_fitted()
		return Classifier.classify_all(self.tree, tuples, default)

	def to_lines(self) -> list[str]:
		self._check_fitted()
		return list(Serializer.write_tree(self.tree.root, indent=self.indent))

	@classmethod
	def from_lines(cls, lines, indent: str = "\t"):
		model = cls(indent=indent)
		model.tree = Deserializer.read_tree(lines)
		return model

	def save(self, path: str) -> None:
		self._check_fitted()
		with open(path, "w") as fp:
			Serializer.dump(self.tree, fp, indent=self.indent)

	@classmethod
	def load(cls, path: str, indent: str = "\t"):
		with open(path, "r") as fp:
			return cls.from_lines(fp.read().splitlines(), indent=indent)
