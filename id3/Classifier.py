#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
import logging

from id3.Data import Tuple
from id3.TreeNode import Tree, TreeNode

log = logging.getLogger(__name__)


def classify(node: TreeNode, t: Tuple) -> None:
	"""
	Follows the first child whose rule matches the value of `t` for the
	attribute tested at `node`, down to a leaf, and stores the class of the
	leaf in `t.cls`.

	When no child matches, `t.cls` is left untouched ("" for a new tuple).
	"""
	while not node.is_leaf:
		value = t.value(node.next_attribute)
		for child in node.children:
			if child.rule.matches(value):
				node = child
				break
		else:
			return
	t.cls = node.next_attribute


def classify_all(tree: Tree, tuples: list[Tuple], default: str | None = None) -> list[str]:
	"""
	Classifies every tuple; tuples matching no path get `default`, or stay
	unclassified ("") when there is no default.
	"""
	unmatched = 0
	for t in tuples:
		t.cls = ""
		classify(tree.root, t)
		if not t.cls:
			unmatched += 1
			if default is not None:
				t.cls = default
	if unmatched:
		log.info(f"{unmatched}/{len(tuples)} tuples matched no path of the tree")
	return [t.cls for t in tuples]
