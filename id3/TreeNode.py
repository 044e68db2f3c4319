#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
from dataclasses import dataclass, field

from id3.Rule import Rule


@dataclass
class TreeNode:
	"""
	rule           : condition leading from the parent to this node (None at the root)
	next_attribute : attribute tested by the children, or the class when the node is a leaf
	children       : ordered, the order is kept when the tree is written to text
	"""
	rule: Rule | None = None
	next_attribute: str = ""
	children: list["TreeNode"] = field(default_factory=list)

	@property
	def is_leaf(self) -> bool:
		return not self.children

	def add_child(self, rule: Rule, next_attribute: str = "") -> "TreeNode":
		child = TreeNode(rule, next_attribute)
		self.children.append(child)
		return child

	def depth(self) -> int:
		if self.is_leaf:
			return 0
		return 1 + max(c.depth() for c in self.children)

	def n_leaves(self) -> int:
		if self.is_leaf:
			return 1
		return sum(c.n_leaves() for c in self.children)


@dataclass
class Tree:
	root: TreeNode = field(default_factory=TreeNode)
