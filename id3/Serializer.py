#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
from typing import Iterator, TextIO

from id3.TreeNode import Tree, TreeNode


def write_tree(node: TreeNode, depth: int = 0, indent: str = "\t") -> Iterator[str]:
	"""
	Depth-first text form of the tree below `node`, one line per edge:

		<indent * depth><node.next_attribute><child.rule>

	followed by the lines of the child. A leaf gives a single line holding
	its class. The children are written in order, which is what lets
	Deserializer.read_tree rebuild the same tree.
	"""
	for child in node.children:
		yield f"{indent * depth}{node.next_attribute}{child.rule}"
		yield from write_tree(child, depth + 1, indent)
	if node.is_leaf:
		yield f"{indent * depth}{node.next_attribute}"


def dump(tree: Tree, fp: TextIO, indent: str = "\t") -> None:
	for line in write_tree(tree.root, indent=indent):
		fp.write(line + "\n")


def dumps(tree: Tree, indent: str = "\t") -> str:
	return "".join(line + "\n" for line in write_tree(tree.root, indent=indent))
