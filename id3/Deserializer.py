#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*-
"""
Rebuilds a tree from the text written by Serializer.write_tree.

The format has no explicit structure: indentation is cosmetic. There are
three kinds of lines, told apart by the comparator they hold:

	name>x    continuous rule (checked first)
	name<=x   continuous rule
	name=v    discrete rule
	cls       leaf, no comparator at all

A rule line belongs to the current node when the node has no attribute yet
or already tests `name`. Any other name ends the children of the node: the
line is left for an enclosing call. Since an attribute is never tested twice
on the same path, the first enclosing node testing `name` is the owner.
"""
import logging

from id3.Errors import MalformedInputError
from id3.Rule import Rule
from id3.TreeNode import Tree, TreeNode

log = logging.getLogger(__name__)

# order matters: "<=" also holds "="
LINE_MARKERS = (">", "<", "=")


class LineCursor:
	"""Position in the lines of one classifier, shared by the recursive calls of one read."""

	def __init__(self, lines):
		self.lines = [(i + 1, l.strip()) for i, l in enumerate(lines) if l.strip()]
		self.pos = 0

	def done(self) -> bool:
		return self.pos >= len(self.lines)

	def peek(self) -> tuple[int, str]:
		return self.lines[self.pos]

	def advance(self) -> None:
		self.pos += 1


def split_line(line: str) -> tuple[str, str] | None:
	"""("name", "<rule>") for a rule line, None for a leaf line."""
	for marker in LINE_MARKERS:
		i = line.find(marker)
		if i >= 0:
			return line[:i], line[i:]
	return None


def read_node(node: TreeNode, cursor: LineCursor) -> None:
	while not cursor.done():
		lineno, line = cursor.peek()
		parts = split_line(line)
		if parts is None:
			if node.children:
				break
			node.next_attribute = line
			cursor.advance()
			break

		name, text = parts
		if not name:
			raise MalformedInputError(f"rule '{text}' has no attribute name", line=lineno)
		if node.next_attribute and node.next_attribute != name:
			break

		try:
			rule = Rule.parse(text)
		except MalformedInputError as e:
			raise MalformedInputError(str(e), line=lineno) from None
		node.next_attribute = name
		child = node.add_child(rule)
		cursor.advance()
		read_node(child, cursor)

	if not node.next_attribute:
		# only when the lines ran out right after a rule
		raise MalformedInputError("rule with no subtree", line=cursor.lines[-1][0])


def read_tree(lines) -> Tree:
	"""Tree described by `lines` (an iterable of str, line breaks optional)."""
	cursor = LineCursor(lines)
	if cursor.done():
		raise MalformedInputError("empty classifier")
	tree = Tree()
	read_node(tree.root, cursor)
	if not cursor.done():
		lineno, line = cursor.peek()
		raise MalformedInputError(f"'{line}' does not belong to the tree", line=lineno)
	log.debug(f"read {len(cursor.lines)} lines")
	return tree
