#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import copy
import os
import logging
import pandas as pd
import yaml
from platform import system

from id3.Data import Attribute, CONTINUOUS, IGNORE, Tuple, TrainingSet
from id3.Errors import MalformedInputError

log = logging.getLogger(__name__)

DEFAULT_PARAMS = {
	"DecisionTree": {"indent": "\t"},
	"classify": {"default": None, "answer_column": "Ans"},
	"evaluate": {"class_column": "class"},
	"data_prepared": {"class_column": "class", "continuous": [], "ignore": [], "seed": None},
}

# characters the classifier file uses to tell rules apart
RESERVED = ("=", "<", ">")


def setup_logging(verbosity: int = 0) -> None:
	level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
	logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def getPath(script_dir, file_dir):
	plat = system()
	if plat == "Windows":
		script_dir = script_dir.replace("/", "\\")
		file_dir = file_dir.replace("/", "\\")
	else:
		script_dir = script_dir.replace("\\", "/")
		file_dir = file_dir.replace("\\", "/")
	return script_dir, file_dir


def read_params(fname: str | None = None) -> dict[str, dict[str, any]]:
	"""
	Reads params.yaml (next to this file unless `fname` is given) on top of
	DEFAULT_PARAMS. A missing default params.yaml is not an error.
	"""
	params = copy.deepcopy(DEFAULT_PARAMS)
	if fname is None:
		script_dir = os.path.dirname(os.path.abspath(__file__))
		script_dir, file_dir = getPath(script_dir, "params.yaml")
		fname = os.path.join(script_dir, file_dir)
		if not os.path.exists(fname):
			return params
	with open(fname, "r") as fp:
		loaded = yaml.safe_load(fp) or {}
	for section, values in loaded.items():
		params.setdefault(section, {}).update(values or {})
	log.debug(f"params read from {fname}")
	return params


def output_path(out_dir: str, in_file: str, suffix: str) -> str:
	"""<out_dir>/<stem of in_file><suffix>, creating out_dir when missing."""
	os.makedirs(out_dir, exist_ok=True)
	stem = os.path.splitext(os.path.basename(in_file))[0]
	return os.path.join(out_dir, stem + suffix)


def _numbered(lines):
	return [(i + 1, l.split()) for i, l in enumerate(lines) if l.strip()]


def _check_name(name: str, lineno: int, what: str) -> None:
	if any(c in name for c in RESERVED):
		raise MalformedInputError(f"{what} '{name}' holds one of {' '.join(RESERVED)}", line=lineno)


def parse_training_lines(lines) -> TrainingSet:
	"""
	Training data:

		<number of attributes>
		<name> continuous | <name> ignore | <name> <value> <value> ...   (one line per attribute)
		<class name> <class> <class> ...
		<value> <value> ... <class>                                      (one line per tuple)
	"""
	rows = _numbered(lines)
	if not rows:
		raise MalformedInputError("empty training data")

	lineno, tokens = rows[0]
	try:
		n_attributes = int(tokens[0])
	except ValueError:
		raise MalformedInputError(f"'{tokens[0]}' is not a number of attributes", line=lineno) from None
	if len(tokens) != 1 or n_attributes < 0:
		raise MalformedInputError("first line must hold the number of attributes only", line=lineno)
	if len(rows) < n_attributes + 2:
		raise MalformedInputError(f"expected {n_attributes} attribute lines and a class line")

	attributes, continuous, ignored = [], [], []
	for lineno, tokens in rows[1:n_attributes + 1]:
		if len(tokens) < 2:
			raise MalformedInputError(f"attribute '{tokens[0]}' has no values", line=lineno)
		name = tokens[0]
		_check_name(name, lineno, "attribute")
		if name in (a.name for a in attributes):
			raise MalformedInputError(f"attribute '{name}' declared twice", line=lineno)
		kind = tokens[1].lower()
		if kind == CONTINUOUS:
			continuous.append(name)
			attributes.append(Attribute(name))
		elif kind == IGNORE:
			ignored.append(name)
			attributes.append(Attribute(name))
		else:
			for v in tokens[1:]:
				_check_name(v, lineno, "value")
			attributes.append(Attribute(name, tokens[1:]))

	lineno, tokens = rows[n_attributes + 1]
	if len(tokens) < 2:
		raise MalformedInputError(f"class '{tokens[0]}' has no values", line=lineno)
	_check_name(tokens[0], lineno, "class attribute")
	for v in tokens[1:]:
		_check_name(v, lineno, "class")
	class_attribute = Attribute(tokens[0], tokens[1:])

	names = [a.name for a in attributes]
	domains = {a.name: set(a.values) for a in attributes if a.name not in continuous and a.name not in ignored}
	tuples = []
	for lineno, tokens in rows[n_attributes + 2:]:
		if len(tokens) != n_attributes + 1:
			raise MalformedInputError(f"expected {n_attributes} values and a class, got {len(tokens)} tokens", line=lineno)
		values, tuple_class = tokens[:-1], tokens[-1]
		if tuple_class not in class_attribute.values:
			raise MalformedInputError(f"unknown class '{tuple_class}'", line=lineno)
		for name, v in zip(names, values):
			if name in domains and v not in domains[name]:
				raise MalformedInputError(f"value '{v}' is not in the domain of '{name}'", line=lineno)
			if name in continuous:
				try:
					float(v)
				except ValueError:
					raise MalformedInputError(f"'{v}' is not a number ('{name}' is continuous)", line=lineno) from None
		tuples.append(Tuple.from_row(names, values, tuple_class))

	return TrainingSet(attributes, class_attribute, tuples, continuous, ignored)


def read_training_file(fname: str) -> TrainingSet:
	log.info(f"Reading training data from {fname}...")
	with open(fname, "r") as fp:
		training_set = parse_training_lines(fp.read().splitlines())
	log.info(f"{len(training_set.attributes)} attributes, {len(training_set.class_attribute.values)} classes, "
			 f"{len(training_set.tuples)} tuples")
	return training_set


def parse_tuple_lines(lines) -> tuple[list[str], list[Tuple]]:
	"""Data to classify: a header of attribute names, then one line of values per tuple."""
	rows = _numbered(lines)
	if not rows:
		raise MalformedInputError("no attribute names")
	names = rows[0][1]
	tuples = []
	for lineno, tokens in rows[1:]:
		if len(tokens) != len(names):
			raise MalformedInputError(f"expected {len(names)} values, got {len(tokens)}", line=lineno)
		tuples.append(Tuple.from_row(names, tokens))
	return names, tuples


def read_tuples_file(fname: str) -> tuple[list[str], list[Tuple]]:
	with open(fname, "r") as fp:
		return parse_tuple_lines(fp.read().splitlines())


def classified_frame(names: list[str], tuples: list[Tuple], answer_column: str = "Ans") -> pd.DataFrame:
	df = pd.DataFrame([[t.attribute_values[n] for n in names] for t in tuples], columns=names, dtype=str)
	df[answer_column] = [t.cls for t in tuples]
	return df


def write_classified(fname: str, names: list[str], tuples: list[Tuple], answer_column: str = "Ans") -> None:
	classified_frame(names, tuples, answer_column).to_csv(fname, index=False)
