#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
"""
Turns a .csv file into the files read by main.py:

	-m train    : <name>_Trainer.in (training data) and <name>_Tester.txt (test data)
	-m classify : <name>_ToClassify.txt (data to classify)

The class is the column named "class" (any case), written under the
configured class_column name in the test data. Training tuples are drawn
per class by bootstrap: n draws with replacement among the n tuples of the
class, duplicates dropped, which keeps about 63% of each class and the class
proportions. The remaining tuples are the test data.
"""
import argparse
import logging
import sys
import numpy as np
import pandas as pd
import utils

from id3.Errors import DecisionTreeError, MalformedInputError

log = logging.getLogger(__name__)


def read_csv(fname: str) -> pd.DataFrame:
	"""CSV as strings, whitespace trimmed and inner spaces replaced by "_" (names and values)."""
	df = pd.read_csv(fname, dtype=str, keep_default_na=False, skipinitialspace=True)
	df.columns = [str(c).strip().replace(" ", "_") for c in df.columns]
	df = df.apply(lambda col: col.str.strip().str.replace(" ", "_", regex=False))
	for c in df.columns:
		empty = np.nonzero((df[c] == "").to_numpy())[0]
		if empty.size:
			raise MalformedInputError(f"empty value in column '{c}' (data row {int(empty[0]) + 1})")
	return df

def find_class_column(df: pd.DataFrame, class_column: str = "class") -> str:
	for c in df.columns:
		if c.lower() == class_column.lower():
			return c
	raise KeyError(f"no '{class_column}' column")

def bootstrap_split(df: pd.DataFrame, class_column: str, seed=None) -> tuple[pd.DataFrame, pd.DataFrame]:
	"""(training rows, test rows), both in the original row order."""
	rng = np.random.default_rng(seed)
	keep = np.zeros(len(df), dtype=bool)
	labels = df[class_column].to_numpy()
	for c in pd.unique(labels):
		idx = np.nonzero(labels == c)[0]
		keep[rng.choice(idx, size=idx.size, replace=True)] = True
	return df[keep], df[~keep]

def attribute_line(name: str, values: pd.Series, continuous, ignore) -> str:
	if name in continuous:
		return f"{name} continuous"
	if name in ignore:
		return f"{name} ignore"
	return " ".join([name, *pd.unique(values)])

def training_lines(df: pd.DataFrame, train: pd.DataFrame, class_column: str, continuous=(), ignore=()) -> list[str]:
	"""
	Training data. The domains (and the classes) are the distinct values of
	the whole file, in order of appearance, so that the test tuples fit too.
	"""
	names = [c for c in df.columns if c != class_column]
	lines = [str(len(names))]
	lines += [attribute_line(n, df[n], continuous, ignore) for n in names]
	lines.append(" ".join(["Ans", *pd.unique(df[class_column])]))
	lines += [" ".join(row) for row in train[names + [class_column]].itertuples(index=False, name=None)]
	return lines

def tuple_lines(df: pd.DataFrame) -> list[str]:
	lines = [" ".join(df.columns)]
	lines += [" ".join(row) for row in df.itertuples(index=False, name=None)]
	return lines

def write_lines(fname: str, lines: list[str]) -> None:
	with open(fname, "w") as fp:
		fp.write("\n".join(lines) + "\n")


def prepare_training(fname: str, out_dir: str, class_column: str = "class", continuous=(), ignore=(), seed=None) -> tuple[str, str]:
	df = read_csv(fname)
	df = df.rename(columns={find_class_column(df, class_column): class_column})
	cls = class_column
	train, test = bootstrap_split(df, cls, seed)
	log.info(f"{fname}: {len(train)} training tuples, {len(test)} test tuples")

	trainer = utils.output_path(out_dir, fname, "_Trainer.in")
	write_lines(trainer, training_lines(df, train, cls, continuous, ignore))
	tester = utils.output_path(out_dir, fname, "_Tester.txt")
	write_lines(tester, tuple_lines(test))
	return trainer, tester

def prepare_classify(fname: str, out_dir: str) -> str:
	out = utils.output_path(out_dir, fname, "_ToClassify.txt")
	write_lines(out, tuple_lines(read_csv(fname)))
	return out


parser = argparse.ArgumentParser(description="Format .csv data for the ID3 decision tree", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument("-m", "--mode", help="training/test data or data to classify", choices=["t", "train", "c", "classify"], required=True)
parser.add_argument("-f", "--files", help="input .csv files", nargs="+", required=True)
parser.add_argument("-o", "--output-dir", help="output directory", required=True)
parser.add_argument("--continuous", help="continuous columns (params.yaml if unset)", nargs="*")
parser.add_argument("--ignore", help="columns kept for identification only (params.yaml if unset)", nargs="*")
parser.add_argument("--seed", help="bootstrap seed (params.yaml if unset)", type=int)
parser.add_argument("--params", help="YAML parameters file", default=None)
parser.add_argument("-v", "--verbose", action="count", default=0)


def main(argv=None) -> int:
	args = parser.parse_args(argv)
	utils.setup_logging(args.verbose)
	par = utils.read_params(args.params)["data_prepared"]
	continuous = args.continuous if args.continuous is not None else par["continuous"]
	ignore = args.ignore if args.ignore is not None else par["ignore"]
	seed = args.seed if args.seed is not None else par["seed"]

	failed = 0
	for fname in args.files:
		try:
			if args.mode[0] == "t":
				outs = prepare_training(fname, args.output_dir, par["class_column"], continuous, ignore, seed)
			else:
				outs = (prepare_classify(fname, args.output_dir),)
			log.info(f"Formatted data written to {', '.join(outs)}")
		except (DecisionTreeError, OSError, KeyError, pd.errors.ParserError) as e:
			log.error(f"Data formatting failed for {fname}: {e}")
			failed += 1
	return 1 if failed else 0

if __name__ == "__main__":
	sys.exit(main())
