#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import argparse
import logging
import sys
import yaml
import utils
import bench
import plot

from id3.DecisionTree import DecisionTree
from id3.Errors import DecisionTreeError

log = logging.getLogger(__name__)

parser = argparse.ArgumentParser(description="ID3 decision tree: train classifiers, classify tuples, evaluate classifiers",
								 formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument("-m", "--mode", help="what to do", choices=["t", "train", "c", "classify", "e", "evaluate"], required=True)
parser.add_argument("-f", "--files", help="training files (train) or tuple files (classify, evaluate)", nargs="+", required=True)
parser.add_argument("-C", "--classifier", help="classifier file (classify, evaluate)")
parser.add_argument("-o", "--output-dir", help="output directory (train, classify)")
parser.add_argument("-d", "--default", help="class given to tuples matching no path of the tree (params.yaml if unset)")
parser.add_argument("--class-column", help="column holding the expected class (evaluate, params.yaml if unset)")
parser.add_argument("--params", help="YAML parameters file", default=None)
parser.add_argument("--plot", help="plot the confusion matrix (evaluate)", action="store_true")
parser.add_argument("-v", "--verbose", help="-v for progress, -vv for details", action="count", default=0)


def train(files: list[str], out_dir: str, params: dict) -> int:
	failed = 0
	for fname in files:
		try:
			log.info(f"Creating the decision tree based on the input file {fname}...")
			training_set = utils.read_training_file(fname)
			model = DecisionTree(indent=params["DecisionTree"]["indent"]).fit(training_set)
			out = utils.output_path(out_dir, fname, "_Classifier.txt")
			model.save(out)
			log.info(f"Classifier written to {out}")
		except (DecisionTreeError, OSError) as e:
			log.error(f"{fname}: {e}")
			failed += 1
	return failed


def classify(model: DecisionTree, files: list[str], out_dir: str, default: str | None, params: dict) -> int:
	failed = 0
	answer_column = params["classify"]["answer_column"]
	for fname in files:
		try:
			log.info(f"Classifying tuples in input file {fname}...")
			names, tuples = utils.read_tuples_file(fname)
			model.predict(tuples, default=default)
			if default is None and any(not t.cls for t in tuples):
				log.warning(f"{fname}: some tuples matched no path and no default class is set")
			out = utils.output_path(out_dir, fname, "_Classified.csv")
			utils.write_classified(out, names, tuples, answer_column)
			log.info(f"Classified data written to {out}")
		except (DecisionTreeError, OSError) as e:
			log.error(f"{fname}: {e}")
			failed += 1
	return failed


def evaluate(model: DecisionTree, files: list[str], class_column: str, default: str | None, show_plot: bool) -> int:
	failed = 0
	for fname in files:
		try:
			_, tuples = utils.read_tuples_file(fname)
			res = bench.benchmark_classification(model, tuples, class_column, default)
		except (DecisionTreeError, OSError) as e:
			log.error(f"{fname}: {e}")
			failed += 1
			continue
		plot.print_classification_report(res, fname)
		if show_plot:
			plot.plot_confusion(res["confusion"], title=fname)
	return failed


def main(argv=None) -> int:
	args = parser.parse_args(argv)
	mode = args.mode[0]
	utils.setup_logging(args.verbose)

	try:
		params = utils.read_params(args.params)
	except (OSError, yaml.YAMLError) as e:
		log.error(f"cannot read parameters: {e}")
		return 1
	default = args.default if args.default is not None else params["classify"]["default"]

	if mode in "tc" and not args.output_dir:
		parser.error("--output-dir is required to train and classify")
	if mode in "ce" and not args.classifier:
		parser.error("--classifier is required to classify and evaluate")

	if mode == "t":
		failed = train(args.files, args.output_dir, params)
	else:
		try:
			log.info(f"Reading the decision tree in {args.classifier}...")
			model = DecisionTree.load(args.classifier, indent=params["DecisionTree"]["indent"])
		except (DecisionTreeError, OSError) as e:
			log.error(f"{args.classifier}: {e}")
			return 1
		if mode == "c":
			failed = classify(model, args.files, args.output_dir, default, params)
		else:
			class_column = args.class_column or params["evaluate"]["class_column"]
			failed = evaluate(model, args.files, class_column, default, args.plot)

	return 1 if failed else 0

if __name__ == "__main__":
	sys.exit(main())
