"""Tests for continuous attribute discretization."""

import pytest

from id3.Data import Attribute
from id3.Discretizer import discretize, discretize_attribute, find_split_point, split_labels
from id3.Errors import MalformedInputError
from utils import parse_training_lines
from conftest import make_tuples


def test_split_labels_two_decimals():
    assert split_labels(2.5) == ["<=2.50", ">2.50"]
    assert split_labels(-1.5) == ["<=-1.50", ">-1.50"]


def test_selects_separating_midpoint(yes_no):
    tuples = make_tuples("T", [("1", "yes"), ("2", "yes"), ("3", "no"), ("4", "no")])
    split, info = find_split_point(tuples, "T", yes_no)
    assert split == pytest.approx(2.5)
    assert info == 0.0


def test_tuple_order_does_not_matter(yes_no):
    tuples = make_tuples("T", [("4", "no"), ("1", "yes"), ("3", "no"), ("2", "yes")])
    split, _ = find_split_point(tuples, "T", yes_no)
    assert split == pytest.approx(2.5)


def test_duplicates_kept_and_first_minimum_wins(yes_no):
    # midpoints 1.0 and 1.5 both separate the classes
    tuples = make_tuples("T", [("1", "yes"), ("1", "yes"), ("2", "no")])
    split, info = find_split_point(tuples, "T", yes_no)
    assert split == pytest.approx(1.0)
    assert info == 0.0


def test_single_tuple_uses_its_value(yes_no):
    tuples = make_tuples("T", [("5", "yes")])
    split, _ = find_split_point(tuples, "T", yes_no)
    assert split == 5.0


def test_discretize_rewrites_tuples_and_domain(yes_no):
    attr = Attribute("T")
    tuples = make_tuples("T", [("1", "yes"), ("2", "yes"), ("3", "no"), ("4.75", "no")])
    split = discretize_attribute(attr, tuples, yes_no)
    assert split == pytest.approx(2.5)
    assert attr.values == ["<=2.50", ">2.50"]
    assert [t.attribute_values["T"] for t in tuples] == ["<=2.50", "<=2.50", ">2.50", ">2.50"]


def test_non_numeric_value_is_malformed(yes_no):
    tuples = make_tuples("T", [("1", "yes"), ("warm", "no")])
    with pytest.raises(MalformedInputError):
        find_split_point(tuples, "T", yes_no)


def test_discretize_training_set(outdoor_lines):
    ts = parse_training_lines(outdoor_lines)
    splits = discretize(ts)
    assert splits == {"Temp": pytest.approx(27.5)}
    assert ts.attribute("Temp").values == ["<=27.50", ">27.50"]
    # discrete attributes untouched
    assert ts.attribute("Outlook").values == ["sunny", "rainy"]
    assert ts.tuples[0].attribute_values == {"Id": "d1", "Outlook": "sunny", "Temp": ">27.50"}
