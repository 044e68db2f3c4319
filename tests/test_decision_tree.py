"""Tests for ID3 tree construction."""

import copy
import pytest

from id3.Data import Attribute, Tuple
from id3.DecisionTree import (
    NO_SUCH_TUPLES,
    DecisionTree,
    build,
    majority_class,
    partition,
    select_attribute,
)
from id3.Errors import AttributeLookupError, MalformedInputError
from id3.TreeNode import TreeNode
from utils import parse_training_lines
from conftest import make_tuples


def leaf_map(node):
    """{rule: class} for a node whose children are all leaves."""
    return {str(c.rule): c.next_attribute for c in node.children}


class TestBuild:
    """Stopping rules and attribute selection."""

    def test_weather_scenario(self, weather_lines):
        ts = parse_training_lines(weather_lines)
        model = DecisionTree().fit(ts)
        root = model.tree.root
        assert root.rule is None
        assert root.next_attribute == "Weather"
        assert [str(c.rule) for c in root.children] == ["=sunny", "=rainy"]
        assert leaf_map(root) == {"=sunny": "no", "=rainy": "yes"}
        assert model.classify(Tuple({"Weather": "sunny"})) == "no"

    def test_majority_when_all_attributes_ignored(self, yes_no):
        classes = Attribute("C", ["cls1", "cls2"])
        tuples = [Tuple({"Id": "A"}, c) for c in ("cls1", "cls2", "cls2")]
        node = TreeNode()
        build(tuples, node, [Attribute("Id")], classes, set(), {"Id"})
        assert node.is_leaf
        assert node.next_attribute == "cls2"

    def test_majority_tie_goes_to_first_declared_class(self):
        classes = Attribute("C", ["cls2", "cls1"])
        tuples = [Tuple({}, "cls1"), Tuple({}, "cls2")]
        assert majority_class(tuples, classes) == "cls2"

    def test_no_attributes_left(self, yes_no):
        tuples = make_tuples("W", [("s", "yes"), ("s", "no"), ("s", "no")])
        node = TreeNode()
        build(tuples, node, [], yes_no, set(), set())
        assert node.next_attribute == "no"

    def test_pure_tuples_make_a_leaf(self, yes_no):
        tuples = make_tuples("W", [("s", "yes"), ("r", "yes")])
        node = TreeNode()
        build(tuples, node, [Attribute("W", ["s", "r"])], yes_no, set(), set())
        assert node.is_leaf
        assert node.next_attribute == "yes"

    def test_empty_tuples_sentinel(self, yes_no):
        node = TreeNode()
        build([], node, [Attribute("W", ["s"])], yes_no, set(), set())
        assert node.next_attribute == NO_SUCH_TUPLES

    def test_empty_partition_gets_no_child(self, yes_no):
        attr = Attribute("W", ["sunny", "overcast", "rainy"])
        tuples = make_tuples("W", [("sunny", "no"), ("rainy", "yes")])
        node = TreeNode()
        build(tuples, node, [attr], yes_no, set(), set())
        assert [str(c.rule) for c in node.children] == ["=sunny", "=rainy"]

    def test_children_follow_declared_value_order(self, yes_no):
        attr = Attribute("W", ["rainy", "sunny"])
        tuples = make_tuples("W", [("sunny", "no"), ("rainy", "yes")])
        node = TreeNode()
        build(tuples, node, [attr], yes_no, set(), set())
        assert [str(c.rule) for c in node.children] == ["=rainy", "=sunny"]

    def test_tie_goes_to_first_attribute(self, yes_no):
        attrs = [Attribute("A", ["a1", "a2"]), Attribute("B", ["b1", "b2"])]
        tuples = [
            Tuple({"A": "a1", "B": "b1"}, "yes"),
            Tuple({"A": "a2", "B": "b2"}, "no"),
        ]
        best, parts = select_attribute(tuples, attrs, yes_no, set())
        assert best.name == "A"
        assert [v for v, _ in parts] == ["a1", "a2"]

    def test_ignored_attribute_never_selected(self, yes_no):
        attrs = [Attribute("Id", ["i1", "i2"]), Attribute("W", ["s", "r"])]
        tuples = [Tuple({"Id": "i1", "W": "s"}, "yes"), Tuple({"Id": "i2", "W": "s"}, "no")]
        best, _ = select_attribute(tuples, attrs, yes_no, {"Id"})
        assert best.name == "W"

    def test_siblings_see_the_same_attributes(self, xor_lines):
        model = DecisionTree().fit(parse_training_lines(xor_lines))
        root = model.tree.root
        assert root.next_attribute == "A"
        assert [c.next_attribute for c in root.children] == ["B", "B"]
        assert leaf_map(root.children[0]) == {"=p": "c0", "=q": "c1"}
        assert leaf_map(root.children[1]) == {"=p": "c1", "=q": "c0"}

    def test_continuous_attribute_rules(self, outdoor_lines):
        model = DecisionTree().fit(parse_training_lines(outdoor_lines))
        root = model.tree.root
        assert root.next_attribute == "Temp"
        assert leaf_map(root) == {"<=27.50": "yes", ">27.50": "no"}
        assert model.split_points["Temp"] == pytest.approx(27.5)


class TestPartition:

    def test_value_outside_domain_is_malformed(self):
        with pytest.raises(MalformedInputError):
            partition([Tuple({"W": "foggy"}, "yes")], Attribute("W", ["sunny"]))

    def test_missing_value_is_a_lookup_failure(self):
        with pytest.raises(AttributeLookupError):
            partition([Tuple({"X": "1"}, "yes")], Attribute("W", ["sunny"]))


class TestDecisionTree:

    def test_fit_keeps_training_values(self, outdoor_lines):
        ts = parse_training_lines(outdoor_lines)
        before = copy.deepcopy(ts)
        DecisionTree().fit(ts)
        assert ts == before

    def test_predict_before_fit(self):
        with pytest.raises(RuntimeError):
            DecisionTree().predict([Tuple({"W": "s"})])

    def test_predict_training_tuples(self, outdoor_lines):
        ts = parse_training_lines(outdoor_lines)
        model = DecisionTree().fit(ts)
        expected = [t.cls for t in ts.tuples]
        assert model.predict(copy.deepcopy(ts.tuples)) == expected

    def test_predict_default_for_unmatched(self, weather_lines):
        model = DecisionTree().fit(parse_training_lines(weather_lines))
        tuples = [Tuple({"Weather": "foggy"}), Tuple({"Weather": "rainy"})]
        assert model.predict(tuples, default="maybe") == ["maybe", "yes"]
        assert model.predict(tuples) == ["", "yes"]

    def test_save_and_load(self, tmp_path, xor_lines):
        ts = parse_training_lines(xor_lines)
        model = DecisionTree().fit(ts)
        path = tmp_path / "xor_Classifier.txt"
        model.save(str(path))
        loaded = DecisionTree.load(str(path))
        assert loaded.to_lines() == model.to_lines()
        assert loaded.predict(copy.deepcopy(ts.tuples)) == [t.cls for t in ts.tuples]
