from adlang.variable import Variable


def test_parse_keeps_name():
    assert Variable.parse("counter").name == "counter"


def test_parse_equals_constructed():
    assert Variable.parse("x") == Variable("x")


def test_different_names_differ():
    assert Variable("a") != Variable("b")


def test_usable_as_mapping_key():
    scope = {Variable("a"): 1}
    scope[Variable.parse("a")] = 2
    assert scope == {Variable("a"): 2}