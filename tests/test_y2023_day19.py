import pytest

from advent.y2023_day19 import (
    Rule,
    accepted_rating_sum,
    count_accepted_combinations,
    is_accepted,
    parse_input,
    solve,
)

EXAMPLE = """\
px{a<2006:qkq,m>2090:A,rfg}
pv{a>1716:R,A}
lnx{m>1548:A,A}
rfg{s<537:gd,x>2440:R,A}
qs{s>3448:A,lnx}
qkq{x<1416:A,crn}
crn{x>2662:A,R}
in{s<1351:px,qqz}
qqz{s>2770:qs,m<1801:hdj,R}
gd{a>3333:R,R}
hdj{m>838:A,pv}

{x=787,m=2655,a=1222,s=2876}
{x=1679,m=44,a=2067,s=496}
{x=2036,m=264,a=79,s=2244}
{x=2461,m=1339,a=466,s=291}
{x=2127,m=1623,a=2188,s=1013}
"""

FULL_SPACE = 4000**4


def test_solve_example():
    assert solve(EXAMPLE) == (19114, 167409079868000)


def test_parse_input_structure():
    workflows, parts = parse_input(EXAMPLE)
    assert len(workflows) == 11
    assert workflows["px"] == [
        Rule("qkq", "a", "<", 2006),
        Rule("A", "m", ">", 2090),
        Rule("rfg"),
    ]
    assert parts[0] == {"x": 787, "m": 2655, "a": 1222, "s": 2876}
    assert len(parts) == 5


def test_is_accepted_example_parts():
    workflows, parts = parse_input(EXAMPLE)
    assert [is_accepted(workflows, part) for part in parts] == [True, False, True, False, True]


def test_accepted_rating_sum_matches_accepted_parts():
    workflows, parts = parse_input(EXAMPLE)
    accepted = [part for part in parts if is_accepted(workflows, part)]
    assert accepted_rating_sum(workflows, parts) == sum(sum(p.values()) for p in accepted)
    assert accepted_rating_sum(workflows, []) == 0


def test_rule_matches():
    rule = Rule("next", "x", "<", 10)
    assert rule.matches({"x": 9, "m": 0, "a": 0, "s": 0})
    assert not rule.matches({"x": 10, "m": 0, "a": 0, "s": 0})
    assert Rule("A").matches({"x": 1, "m": 1, "a": 1, "s": 1})


def test_accept_everything_counts_full_space():
    workflows, _ = parse_input("in{A}\n\n")
    assert count_accepted_combinations(workflows) == FULL_SPACE


def test_reject_everything_counts_zero():
    workflows, _ = parse_input("in{R}\n\n")
    assert count_accepted_combinations(workflows) == 0


@pytest.mark.parametrize("attribute", list("xmas"))
@pytest.mark.parametrize("value", [1, 2000, 4000])
def test_complementary_workflows_cover_space(attribute, value):
    first, _ = parse_input(f"in{{{attribute}<{value}:A,R}}\n\n")
    second, _ = parse_input(f"in{{{attribute}<{value}:R,A}}\n\n")
    total = count_accepted_combinations(first) + count_accepted_combinations(second)
    assert total == FULL_SPACE


def test_nested_split_never_exceeds_parent():
    workflows, _ = parse_input("in{x<100:a,R}\na{x<500:A,R}\n\n")
    narrow, _ = parse_input("in{x<100:A,R}\n\n")
    assert count_accepted_combinations(workflows) == count_accepted_combinations(narrow)


def test_unknown_workflow_raises():
    workflows, parts = parse_input("in{x>10:nowhere,A}\n\n{x=20,m=1,a=1,s=1}\n")
    with pytest.raises(ValueError):
        is_accepted(workflows, parts[0])
    with pytest.raises(ValueError):
        count_accepted_combinations(workflows)


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_input("in{x<:A,R}\n\n")


def test_unknown_attribute_raises():
    with pytest.raises(ValueError):
        parse_input("in{q<10:A,R}\n\n")


def test_malformed_part_raises():
    with pytest.raises(ValueError):
        parse_input("in{A}\n\n{x=1,m=2,a=3}\n")