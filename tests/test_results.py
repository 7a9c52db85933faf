from terrascan.results import Violation, ViolationStats, ViolationStore


def _violation(name="rule name", severity="HIGH"):
    return Violation(
        rule_name=name,
        description="description",
        rule_id="rule id",
        severity=severity,
        category="category",
        rule_file="rule.rego",
        rule_data=b"package x",
        resource_name="resource name",
        resource_type="resource type",
        resource_data={"a": 1},
        file="file",
        line_number=1,
    )


def test_new_store_is_empty():
    store = ViolationStore()
    assert store.get_results() == []
    assert store.count == ViolationStats()


def test_add_result_and_get_results_preserve_order():
    store = ViolationStore()
    first = _violation("first")
    second = _violation("second")
    store.add_result(first)
    store.add_result(second)
    assert store.get_results() == [first, second]


def test_add_concatenates_and_sums_counts():
    left = ViolationStore()
    left.add_result(_violation("a"))
    left.count = ViolationStats(low_count=1, medium_count=2, high_count=3, total_count=6)
    right = ViolationStore()
    right.add_result(_violation("b"))
    right.count = ViolationStats(low_count=4, medium_count=5, high_count=6, total_count=15)

    combined = left.add(right)

    assert [v.rule_name for v in combined.violations] == ["a", "b"]
    assert combined.count.low_count == left.count.low_count + right.count.low_count
    assert combined.count.medium_count == left.count.medium_count + right.count.medium_count
    assert combined.count.high_count == left.count.high_count + right.count.high_count
    assert combined.count.total_count == left.count.total_count + right.count.total_count


def test_add_leaves_operands_unchanged():
    left = ViolationStore()
    left.add_result(_violation("a"))
    right = ViolationStore()
    right.add_result(_violation("b"))
    left.add(right)
    assert [v.rule_name for v in left.violations] == ["a"]
    assert [v.rule_name for v in right.violations] == ["b"]


def test_add_empty_store_is_identity():
    store = ViolationStore()
    store.add_result(_violation())
    store.count = ViolationStats(high_count=1, total_count=1)
    assert store.add(ViolationStore()) == store


def test_violation_to_dict_omits_internal_fields():
    data = _violation().to_dict()
    assert list(data) == [
        "rule_name",
        "description",
        "rule_id",
        "severity",
        "category",
        "resource_name",
        "resource_type",
        "file",
        "line",
    ]
    assert "rule_file" not in data
    assert "resource_data" not in data
    assert data["line"] == 1


def test_stats_to_dict_keys():
    stats = ViolationStats(low_count=1, medium_count=2, high_count=3, total_count=6)
    assert stats.to_dict() == {"low": 1, "medium": 2, "high": 3, "total": 6}


def test_store_to_dict_round_trips_counts_and_violations():
    store = ViolationStore()
    violation = _violation()
    store.add_result(violation)
    data = store.to_dict()
    assert list(data) == ["violations", "count"]
    assert data["violations"] == [violation.to_dict()]
    assert data["count"] == store.count.to_dict()