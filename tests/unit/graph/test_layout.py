"""Unit tests for the layout engine."""

import pytest

from certmap.core.errors import IntegrityFault
from certmap.core.types import Cert
from certmap.graph.layout import LEVEL_ORDER, LayoutOptions, assign_slots, compute_positions, level_index


def make_cert(cert_id: str, level: str, vendor: str = "AWS") -> Cert:
    return Cert.model_validate(
        {"id": cert_id, "vendor": vendor, "level": level, "title": cert_id, "roles": ["General"]}
    )


class TestLevelIndex:
    def test_fixed_ordinal_ranking(self):
        assert [level_index(level) for level in LEVEL_ORDER] == [0, 1, 2, 3]
        assert level_index("Professional-Expert") == 2

    def test_unranked_level_is_a_fault(self):
        with pytest.raises(IntegrityFault, match="Unranked level"):
            level_index("Course")


class TestComputePositions:
    def test_example_scenario(self, catalog):
        positions = compute_positions(catalog.certs)
        assert positions["a1"].as_tuple() == (40, 40)
        assert positions["a2"].as_tuple() == (440, 40)

    def test_slots_stack_per_level_in_input_order(self):
        certs = [
            make_cert("assoc-1", "Associate"),
            make_cert("fund-1", "Fundamentals"),
            make_cert("assoc-2", "Associate"),
            make_cert("assoc-3", "Associate"),
        ]
        positions = compute_positions(certs)

        assert positions["fund-1"].as_tuple() == (40, 40)
        assert [positions[f"assoc-{i}"].y for i in (1, 2, 3)] == [40, 200, 360]
        assert {positions[f"assoc-{i}"].x for i in (1, 2, 3)} == {440}

    def test_slot_counters_are_per_vendor(self):
        certs = [make_cert("aws", "Associate", "AWS"), make_cert("az", "Associate", "Azure")]
        assert assign_slots(certs) == {"aws": 0, "az": 0}

    def test_slot_monotonicity(self):
        certs = [make_cert(f"c{i}", "Specialty") for i in range(5)]
        assert list(assign_slots(certs).values()) == [0, 1, 2, 3, 4]

    def test_custom_options(self):
        options = LayoutOptions(x_gap=100, y_gap=50, x_offset=0, y_offset=10)
        certs = [make_cert("a", "Specialty"), make_cert("b", "Specialty")]
        positions = compute_positions(certs, options)
        assert positions["a"].as_tuple() == (300, 10)
        assert positions["b"].as_tuple() == (300, 60)

    def test_deterministic(self, rich_catalog):
        first = compute_positions(rich_catalog.certs)
        second = compute_positions(rich_catalog.certs)
        assert first == second
        assert list(first) == [cert.id for cert in rich_catalog.certs]

    def test_empty_input(self):
        assert compute_positions([]) == {}
