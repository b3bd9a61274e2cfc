"""Tests for operations/parameters.py - merging parent outputs and overrides."""

from stackpilot.models import Parameter
from stackpilot.operations.parameters import build_parameters


class TestBuildParameters:
    """Tests for build_parameters."""

    def test_empty_inputs(self) -> None:
        built = build_parameters({}, {})

        assert built.overrides == {}
        assert built.parameters == ()

    def test_parent_outputs_fill_missing_keys(self) -> None:
        built = build_parameters({"VpcId": "vpc-1"}, {"Env": "dev"})

        assert built.overrides == {"VpcId": "vpc-1", "Env": "dev"}

    def test_existing_override_wins(self) -> None:
        built = build_parameters({"Parent1": "parents value"}, {"Parent1": "Existing Value!"})

        assert built.overrides == {"Parent1": "Existing Value!"}
        assert built.parameters == (Parameter("Parent1", "Existing Value!"),)

    def test_override_precedence_for_any_parent_value(self) -> None:
        existing = {"A": "keep-a", "B": "keep-b"}
        for parent_value in ("", "other", "keep-a"):
            built = build_parameters({"A": parent_value, "B": parent_value}, existing)
            assert built.overrides["A"] == "keep-a"
            assert built.overrides["B"] == "keep-b"

    def test_template_filter_limits_parent_outputs(self) -> None:
        built = build_parameters(
            {"Parent1": "parents value", "Parent2": "other value"},
            {},
            template_parameters={"Parent1"},
        )

        assert built.overrides == {"Parent1": "parents value"}
        assert built.parameters == (Parameter("Parent1", "parents value"),)

    def test_template_filter_keeps_existing_overrides(self) -> None:
        built = build_parameters({}, {"Manual": "x"}, template_parameters=set())

        assert built.overrides == {"Manual": "x"}

    def test_parameters_sorted_by_key(self) -> None:
        built = build_parameters({"Zeta": "z", "Alpha": "a"}, {"Mid": "m"})

        assert [p.key for p in built.parameters] == ["Alpha", "Mid", "Zeta"]

    def test_inputs_not_mutated(self) -> None:
        parents = {"A": "1"}
        existing = {"B": "2"}

        build_parameters(parents, existing)

        assert parents == {"A": "1"}
        assert existing == {"B": "2"}
