from playground.utils.config import PlaygroundConfig
from playground.utils.random_source import NumpyRandomSource
from scripts.core_checks import check_optimality, check_policies


def test_policy_contracts_hold():
    assert check_policies() == []


def test_optimality_contracts_hold_on_random_datasets():
    failures = check_optimality(NumpyRandomSource(7), PlaygroundConfig(), trials=25)
    assert not failures, "\n".join(failures)
