import pytest

from metricparams.contracts import MetricNotFoundError, MetricRegistry
from metricparams.errors import TooFewParametersError
from metricparams.metric import Metric
from metricparams.params import new_param
from metricparams.registry import MetricSet


def _metric_set() -> MetricSet:
    return MetricSet(
        {
            "net.ping": Metric("Ping a host.", [new_param("host").set_required()]),
            "agent.version": Metric("Agent version."),
        }
    )


def test_list_flattens_keys_and_descriptions():
    listing = _metric_set().list()

    assert listing == ["net.ping", "Ping a host.", "agent.version", "Agent version."]


def test_list_pairs_can_be_sorted_by_key():
    listing = _metric_set().list()
    pairs = sorted(zip(listing[::2], listing[1::2], strict=True))

    assert pairs == [("agent.version", "Agent version."), ("net.ping", "Ping a host.")]


def test_list_of_empty_set():
    assert MetricSet().list() == []


def test_get_metric_returns_registered_metric():
    metrics = _metric_set()

    assert metrics.get_metric("net.ping") is metrics["net.ping"]


def test_get_metric_raises_for_unknown_key():
    with pytest.raises(MetricNotFoundError):
        _metric_set().get_metric("missing")


def test_metric_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        _metric_set().get_metric("missing")


def test_eval_params_delegates_to_metric():
    metrics = _metric_set()

    assert metrics.eval_params("net.ping", ["h"]) == {"host": "h"}
    with pytest.raises(TooFewParametersError):
        metrics.eval_params("net.ping", [])


def test_metric_set_satisfies_registry_contract():
    assert isinstance(_metric_set(), MetricRegistry)
