from __future__ import annotations

from random import Random

import pytest
from evonet.network import (
    Layer,
    LayerTopology,
    Network,
    Neuron,
    parameter_count,
)


def test_neuron_random_draws_bias_then_weights() -> None:
    neuron = Neuron.random(Random(0), 4)

    reference = Random(0)
    expected_bias = reference.uniform(-1.0, 1.0)
    expected_weights = tuple(reference.uniform(-1.0, 1.0) for _ in range(4))

    assert neuron.bias == expected_bias
    assert neuron.weights == expected_weights
    assert all(-1.0 <= value <= 1.0 for value in (neuron.bias, *neuron.weights))


def test_neuron_propagate_applies_relu() -> None:
    neuron = Neuron(bias=0.5, weights=(-0.3, 0.8))

    assert neuron.propagate([-10.0, -10.0]) == 0.0
    assert neuron.propagate([0.5, 1.0]) == pytest.approx(
        (-0.3 * 0.5) + (0.8 * 1.0) + 0.5
    )


def test_neuron_output_is_never_negative() -> None:
    rng = Random(5)
    for _ in range(50):
        neuron = Neuron.random(rng, 3)
        inputs = [rng.uniform(-10.0, 10.0) for _ in range(3)]
        assert neuron.propagate(inputs) >= 0.0


def test_neuron_rejects_wrong_input_length() -> None:
    neuron = Neuron(bias=0.0, weights=(1.0, 1.0))
    with pytest.raises(ValueError):
        neuron.propagate([1.0])


def test_layer_random_builds_neurons_sequentially() -> None:
    layer = Layer.random(Random(0), 3, 2)

    reference = Random(0)
    expected = (Neuron.random(reference, 3), Neuron.random(reference, 3))

    assert layer.neurons == expected
    assert layer.num_inputs == 3
    assert layer.num_outputs == 2


def test_layer_propagate_matches_each_neuron() -> None:
    neurons = (
        Neuron(bias=-0.1, weights=(-0.1, 0.2, -0.3)),
        Neuron(bias=0.2, weights=(0.4, -0.5, 0.6)),
    )
    layer = Layer(neurons=neurons)
    inputs = [-0.5, 0.0, 0.5]

    assert layer.propagate(inputs) == [neuron.propagate(inputs) for neuron in neurons]


def test_layer_propagate_rejects_wrong_input_length() -> None:
    layer = Layer(
        neurons=(
            Neuron(bias=0.0, weights=(1.0, 2.0)),
            Neuron(bias=0.0, weights=(3.0, 4.0)),
        )
    )
    with pytest.raises(ValueError):
        layer.propagate([1.0])


def test_layer_rejects_mixed_arity() -> None:
    with pytest.raises(ValueError):
        Layer(neurons=(Neuron(0.0, (1.0,)), Neuron(0.0, (1.0, 2.0))))


def test_network_random_shapes_follow_topology() -> None:
    network = Network.random(
        Random(0),
        [LayerTopology(3), LayerTopology(2), LayerTopology(1)],
    )

    assert len(network.layers) == 2
    assert len(network.layers[0].neurons) == 2
    assert len(network.layers[0].neurons[0].weights) == 3
    assert len(network.layers[0].neurons[1].weights) == 3
    assert len(network.layers[1].neurons) == 1
    assert len(network.layers[1].neurons[0].weights) == 2
    assert [layer.neurons for layer in network.topology] == [3, 2, 1]


def test_network_random_accepts_plain_sizes() -> None:
    network = Network.random(Random(0), [4, 1])
    assert [layer.neurons for layer in network.topology] == [4, 1]


def test_network_random_is_deterministic_for_a_seed() -> None:
    first = Network.random(Random(99), [3, 4, 2])
    second = Network.random(Random(99), [3, 4, 2])

    assert first == second
    assert list(first.weights()) == list(second.weights())


@pytest.mark.parametrize("topology", [[], [3]])
def test_network_random_rejects_short_topology(topology: list[int]) -> None:
    with pytest.raises(ValueError):
        Network.random(Random(0), topology)


def test_layer_topology_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        LayerTopology(0)
    with pytest.raises(TypeError):
        LayerTopology(2.5)  # type: ignore[arg-type]


def test_network_propagate_folds_through_layers() -> None:
    layers = (
        Layer(
            neurons=(
                Neuron(bias=-0.3, weights=(-0.5, 0.4, -0.3)),
                Neuron(bias=0.1, weights=(-0.2, 0.1, 0.0)),
            )
        ),
        Layer(neurons=(Neuron(bias=0.2, weights=(-0.5, 0.5)),)),
    )
    network = Network(layers=layers)
    inputs = [-0.5, 0.6, -0.7]

    actual = network.propagate(inputs)
    expected = layers[1].propagate(layers[0].propagate(inputs))

    assert actual == pytest.approx(expected)
    assert len(actual) == 1


def test_network_propagate_is_pure() -> None:
    network = Network.random(Random(1), [3, 5, 2])
    inputs = [0.3, -0.2, 0.9]

    assert network.propagate(inputs) == network.propagate(inputs)


def test_network_propagate_rejects_wrong_input_length() -> None:
    network = Network.random(Random(0), [3, 2, 1])
    with pytest.raises(ValueError):
        network.propagate([1.0, 2.0])


def test_network_rejects_unchained_layers() -> None:
    with pytest.raises(ValueError):
        Network(
            layers=(
                Layer.random(Random(0), 3, 2),
                Layer.random(Random(0), 4, 1),
            )
        )


def test_parameter_count_counts_biases_and_weights() -> None:
    assert parameter_count([3, 2, 1]) == (3 + 1) * 2 + (2 + 1) * 1
    assert parameter_count([LayerTopology(2), LayerTopology(2)]) == 6


def test_weights_flatten_bias_before_weights() -> None:
    network = Network(
        layers=(
            Layer(
                neurons=(
                    Neuron(bias=0.1, weights=(0.2, 0.3)),
                    Neuron(bias=0.4, weights=(0.5, 0.6)),
                )
            ),
            Layer(neurons=(Neuron(bias=0.7, weights=(0.8, 0.9)),)),
        )
    )

    assert list(network.weights()) == [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9]


def test_from_weights_rebuilds_network() -> None:
    original = Network.random(Random(21), [3, 2, 1])

    rebuilt = Network.from_weights(original.topology, original.weights())

    assert rebuilt == original
    inputs = [-0.5, 0.6, -0.7]
    assert rebuilt.propagate(inputs) == original.propagate(inputs)


@pytest.mark.parametrize("count", [10, 12])
def test_from_weights_rejects_wrong_weight_count(count: int) -> None:
    with pytest.raises(ValueError):
        Network.from_weights([3, 2, 1], [0.0] * count)
