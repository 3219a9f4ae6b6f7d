"""Fully-connected feed-forward networks with ReLU activation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise
from random import Random


def _relu(x: float) -> float:
    return x if x > 0.0 else 0.0


def _random_weight(rng: Random) -> float:
    return rng.uniform(-1.0, 1.0)


@dataclass(frozen=True, slots=True)
class LayerTopology:
    """Neuron count at one layer boundary."""

    neurons: int

    def __post_init__(self) -> None:
        if isinstance(self.neurons, bool) or not isinstance(self.neurons, int):
            msg = f"neurons must be an integer, got {self.neurons!r}"
            raise TypeError(msg)
        if self.neurons <= 0:
            msg = "neurons must be positive."
            raise ValueError(msg)

    @classmethod
    def coerce(cls, value: LayerTopology | int) -> LayerTopology:
        """Coerce an integer or LayerTopology into a LayerTopology."""
        if isinstance(value, cls):
            return value
        return cls(value)


def _coerce_topology(
    topology: Sequence[LayerTopology | int],
) -> tuple[LayerTopology, ...]:
    layers = tuple(LayerTopology.coerce(item) for item in topology)
    if len(layers) < 2:
        msg = (
            "Topology needs at least an input and an output size, "
            f"got {len(layers)} entries."
        )
        raise ValueError(msg)
    return layers


def parameter_count(topology: Sequence[LayerTopology | int]) -> int:
    """Number of biases and weights in a network of the given shape."""
    layers = _coerce_topology(topology)
    return sum(
        (inputs.neurons + 1) * outputs.neurons
        for inputs, outputs in pairwise(layers)
    )


@dataclass(frozen=True, slots=True)
class Neuron:
    """Bias plus one weight per input of the owning layer."""

    bias: float
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bias", float(self.bias))
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))

    @classmethod
    def random(cls, rng: Random, num_inputs: int) -> Neuron:
        """Draw the bias, then each weight, uniformly from [-1, 1]."""
        bias = _random_weight(rng)
        weights = tuple(_random_weight(rng) for _ in range(num_inputs))
        return cls(bias=bias, weights=weights)

    def propagate(self, inputs: Sequence[float]) -> float:
        if len(inputs) != len(self.weights):
            msg = (
                f"Expected {len(self.weights)} inputs "
                f"but received {len(inputs)}."
            )
            raise ValueError(msg)
        total = self.bias
        for value, weight in zip(inputs, self.weights, strict=True):
            total += value * weight
        return _relu(total)


@dataclass(frozen=True, slots=True)
class Layer:
    """Neurons sharing the same input vector."""

    neurons: tuple[Neuron, ...]

    def __post_init__(self) -> None:
        neurons = tuple(self.neurons)
        if not neurons:
            msg = "Layer must contain at least one neuron."
            raise ValueError(msg)
        arity = len(neurons[0].weights)
        if any(len(neuron.weights) != arity for neuron in neurons):
            msg = "All neurons in a layer must have the same number of weights."
            raise ValueError(msg)
        object.__setattr__(self, "neurons", neurons)

    @classmethod
    def random(cls, rng: Random, num_inputs: int, num_outputs: int) -> Layer:
        return cls(
            neurons=tuple(Neuron.random(rng, num_inputs) for _ in range(num_outputs))
        )

    @property
    def num_inputs(self) -> int:
        return len(self.neurons[0].weights)

    @property
    def num_outputs(self) -> int:
        return len(self.neurons)

    def propagate(self, inputs: Sequence[float]) -> list[float]:
        return [neuron.propagate(inputs) for neuron in self.neurons]


@dataclass(frozen=True, slots=True)
class Network:
    """Multi-layer perceptron evaluated layer by layer.

    Parameters are flattened, by :meth:`weights` and read back by
    :meth:`from_weights`, in layer order, then neuron order, each neuron
    contributing its bias followed by its weights. This is the contract a
    host uses to turn a network into a chromosome and back.
    """

    layers: tuple[Layer, ...]

    def __post_init__(self) -> None:
        layers = tuple(self.layers)
        if not layers:
            msg = "Network must contain at least one layer."
            raise ValueError(msg)
        for index, (previous, current) in enumerate(pairwise(layers), start=1):
            if previous.num_outputs != current.num_inputs:
                msg = (
                    f"Layer {index} expects {current.num_inputs} inputs "
                    f"but layer {index - 1} produces {previous.num_outputs}."
                )
                raise ValueError(msg)
        object.__setattr__(self, "layers", layers)

    @classmethod
    def random(
        cls,
        rng: Random,
        topology: Sequence[LayerTopology | int],
    ) -> Network:
        """Build a network with uniformly random parameters.

        Args:
            rng: Random source, consumed layer by layer in topology order.
            topology: Layer sizes, input size first and output size last.
        """
        layers = _coerce_topology(topology)
        return cls(
            layers=tuple(
                Layer.random(rng, inputs.neurons, outputs.neurons)
                for inputs, outputs in pairwise(layers)
            )
        )

    @classmethod
    def from_weights(
        cls,
        topology: Sequence[LayerTopology | int],
        weights: Iterable[float],
    ) -> Network:
        """Rebuild a network from parameters flattened by :meth:`weights`."""
        layers = _coerce_topology(topology)
        values = list(weights)
        expected = parameter_count(layers)
        if len(values) != expected:
            msg = (
                f"Topology {[layer.neurons for layer in layers]} needs "
                f"{expected} weights but received {len(values)}."
            )
            raise ValueError(msg)

        cursor = iter(values)
        built: list[Layer] = []
        for inputs, outputs in pairwise(layers):
            neurons = []
            for _ in range(outputs.neurons):
                bias = next(cursor)
                neuron_weights = tuple(next(cursor) for _ in range(inputs.neurons))
                neurons.append(Neuron(bias=bias, weights=neuron_weights))
            built.append(Layer(neurons=tuple(neurons)))
        return cls(layers=tuple(built))

    @property
    def topology(self) -> tuple[LayerTopology, ...]:
        sizes = [self.layers[0].num_inputs]
        sizes.extend(layer.num_outputs for layer in self.layers)
        return tuple(LayerTopology(size) for size in sizes)

    def weights(self) -> Iterator[float]:
        """Yield every bias and weight in the flattening order."""
        for layer in self.layers:
            for neuron in layer.neurons:
                yield neuron.bias
                yield from neuron.weights

    def propagate(self, inputs: Sequence[float]) -> list[float]:
        """Run a forward pass and return the last layer's outputs."""
        expected = self.layers[0].num_inputs
        if len(inputs) != expected:
            msg = f"Expected {expected} inputs but received {len(inputs)}."
            raise ValueError(msg)
        values = list(inputs)
        for layer in self.layers:
            values = layer.propagate(values)
        return values


__all__ = [
    "Layer",
    "LayerTopology",
    "Network",
    "Neuron",
    "parameter_count",
]
