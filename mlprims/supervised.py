"""Small supervised learners: regressions, k-NN, trees, SVM scoring, naive Bayes."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from mlprims.activation import sigmoid

__all__ = [
    "linear_regression",
    "logistic_regression",
    "euclidean_distance",
    "knn_classify",
    "Node",
    "predict_decision_tree",
    "RandomForest",
    "svm_predict",
    "naive_bayes_predict",
]


def _paired(x: Iterable[float], y: Iterable[float]) -> list[tuple[float, float]]:
    try:
        pairs = list(zip(x, y, strict=True))
    except ValueError:
        raise ValueError("inputs must have the same length") from None
    if not pairs:
        raise ValueError("at least one sample is required")
    return pairs


def _majority(labels: Iterable[int]) -> int:
    """Return the most common label, the smallest on ties, or -1 if none."""
    counts = Counter(labels)
    if not counts:
        return -1
    return min(counts, key=lambda label: (-counts[label], label))


def linear_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Return (slope, intercept) of the least-squares line through the points."""
    pairs = _paired(x, y)
    n = len(pairs)
    x_mean = sum(a for a, _ in pairs) / n
    y_mean = sum(b for _, b in pairs) / n
    numerator = sum((a - x_mean) * (b - y_mean) for a, b in pairs)
    denominator = sum((a - x_mean) ** 2 for a, _ in pairs)
    if denominator == 0.0:
        raise ValueError("x values must not all be equal")
    slope = numerator / denominator
    return slope, y_mean - slope * x_mean


def logistic_regression(
    x: Sequence[float],
    y: Sequence[int],
    weight: float,
    learning_rate: float,
    epochs: int,
) -> float:
    """Fit the single weight of sigmoid(weight * x) by gradient ascent."""
    pairs = _paired(x, y)
    for _ in range(epochs):
        gradient = sum((label - sigmoid(weight * xi)) * xi for xi, label in pairs)
        weight += learning_rate * gradient / len(pairs)
    return weight


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    try:
        pairs = zip(a, b, strict=True)
        return math.sqrt(sum((p - q) ** 2 for p, q in pairs))
    except ValueError:
        raise ValueError("points must have the same dimension") from None


def knn_classify(
    data_points: Sequence[Sequence[float]],
    labels: Sequence[int],
    query_point: Sequence[float],
    k: int,
) -> int:
    """Return the majority label among the k points nearest to query_point.

    Ties in the vote go to the smallest label; k == 0 yields -1.
    """
    if len(data_points) != len(labels):
        raise ValueError("every data point needs a label")
    if not 0 <= k <= len(data_points):
        raise ValueError(f"k must lie between 0 and {len(data_points)}")
    ranked = sorted(
        zip(data_points, labels),
        key=lambda item: euclidean_distance(item[0], query_point),
    )
    return _majority(label for _, label in ranked[:k])


@dataclass
class Node:
    """A decision-tree node; a node without children is a leaf holding label."""

    feature_index: int
    threshold: float
    label: int
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def predict_decision_tree(node: Node, features: Sequence[float]) -> int:
    """Walk the tree: left when the feature is <= threshold, right otherwise."""
    while not node.is_leaf:
        branch = node.left if features[node.feature_index] <= node.threshold else node.right
        if branch is None:
            raise ValueError("decision tree node is missing a child")
        node = branch
    return node.label


@dataclass
class RandomForest:
    """An ensemble of decision trees that vote on the label."""

    trees: list[Node] = field(default_factory=list)

    def predict(self, features: Sequence[float]) -> int:
        """Return the majority vote of the trees, smallest label on ties, -1 if empty."""
        return _majority(predict_decision_tree(tree, features) for tree in self.trees)


def svm_predict(
    weights: Sequence[float], bias: float, features: Sequence[float]
) -> float:
    """Return the linear SVM decision value weights . features + bias."""
    try:
        pairs = zip(weights, features, strict=True)
        return sum((w * f for w, f in pairs), 0.0) + bias
    except ValueError:
        raise ValueError("weights and features must have the same length") from None


def _log(x: float) -> float:
    if x == 0.0:
        return -math.inf
    return math.log(x)


def naive_bayes_predict(
    features: Sequence[float],
    means: Sequence[Sequence[float]],
    variances: Sequence[Sequence[float]],
    priors: Sequence[float],
) -> int:
    """Return the class with the largest Gaussian log-posterior, first on ties.

    means and variances hold one row of per-feature values for each class.
    """
    num_classes = len(priors)
    if num_classes == 0:
        raise ValueError("at least one class is required")
    if len(means) != num_classes or len(variances) != num_classes:
        raise ValueError("means and variances need one row per class")
    best_class, best_posterior = 0, -math.inf
    for index, (prior, class_means, class_vars) in enumerate(
        zip(priors, means, variances)
    ):
        if prior < 0.0:
            raise ValueError("priors must not be negative")
        if len(class_means) != len(features) or len(class_vars) != len(features):
            raise ValueError("each class row needs one value per feature")
        posterior = _log(prior)
        for value, mu, var in zip(features, class_means, class_vars):
            if var <= 0.0:
                raise ValueError("variances must be positive")
            diff = value - mu
            posterior += -0.5 * math.log(2 * math.pi * var) - diff * diff / (2 * var)
        if index == 0 or posterior > best_posterior:
            best_class, best_posterior = index, posterior
    return best_class