# mlprims

Small, dependency-free machine-learning primitives written in plain Python.
Functions take ordinary sequences of floats (vectors) or lists of lists
(row-major matrices) and return new lists; inputs are never changed in place.
Mismatched lengths, empty data and undefined results (such as scaling
constant data) raise `ValueError`.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `mlprims.activation` | `sigmoid`, `relu`, `tanh_activation` |
| `mlprims.linalg` | `dot_product`, `vector_addition`, `vector_subtraction`, `mean_squared_error`, `cross_entropy_loss` |
| `mlprims.stats` | `mean`, `median`, `mode`, `variance`, `standard_deviation`, `covariance`, `correlation_coefficient` |
| `mlprims.preprocessing` | `normalize`, `standardize`, `min_max_scaling`, `one_hot_encode` |
| `mlprims.matrix` | `determinant`, `invert_matrix`, `matrix_multiply`, `transpose_matrix`, `SingularMatrixError` |
| `mlprims.momentum` | `MomentumOptimizer` |
| `mlprims.optimization` | `AdamOptimizer`, `gradient_descent`, `LearningRateSchedule` |
| `mlprims.regularization` | `apply_l2_regularization` |
| `mlprims.network` | `DenseLayer`, `NeuralNetwork` |
| `mlprims.feedforward` | `Perceptron`, `FeedforwardNN` |
| `mlprims.supervised` | `linear_regression`, `logistic_regression`, `euclidean_distance`, `knn_classify`, `Node`, `predict_decision_tree`, `RandomForest`, `svm_predict`, `naive_bayes_predict` |
| `mlprims.unsupervised` | `kmeans_clustering`, `hierarchical_clustering`, `HierarchicalClusteringResult` |

Some behaviour worth knowing:

- `variance`, `standard_deviation` and `covariance` are population statistics
  (divided by n). `mode` returns the earliest value on ties.
- `normalize` returns z-scores; `standardize` rescales onto [0, 1];
  `min_max_scaling` rescales onto any range. `one_hot_encode` gives a row of
  zeros for a category outside `range(category_size)`.
- `determinant` uses cofactor expansion. `invert_matrix` uses Gauss-Jordan
  elimination without row exchanges and raises `SingularMatrixError` (a
  `ValueError`) on any zero pivot, even for some invertible matrices.
- `LearningRateSchedule` is a step decay: the rate is multiplied by
  `decay_rate` once every `decay_steps` calls to `step()`.
- `DenseLayer` layers in `NeuralNetwork` have no activation function.
  `FeedforwardNN` and `Perceptron` use sigmoid.
- `knn_classify` and `RandomForest.predict` break vote ties towards the
  smallest label.
- `kmeans_clustering(data, centroids, max_iterations=100, tolerance=1e-4)`
  returns `(labels, centroids)`; a cluster that receives no points gets NaN
  coordinates.

## Examples

```python
from mlprims.linalg import dot_product, mean_squared_error
from mlprims.stats import mean, median
from mlprims.matrix import determinant, invert_matrix, SingularMatrixError

dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])        # 32.0
mean_squared_error([1.0, 0.0, 1.0], [0.8, 0.2, 0.6])
median([3.0, 1.0, 2.0, 4.0])                          # 2.5

determinant([[1.0, 2.0], [3.0, 4.0]])                 # -2.0
try:
    inverse = invert_matrix([[1.0, 2.0], [3.0, 4.0]])
except SingularMatrixError:
    inverse = None
```

Optimizers keep their state between calls and return the updated weights:

```python
from mlprims.momentum import MomentumOptimizer
from mlprims.optimization import AdamOptimizer, LearningRateSchedule

weights = [0.5, 0.2, -0.3]
gradients = [0.1, -0.2, 0.3]

adam = AdamOptimizer(3, 0.9, 0.999, 1e-8)
schedule = LearningRateSchedule(0.01, 0.96, 100)
for _ in range(10):
    rate = schedule.current_rate()
    schedule.step()
    weights = adam.apply(weights, gradients, rate)
```

Networks take a `random.Random` instance so that their initial weights are
reproducible:

```python
import random
from mlprims.network import NeuralNetwork

net = NeuralNetwork([2, 3, 1], random.Random(0))
net.train([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]],
          [0.0, 1.0, 1.0, 0.0], epochs=1000, learning_rate=0.01)
print(net.forward([1.0, 0.0]))
```

Clustering:

```python
from mlprims.unsupervised import kmeans_clustering

points = [[1.0, 2.0], [1.5, 1.8], [5.0, 8.0], [8.0, 8.0]]
labels, centroids = kmeans_clustering(points, [[1.0, 2.0], [5.0, 8.0]])
```

## Demonstration

The `mlprims` command takes no options. It runs a short tour of the library
on small fixed inputs and prints the results: activations, a dot product,
losses, vector and matrix operations, preprocessing, a momentum update, a
learning-rate schedule over 20 steps and summary statistics.

```
mlprims
```

## What it does not do

- There is no dimensionality reduction (PCA, t-SNE), no Gaussian mixture
  model and no convolutional network.
- `hierarchical_clustering` computes the pairwise distance matrix but does
  not merge clusters: every point stays in its own cluster.
- Decision trees and random forests are evaluated, not learned: build the
  `Node` trees yourself.
- Models cannot be saved or loaded, and the demonstration command does not
  read any data of its own.

## Running the tests

```
pip install ".[test]"
pytest
```