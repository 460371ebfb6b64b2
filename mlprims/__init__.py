"""Small pure-Python machine-learning primitives: activations, losses,
statistics, preprocessing, matrices, optimizers, simple networks and
supervised and unsupervised learners."""

__version__ = "0.1.0"