"""Default nested dependency called by forward()."""


def deep_fn(x):
    return x * 2
