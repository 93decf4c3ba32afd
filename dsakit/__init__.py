"""Classic data structures and algorithms: arrays, sorting, queues, stacks, strings and trees."""

__version__ = "0.1.0"