"""Where's Target? - an arcade game of tracking and shooting a wandering target."""

__version__ = "0.1.0"