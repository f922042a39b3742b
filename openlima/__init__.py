"""Game engine building blocks: colours, vectors, keys, resources, meshes, scenes, lights and cameras."""

__version__ = "0.1.0"