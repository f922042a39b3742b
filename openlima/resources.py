"""Resource readers and managers that load resources by name and cache them."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Optional, Union


class ResourceReader(ABC):
    """Reads resources of one type from a stream."""

    @abstractmethod
    def is_legal(self, name: str) -> bool:
        """Whether this reader can handle a resource with the given name."""

    @abstractmethod
    def read_resource(self, stream: IO) -> Any:
        """Read a resource out of the given stream."""


class ResourceManager(ABC):
    """Loads resources through registered readers and caches them weakly.

    A cached resource is handed out again only while something else still
    holds a reference to it; otherwise it is read afresh.
    """

    def __init__(self) -> None:
        self._readers: dict[type, list[ResourceReader]] = {}
        self._cache: dict[str, weakref.ref] = {}

    @abstractmethod
    def open_resource_stream(self, name: str) -> IO:
        """Open a stream to the named resource."""

    @abstractmethod
    def close_resource_stream(self, stream: IO) -> None:
        """Close a stream opened by open_resource_stream."""

    @abstractmethod
    def resource_exists(self, name: str) -> bool:
        """Whether the named resource exists."""

    def register_reader(self, resource_type: type, reader: ResourceReader) -> None:
        """Register a reader for resources of the given type."""
        self._readers.setdefault(resource_type, []).append(reader)

    def get_resource(
        self,
        resource_type: type,
        name: str,
        reader_type: Optional[type] = None,
    ) -> Any:
        """Return the named resource, from the cache when it is still alive.

        Returns None if the resource does not exist or no reader fits.
        """
        ref = self._cache.get(name)
        if ref is not None:
            cached = ref()
            if cached is not None:
                return cached
        return self.get_refreshed_resource(resource_type, name, reader_type)

    def get_refreshed_resource(
        self,
        resource_type: type,
        name: str,
        reader_type: Optional[type] = None,
    ) -> Any:
        """Read the named resource again, even if it is cached.

        Without reader_type the first registered reader whose is_legal()
        accepts the name is used; with it, the first reader of exactly that
        type. Returns None if the resource does not exist or no reader fits.
        """
        if not self.resource_exists(name):
            return None

        for reader in self._readers.get(resource_type, ()):
            if reader_type is None:
                chosen = reader.is_legal(name)
            else:
                chosen = type(reader) is reader_type
            if chosen:
                resource = self._read(reader, name)
                self._remember(name, resource)
                return resource
        return None

    def _read(self, reader: ResourceReader, name: str) -> Any:
        stream = self.open_resource_stream(name)
        try:
            return reader.read_resource(stream)
        finally:
            self.close_resource_stream(stream)

    def _remember(self, name: str, resource: Any) -> None:
        try:
            self._cache[name] = weakref.ref(resource)
        except TypeError:
            self._cache.pop(name, None)


class FileResourceManager(ResourceManager):
    """A resource manager that reads resources from files below a directory."""

    def __init__(self, parent: Union[str, Path] = "./") -> None:
        super().__init__()
        self.parent_directory = Path(parent)

    def _path(self, name: str) -> Path:
        return self.parent_directory / name

    def open_resource_stream(self, name: str) -> IO:
        """Open the named file for reading as text."""
        return open(self._path(name), "r", encoding="utf-8")

    def close_resource_stream(self, stream: IO) -> None:
        """Close the file stream."""
        stream.close()

    def resource_exists(self, name: str) -> bool:
        """Whether the named file exists."""
        return self._path(name).exists()