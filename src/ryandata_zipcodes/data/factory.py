from __future__ import annotations

from typing import Any, ClassVar

from ryandata_zipcodes.protocols import DataSourceProtocol


class DataSourceFactory:
    """Factory for creating data source instances.

    Supports registration of custom data source types and creation
    of data sources by type name.

    Example:
        >>> source = DataSourceFactory.create()
        >>> source = DataSourceFactory.create("file", path="/path/to/zips.json.bz2")

        # Register custom source
        >>> DataSourceFactory.register("sqlite", SQLiteDataSource)
        >>> source = DataSourceFactory.create("sqlite", db_path="zips.db")
    """

    _registry: ClassVar[dict[str, type[DataSourceProtocol]]] = {}
    _default_type: ClassVar[str] = "bundled"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default data sources are registered."""
        if "bundled" not in cls._registry:
            from ryandata_zipcodes.data.bundled import BundledDataSource

            cls._registry["bundled"] = BundledDataSource
        if "file" not in cls._registry:
            from ryandata_zipcodes.data.file_source import FileDataSource

            cls._registry["file"] = FileDataSource

    @classmethod
    def register(cls, name: str, impl_class: type[DataSourceProtocol]) -> None:
        """Register a data source type.

        Args:
            name: Type name for the data source.
            impl_class: Class implementing DataSourceProtocol.
        """
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a data source type.

        Args:
            name: Type name to unregister.
        """
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, source_type: str | None = None, **kwargs: Any) -> DataSourceProtocol:
        """Create a data source instance.

        Note that ``create("bundled")`` builds a new, separately loaded
        instance; use ``get_default_data_source()`` for the shared one.

        Args:
            source_type: Type of data source to create. Defaults to "bundled".
            **kwargs: Arguments to pass to the data source constructor.

        Returns:
            Data source instance.

        Raises:
            ValueError: If the source type is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = source_type if source_type is not None else cls._default_type

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(f"Unknown data source type: {type_name}. Available types: {available}")

        return cls._registry[type_name](**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        """Get list of available data source types.

        Returns:
            List of registered type names.
        """
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
