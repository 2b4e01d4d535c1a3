"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fingerbox.domain.value_objects import BoxLayout


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all box layout exporters.

    Attributes:
        format_name: Registry key for the format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, layout: BoxLayout, path: Path) -> None:
        """Write the layout to a file.

        Args:
            layout: The box layout to export.
            path: Path where the file will be saved.
        """
        ...

    @abstractmethod
    def export_string(self, layout: BoxLayout) -> str:
        """Return the exported document as a string."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters. Used by tests."""
        cls._exporters.clear()


class ExportManager:
    """Exports one layout to one or more formats in a directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
        exporter_options: Constructor keyword arguments per format name.
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory for exported files, created on first export.
            exporter_options: Optional constructor arguments keyed by format.
        """
        self.output_dir = Path(output_dir)
        self.exporter_options = dict(exporter_options or {})

    def create_exporter(self, format_name: str) -> Exporter:
        """Instantiate the registered exporter for ``format_name``."""
        exporter_class = ExporterRegistry.get(format_name)
        options = self.exporter_options.get(format_name, {})
        return exporter_class(**options)

    def export_all(
        self,
        formats: list[str],
        layout: BoxLayout,
        project_name: str | None = None,
    ) -> dict[str, Path]:
        """Export the layout to several formats.

        Files are named ``{project_name}_{format}.{ext}``; the project name
        defaults to the box size tag (e.g. ``box-100x80x60``).

        Args:
            formats: Format names to export (e.g., ["svg", "dxf"]).
            layout: The layout to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Fail before writing anything if a format is unknown
        exporters = {name: self.create_exporter(name) for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)
        base_name = project_name or layout.parameters.slug

        results: dict[str, Path] = {}
        for format_name, exporter in exporters.items():
            filepath = self.output_dir / f"{base_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(layout, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        layout: BoxLayout,
        project_name: str | None = None,
    ) -> Path:
        """Export the layout to a single format and return the file path."""
        results = self.export_all([format_name], layout, project_name)
        return results[format_name]
