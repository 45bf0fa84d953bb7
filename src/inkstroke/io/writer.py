"""Writer for exported drawings.

This module provides the ExportWriter class for saving SVG documents and
raster images produced by SignatureExporter.
"""

from pathlib import Path

from PIL import Image

from inkstroke.exceptions import ExportSaveError


class ExportWriter:
    """Saves exported drawings next to a chosen output stem.

    Example:
        writer = ExportWriter(Path("out/signature"))
        writer.save_svg(svg)        # out/signature.svg
        writer.save_image(image)    # out/signature.png
    """

    def __init__(self, output_stem: Path) -> None:
        """Initialize the writer.

        Args:
            output_stem: Output path without extension
        """
        self._output_stem = output_stem

    @property
    def svg_path(self) -> Path:
        return self._with_extension(".svg")

    @property
    def image_path(self) -> Path:
        return self._with_extension(".png")

    def _with_extension(self, extension: str) -> Path:
        # The stem may itself contain dots (contract.v2-ink)
        return self._output_stem.with_name(self._output_stem.name + extension)

    def save_svg(self, svg: str) -> Path:
        """Write an SVG document.

        Returns:
            Path written

        Raises:
            ExportSaveError: If the file cannot be written
        """
        path = self.svg_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise ExportSaveError(str(path), str(e)) from e
        return path

    def save_image(self, image: Image.Image) -> Path:
        """Write a raster image as PNG.

        Zero-sized images cannot be encoded as PNG and are rejected.

        Returns:
            Path written

        Raises:
            ExportSaveError: If the image is empty or the file cannot be written
        """
        path = self.image_path
        if image.width == 0 or image.height == 0:
            raise ExportSaveError(str(path), "image is empty (canvas size is zero)")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path, format="PNG")
        except OSError as e:
            raise ExportSaveError(str(path), str(e)) from e
        return path

    @staticmethod
    def get_output_stem(input_path: Path) -> Path:
        """Generate the default output stem for a recording.

        Converts: signature.json -> signature-ink

        Args:
            input_path: Recording file path

        Returns:
            Path without extension next to the recording
        """
        return input_path.parent / f"{input_path.stem}-ink"
