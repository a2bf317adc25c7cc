"""svgcrop - CLI entry point."""

import asyncio
from pathlib import Path
from typing import Optional

import click

from svgcrop.errors import SvgCropError
from svgcrop.geometry import ORIGINS, CropRect
from svgcrop.pipeline import crop_page_svg, crop_pdf_page
from svgcrop.renderers import PyMuPdfRenderer


def _crop_options(func):
    options = [
        click.option("--x1", type=float, required=True, help="Left edge"),
        click.option("--y1", type=float, required=True, help="First Y edge"),
        click.option("--x2", type=float, required=True, help="Right edge"),
        click.option("--y2", type=float, required=True, help="Second Y edge"),
        click.option("--origin", type=click.Choice(ORIGINS), default="pdf", show_default=True,
                     help="Y axis convention of the coordinates"),
        click.option("--raster-width", type=float, default=None,
                     help="Width of the raster image the box was measured on"),
        click.option("--raster-height", type=float, default=None,
                     help="Height of the raster image the box was measured on"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _rect(x1, y1, x2, y2, origin, raster_width, raster_height) -> CropRect:
    return CropRect(
        x1=x1, y1=y1, x2=x2, y2=y2,
        origin=origin,
        raster_width=raster_width,
        raster_height=raster_height,
    )


@click.group()
def cli():
    """Render PDF pages to SVG and crop them."""


@cli.command()
@click.argument("input_svg", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_svg", type=click.Path(dir_okay=False, path_type=Path))
@_crop_options
def crop(input_svg: Path, output_svg: Path, x1: float, y1: float, x2: float, y2: float,
         origin: str, raster_width: Optional[float], raster_height: Optional[float]):
    """Crop an SVG page file to a rectangle."""
    rect = _rect(x1, y1, x2, y2, origin, raster_width, raster_height)
    try:
        svg, view_box, mapped = crop_page_svg(input_svg.read_text(encoding="utf-8"), rect)
    except SvgCropError as exc:
        raise click.ClickException(exc.message) from exc

    output_svg.parent.mkdir(parents=True, exist_ok=True)
    output_svg.write_text(svg, encoding="utf-8")
    click.echo(f"Wrote {output_svg} ({mapped.width:g} x {mapped.height:g} SVG units)")


@cli.command()
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
def render(input_pdf: Path, output_dir: Path):
    """Render every page of a PDF to page-N.svg with PyMuPDF."""
    try:
        pages = PyMuPdfRenderer().render_pages_sync(input_pdf.read_bytes())
    except SvgCropError as exc:
        raise click.ClickException(exc.message) from exc

    output_dir.mkdir(parents=True, exist_ok=True)
    for number, page_svg in enumerate(pages, start=1):
        (output_dir / f"page-{number}.svg").write_text(page_svg, encoding="utf-8")
    click.echo(f"Rendered {len(pages)} page(s) to {output_dir}")


@cli.command(name="crop-pdf")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_svg", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--page", type=int, default=1, show_default=True, help="1-based page number")
@_crop_options
def crop_pdf(input_pdf: Path, output_svg: Path, page: int, x1: float, y1: float, x2: float,
             y2: float, origin: str, raster_width: Optional[float], raster_height: Optional[float]):
    """Render a PDF locally and crop one page."""
    rect = _rect(x1, y1, x2, y2, origin, raster_width, raster_height)
    try:
        result = asyncio.run(crop_pdf_page(input_pdf.read_bytes(), rect, PyMuPdfRenderer(), page=page))
    except SvgCropError as exc:
        raise click.ClickException(exc.message) from exc

    output_svg.parent.mkdir(parents=True, exist_ok=True)
    output_svg.write_text(result.svg, encoding="utf-8")
    click.echo(f"Wrote page {result.page} crop to {output_svg}")


if __name__ == "__main__":
    cli()
