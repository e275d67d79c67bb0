"""Thermal printer integration for 58mm receipts."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from time import sleep

from foodex.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_RIGHT_GUTTER_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_TITLE_FONT_SIZE,
    PRINTER_TOTAL_FONT_SIZE,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from foodex.receipt import CENTER, ROW, SEPARATOR, TITLE, TOTAL, ReceiptLine

logger = logging.getLogger(__name__)

# Separator tuning values.
# Keep these grouped so thermal-print behavior can be tuned in one place.
_SECTION_SEPARATOR_HEIGHT_PX = 12
_SECTION_SEPARATOR_THICKNESS_PX = 2
_SECTION_SEPARATOR_STRIPE_HEIGHT_PX = 2
_SECTION_SEPARATOR_PAUSE_SECONDS = 0.05
_LINE_PADDING_PX = 8
_COLUMN_GAP_PX = 12
_FONT_OVERRIDE_ENV = "FOODEX_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. FOODEX_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        font_path = resolve_printer_font_path()
        ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def load_printer_fonts() -> dict[str, object]:
    """Load the body, title and total fonts keyed by receipt line style."""
    from PIL import ImageFont

    font_path = resolve_printer_font_path()
    body = ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    return {
        "body": body,
        TITLE: ImageFont.truetype(font_path, PRINTER_TITLE_FONT_SIZE),
        TOTAL: ImageFont.truetype(font_path, PRINTER_TOTAL_FONT_SIZE),
    }


def _text_bbox(text: str, font: object) -> tuple[int, int, int, int]:
    from PIL import Image, ImageDraw

    canvas = Image.new("1", (1, 1), color=1)
    return ImageDraw.Draw(canvas).textbbox((0, 0), text, font=font)


def _fit_text_to_px(text: str, font: object, max_width_px: int) -> str:
    if _text_bbox(text, font)[2] <= max_width_px:
        return text
    ellipsis = "..."
    trimmed = text
    while trimmed:
        candidate = f"{trimmed}{ellipsis}"
        if _text_bbox(candidate, font)[2] <= max_width_px:
            return candidate
        trimmed = trimmed[:-1]
    return ellipsis


def _line_canvas(font: object) -> tuple[object, object, int]:
    from PIL import Image, ImageDraw

    # Measure a string with ascenders and descenders so every row of a style has the same height.
    bbox = _text_bbox("Hg$", font)
    canvas_height = max(12, bbox[3] - bbox[1] + _LINE_PADDING_PX)
    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    # Offset by bbox top so descenders (g, y, p, etc.) are not clipped.
    y = (canvas_height - (bbox[3] - bbox[1])) // 2 - bbox[1]
    return img, ImageDraw.Draw(img), y


def _render_line(text: str, font: object) -> object:
    img, draw, y = _line_canvas(font)
    usable = PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX - PRINTER_RIGHT_GUTTER_PX
    draw.text((PRINTER_LEFT_INDENT_PX, y), _fit_text_to_px(text, font, usable), font=font, fill=0)
    return img


def _render_centered_line(text: str, font: object) -> object:
    img, draw, y = _line_canvas(font)
    fitted = _fit_text_to_px(text, font, PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX - PRINTER_RIGHT_GUTTER_PX)
    bbox = _text_bbox(fitted, font)
    x = (PRINTER_WIDTH_PX - (bbox[2] - bbox[0])) // 2 - bbox[0]
    draw.text((x, y), fitted, font=font, fill=0)
    return img


def _render_two_column_line(left: str, right: str, font: object) -> object:
    img, draw, y = _line_canvas(font)
    right_bbox = _text_bbox(right, font)
    right_width = right_bbox[2] - right_bbox[0]
    right_x = PRINTER_WIDTH_PX - PRINTER_RIGHT_GUTTER_PX - right_width - right_bbox[0]
    left_max = right_x - PRINTER_LEFT_INDENT_PX - _COLUMN_GAP_PX
    draw.text((PRINTER_LEFT_INDENT_PX, y), _fit_text_to_px(left, font, left_max), font=font, fill=0)
    draw.text((right_x, y), right, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _render_section_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SECTION_SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = max(0, (_SECTION_SEPARATOR_HEIGHT_PX - _SECTION_SEPARATOR_THICKNESS_PX) // 2)
    bottom = min(_SECTION_SEPARATOR_HEIGHT_PX - 1, top + _SECTION_SEPARATOR_THICKNESS_PX - 1)
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, bottom), fill=0)
    return img


def _print_section_separator(printer: object) -> None:
    """
    Print the separator in short stripes with tiny pauses.

    This keeps the instantaneous heat low so the rule stays crisp
    instead of bleeding into adjacent dots.
    """
    separator = _render_section_separator()
    for top in range(0, separator.height, _SECTION_SEPARATOR_STRIPE_HEIGHT_PX):
        bottom = min(separator.height, top + _SECTION_SEPARATOR_STRIPE_HEIGHT_PX)
        stripe = separator.crop((0, top, PRINTER_WIDTH_PX, bottom))
        printer.image(stripe)
        if bottom < separator.height:
            sleep(_SECTION_SEPARATOR_PAUSE_SECONDS)


def render_receipt_line(line: ReceiptLine, fonts: dict[str, object]) -> object:
    """Rasterize one non-separator receipt line to a 1-bit image."""
    body = fonts["body"]
    if line.style == TITLE:
        return _render_centered_line(line.left, fonts.get(TITLE, body))
    if line.style == CENTER:
        return _render_centered_line(line.left, body)
    if line.style == TOTAL:
        return _render_two_column_line(line.left, line.right, fonts.get(TOTAL, body))
    if line.style == ROW:
        return _render_two_column_line(line.left, line.right, body)
    return _render_line(line.left, body)


def open_usb_printer() -> object:
    try:
        from escpos.printer import Usb
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc
    return Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)


def print_receipt(
    lines: list[ReceiptLine],
    printer: object | None = None,
    fonts: dict[str, object] | None = None,
) -> None:
    """Print receipt lines top to bottom and cut the ticket at the end."""
    if not lines:
        return

    if printer is None:
        printer = open_usb_printer()
    if fonts is None:
        fonts = load_printer_fonts()

    logger.info("print_receipt start lines=%d", len(lines))
    for line in lines:
        if line.style == SEPARATOR:
            _print_section_separator(printer)
            continue
        printer.image(render_receipt_line(line, fonts))

    # Leave a tail so the total clears the tear bar.
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
    logger.info("print_receipt done")
