"""Runtime configuration defaults for the counter, receipts and printing."""

from __future__ import annotations

import os

SHOP_NAME = "Foodex Fastfood"
SHOP_TAGLINE = "Billing Receipt"
CURRENCY_SYMBOL = "$"

# Font A on 58mm paper fits 32 characters per line.
RECEIPT_COLUMNS = 32

DEBUG_LOG_PATH = os.environ.get("FOODEX_DEBUG_LOG", "/tmp/foodex-debug.log")
LOG_LEVEL = os.environ.get("FOODEX_LOG_LEVEL", "DEBUG").upper()

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
# 58mm paper at 203 dpi.
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_TITLE_FONT_SIZE = 36
PRINTER_TOTAL_FONT_SIZE = 30
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
PRINTER_RIGHT_GUTTER_PX = 8
PRINTER_TAIL_SPACER_PX = 60
