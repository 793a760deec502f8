"""QR code rendering for authorization request URIs."""

import io

import qrcode
from PIL import Image


def generate_qr_png(data: str | None, width: int = 300, height: int = 300) -> bytes:
    """Render data as a black-on-white QR code PNG of width x height pixels.

    Uses error correction level M and a one-module quiet zone. The code is
    scaled by a whole number of pixels per module and centered; the image grows
    past width x height only when the code does not fit at one pixel per module.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be positive")

    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=1)
    qr.add_data(data or "")
    qr.make(fit=True)
    matrix = qr.get_matrix()

    modules = len(matrix)
    scale = max(1, min(width, height) // modules)
    side = modules * scale

    code = Image.new("RGB", (modules, modules), "white")
    for y, row in enumerate(matrix):
        for x, dark in enumerate(row):
            if dark:
                code.putpixel((x, y), (0, 0, 0))
    code = code.resize((side, side), Image.Resampling.NEAREST)

    canvas = Image.new("RGB", (max(width, side), max(height, side)), "white")
    canvas.paste(code, ((canvas.width - side) // 2, (canvas.height - side) // 2))

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()
