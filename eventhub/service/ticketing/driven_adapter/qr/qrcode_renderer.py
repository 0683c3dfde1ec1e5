import base64
from io import BytesIO

import qrcode

from eventhub.platform.logging.loguru_io import Logger
from eventhub.service.ticketing.app.interface.i_qr_renderer import IQrRenderer


DATA_URI_PREFIX = 'data:image/png;base64,'


class QrCodeRenderer(IQrRenderer):
    def __init__(self, *, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    @Logger.io(truncate_content=True)
    def render(self, text: str) -> str:
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        img = qr.make_image(fill_color='black', back_color='white')

        buffered = BytesIO()
        img.save(buffered, format='PNG')
        return DATA_URI_PREFIX + base64.b64encode(buffered.getvalue()).decode('ascii')
