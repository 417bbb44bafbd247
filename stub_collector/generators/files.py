"""Attachment provisioning for generated transactions and items.

Loading sample binaries (copying images and invoices to temporary
storage) belongs to the host. Generators only ask a provider for a
:class:`FileRef` and store whatever opaque handle it returns.
"""

from __future__ import annotations

import random
from typing import Protocol

from stub_collector.models import FileRef, FileType


class FileProvider(Protocol):
    """Source of attachments."""

    def image(self) -> FileRef: ...

    def invoice(self) -> FileRef: ...

    def loyalty_card_cover(self) -> FileRef: ...


class SampleFileProvider:
    """Hand out references to the bundled sample resources.

    Handles are resource names under ``samples/``; no file is read or
    copied.

    Parameters
    ----------
    rng : random.Random | None
        Random source used to pick sample images.
    """

    RESOURCE_PATH = "samples/"

    IMAGES = [
        "product-backpack.jpg",
        "product-headphones.png",
        "product-keyboard.webp",
        "product-perfume.jpeg",
        "product-teddy-bear.avif",
        "product-wine.jpg",
    ]

    IMAGE_MIME_TYPES = {
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "webp": "image/webp",
        "avif": "image/avif",
    }

    INVOICE = "invoice.pdf"
    LOYALTY_CARD_COVER = "loyalty-card.png"

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def image(self) -> FileRef:
        name = self.rng.choice(self.IMAGES)
        return FileRef(
            file_type=FileType.IMAGE,
            title="Cover of the image",
            mime_type=self._mime_type(name),
            handle=self.RESOURCE_PATH + name,
        )

    def invoice(self) -> FileRef:
        return FileRef(
            file_type=FileType.INVOICE,
            title="Invoice",
            mime_type="application/pdf",
            handle=self.RESOURCE_PATH + self.INVOICE,
        )

    def loyalty_card_cover(self) -> FileRef:
        return FileRef(
            file_type=FileType.IMAGE,
            title="Card cover",
            mime_type="image/png",
            handle=self.RESOURCE_PATH + self.LOYALTY_CARD_COVER,
        )

    def _mime_type(self, name: str) -> str:
        extension = name.rsplit(".", 1)[-1].lower()
        return self.IMAGE_MIME_TYPES.get(extension, "application/octet-stream")
