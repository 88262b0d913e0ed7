import logging
from typing import Optional

import filetype

from clipdir.content.base import ContentClassifier

logger = logging.getLogger(__name__)


class MagicByteClassifier(ContentClassifier):
    """Recognises images, archives, documents and media by their leading bytes."""

    def _sniff(self, payload: bytes) -> Optional[str]:
        if not payload:
            return None
        kind = filetype.guess(payload)
        if kind is None:
            return None
        logger.debug(f"Sniffed {kind.mime} ({kind.extension})")
        return kind.extension
